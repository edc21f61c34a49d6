"""Serializers for request input and domain model responses."""

from rest_framework import serializers

from events.domain import EventDraft
from events.domain.formatting import format_date, format_time_range
from events.services.registration_service import StudentDetails


class EventWriteSerializer(serializers.Serializer):
    """Input for creating or replacing an event."""

    title = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    date = serializers.DateField()
    time = serializers.TimeField()
    end_time = serializers.TimeField(required=False, allow_null=True, default=None)
    location = serializers.CharField(required=False, allow_blank=True, default="", max_length=255)
    university_name = serializers.CharField(required=False, allow_blank=True, default="", max_length=255)
    image = serializers.URLField(required=False, allow_blank=True, allow_null=True, default=None)

    def to_draft(self) -> EventDraft:
        data = self.validated_data
        return EventDraft(
            title=data["title"],
            description=data["description"],
            date=data["date"],
            start_time=data["time"],
            end_time=data["end_time"],
            location=data["location"],
            university_name=data["university_name"],
            image_url=data["image"] or None,
        )


class AdminControlsSerializer(serializers.Serializer):
    can_edit = serializers.BooleanField()
    can_delete = serializers.BooleanField()


class EventListingSerializer(serializers.Serializer):
    """Serializer for an EventListing: the event plus its derived state."""

    id = serializers.CharField(source="event.id")
    title = serializers.CharField(source="event.title")
    description = serializers.CharField(source="event.description")
    date = serializers.DateField(source="event.date")
    time = serializers.TimeField(source="event.start_time", format="%H:%M")
    end_time = serializers.TimeField(source="event.end_time", format="%H:%M", allow_null=True)
    location = serializers.CharField(source="event.location")
    university_name = serializers.CharField(source="event.university_name")
    image = serializers.CharField(source="event.image_url", allow_null=True)
    formatted_date = serializers.SerializerMethodField()
    time_range = serializers.SerializerMethodField()
    status = serializers.CharField(source="status.value")
    action = serializers.CharField(source="action.value")
    action_label = serializers.CharField(source="action.label")
    is_registered = serializers.BooleanField()
    controls = AdminControlsSerializer(allow_null=True)

    def get_formatted_date(self, listing) -> str:
        return format_date(listing.event.date)

    def get_time_range(self, listing) -> str:
        return format_time_range(listing.event.start_time, listing.event.end_time)


class TicketSerializer(serializers.Serializer):
    ticket_id = serializers.CharField()
    qr = serializers.CharField(source="qr_data_url", allow_null=True)
    issued_at = serializers.DateTimeField()


class RegistrationSerializer(serializers.Serializer):
    id = serializers.CharField()
    event_id = serializers.CharField()
    created_at = serializers.DateTimeField()
    ticket = TicketSerializer(allow_null=True)


class DashboardEntrySerializer(serializers.Serializer):
    registration = RegistrationSerializer()
    event = EventListingSerializer(source="listing")


class StudentDetailsSerializer(serializers.Serializer):
    """Student form input. Completeness is checked by the domain."""

    roll_number = serializers.CharField(required=False, allow_blank=True, default="")
    name = serializers.CharField(required=False, allow_blank=True, default="")
    email = serializers.CharField(required=False, allow_blank=True, default="")
    mobile = serializers.CharField(required=False, allow_blank=True, default="")
    course = serializers.CharField(required=False, allow_blank=True, default="")
    year = serializers.CharField(required=False, allow_blank=True, default="")
    year_confirmed = serializers.BooleanField(required=False, default=False)
    remember_contact = serializers.BooleanField(required=False, default=False)

    def to_details(self) -> StudentDetails:
        data = self.validated_data
        return StudentDetails(
            roll_number=data["roll_number"],
            name=data["name"],
            email=data["email"],
            mobile=data["mobile"],
            course=data["course"],
            year=data["year"],
        )


class StudentSerializer(serializers.Serializer):
    roll_number = serializers.CharField(source="roll_number.value")
    name = serializers.CharField()
    email = serializers.CharField()
    mobile = serializers.CharField()
    course = serializers.CharField()
    year = serializers.IntegerField(source="year.value")


class SignupSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    email = serializers.CharField(max_length=255)
    password = serializers.CharField(write_only=True)
    confirm_password = serializers.CharField(write_only=True)


class LoginSerializer(serializers.Serializer):
    email = serializers.CharField(max_length=255)
    password = serializers.CharField(write_only=True)
    role = serializers.CharField(required=False, default="student")


class ProfileSerializer(serializers.Serializer):
    id = serializers.IntegerField(source="user_id")
    name = serializers.CharField()
    email = serializers.CharField()
    role = serializers.CharField(source="role.value")
