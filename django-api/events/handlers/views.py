"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain error mapping to the DRF exception handler
- Never contain business logic
- Never expose internal error details
"""

import logging

from django.contrib.auth import get_user_model, login, logout
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.handlers.context import (
    ViewerMixin,
    auth_service,
    event_service,
    registration_service,
)
from events.handlers.serializers import (
    DashboardEntrySerializer,
    EventListingSerializer,
    EventWriteSerializer,
    LoginSerializer,
    ProfileSerializer,
    RegistrationSerializer,
    SignupSerializer,
    StudentDetailsSerializer,
    StudentSerializer,
)

logger = logging.getLogger(__name__)

DEFAULT_HIGHLIGHTS = 3


def _registered_ids(viewer) -> list[str]:
    return sorted(str(event_id) for event_id in viewer.registered_event_ids)


def _editable_fields(listing) -> dict:
    event = listing.event
    return {
        "title": event.title,
        "description": event.description,
        "date": event.date.isoformat(),
        "time": event.start_time.strftime("%H:%M") if event.start_time else None,
        "end_time": event.end_time.strftime("%H:%M") if event.end_time else None,
        "location": event.location,
        "university_name": event.university_name,
        "image": event.image_url,
    }


class EventListView(ViewerMixin, APIView):
    """Handler for GET/POST /api/events"""

    def get_permissions(self):
        if self.request.method == "POST":
            return [IsAuthenticated()]
        return [AllowAny()]

    def get(self, request: Request) -> Response:
        listings = event_service().list_events(
            self.get_viewer(), request.query_params.get("status", "all")
        )
        return Response({"results": EventListingSerializer(listings, many=True).data})

    def post(self, request: Request) -> Response:
        serializer = EventWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        listing = event_service().create_event(self.get_viewer(), serializer.to_draft())
        return Response(EventListingSerializer(listing).data, status=status.HTTP_201_CREATED)


class EventHighlightsView(ViewerMixin, APIView):
    """Handler for GET /api/events/highlights"""

    def get(self, request: Request) -> Response:
        try:
            limit = max(int(request.query_params.get("limit", DEFAULT_HIGHLIGHTS)), 0)
        except ValueError:
            limit = DEFAULT_HIGHLIGHTS
        listings = event_service().highlights(self.get_viewer(), limit=limit)
        return Response({"results": EventListingSerializer(listings, many=True).data})


class EventDetailView(ViewerMixin, APIView):
    """Handler for GET/PUT/PATCH/DELETE /api/events/{event_id}"""

    def get_permissions(self):
        if self.request.method == "GET":
            return [AllowAny()]
        return [IsAuthenticated()]

    def get(self, request: Request, event_id: str) -> Response:
        listing = event_service().get_event(event_id, self.get_viewer())
        return Response(EventListingSerializer(listing).data)

    def put(self, request: Request, event_id: str) -> Response:
        return self._update(event_id, request.data)

    def patch(self, request: Request, event_id: str) -> Response:
        current = event_service().get_event(event_id, self.get_viewer())
        merged = _editable_fields(current)
        merged.update(request.data.items())
        return self._update(event_id, merged)

    def delete(self, request: Request, event_id: str) -> Response:
        event_service().delete_event(self.get_viewer(), event_id)
        return Response(status=status.HTTP_204_NO_CONTENT)

    def _update(self, event_id: str, data) -> Response:
        serializer = EventWriteSerializer(data=data)
        serializer.is_valid(raise_exception=True)
        listing = event_service().update_event(self.get_viewer(), event_id, serializer.to_draft())
        return Response(EventListingSerializer(listing).data)


class EventRegistrationView(ViewerMixin, APIView):
    """Handler for POST/DELETE /api/events/{event_id}/registration

    Responses carry the caller's registered event ids as re-read from the
    store after the write.
    """

    permission_classes = [IsAuthenticated]

    def post(self, request: Request, event_id: str) -> Response:
        serializer = StudentDetailsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        registration = registration_service().register(
            self.get_viewer(),
            event_id,
            serializer.to_details(),
            year_confirmed=serializer.validated_data["year_confirmed"],
            remember_contact=serializer.validated_data["remember_contact"],
        )
        return Response(self._after_write(event_id, registration), status=status.HTTP_201_CREATED)

    def delete(self, request: Request, event_id: str) -> Response:
        registration_service().cancel(self.get_viewer(), event_id)
        return Response(self._after_write(event_id))

    def _after_write(self, event_id: str, registration=None) -> dict:
        viewer = self.get_viewer(refresh=True)
        body = {
            "event": EventListingSerializer(event_service().get_event(event_id, viewer)).data,
            "registered_event_ids": _registered_ids(viewer),
        }
        if registration is not None:
            body["registration"] = RegistrationSerializer(registration).data
        return body


class MyRegistrationsView(ViewerMixin, APIView):
    """Handler for GET /api/me/registrations"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        entries = registration_service().dashboard(self.get_viewer())
        return Response({"results": DashboardEntrySerializer(entries, many=True).data})


class MyStudentView(ViewerMixin, APIView):
    """Handler for GET /api/me/student"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        student = registration_service().saved_student(self.get_viewer())
        if student is None:
            return Response({"student": None})
        return Response({"student": StudentSerializer(student).data})


class SignupView(APIView):
    """Handler for POST /api/auth/signup"""

    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        serializer = SignupSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        profile = auth_service().sign_up(
            data["name"], data["email"], data["password"], data["confirm_password"]
        )
        return Response(ProfileSerializer(profile).data, status=status.HTTP_201_CREATED)


class LoginView(APIView):
    """Handler for POST /api/auth/login"""

    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        profile = auth_service().log_in(data["email"], data["password"], data["role"])
        user = get_user_model().objects.get(pk=profile.user_id)
        login(request, user, backend="django.contrib.auth.backends.ModelBackend")
        logger.info("User %s logged in as %s", profile.user_id, profile.role.value)
        return Response(ProfileSerializer(profile).data)


class LogoutView(APIView):
    """Handler for POST /api/auth/logout"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request) -> Response:
        logout(request)
        return Response(status=status.HTTP_204_NO_CONTENT)


class MeView(APIView):
    """Handler for GET /api/auth/me"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        profile = auth_service().current_profile(request.user.pk)
        return Response(ProfileSerializer(profile).data)
