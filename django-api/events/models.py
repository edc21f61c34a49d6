"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/.
"""

import uuid

from django.conf import settings
from django.db import models


class Event(models.Model):
    """Persistence model for events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    date = models.DateField()
    time = models.TimeField()
    end_time = models.TimeField(blank=True, null=True)
    location = models.CharField(max_length=255, blank=True, default="")
    university_name = models.CharField(max_length=255, blank=True, default="")
    image = models.URLField(max_length=500, blank=True, null=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="created_events",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["date", "time"]
        indexes = [
            models.Index(fields=["date"], name="events_event_date_idx"),
        ]

    def __str__(self) -> str:
        return self.title


class Student(models.Model):
    """Persistence model for student profiles, unique by roll number."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    roll_number = models.CharField(max_length=64, unique=True)
    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=255)
    mobile = models.CharField(max_length=32)
    course = models.CharField(max_length=100)
    year = models.PositiveSmallIntegerField()
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(fields=["email"], name="events_student_email_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.roll_number} - {self.name}"


class Registration(models.Model):
    """Persistence model for the user/event registration relation."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="registrations"
    )
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="registrations")
    ticket_id = models.CharField(max_length=64, blank=True, null=True, unique=True)
    ticket_qr = models.TextField(blank=True, null=True)
    ticket_issued_at = models.DateTimeField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at"]
        constraints = [
            models.UniqueConstraint(fields=["user", "event"], name="unique_user_event_registration"),
        ]

    def __str__(self) -> str:
        return f"{self.user_id} -> {self.event_id}"


class UserProfile(models.Model):
    """Persistence model for the per-account profile row."""

    ROLE_CHOICES = [("student", "Student"), ("admin", "Admin")]

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="profile"
    )
    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=255)
    role = models.CharField(max_length=16, choices=ROLE_CHOICES, default="student")
    saved_roll = models.CharField(max_length=64, blank=True, null=True)
    saved_email = models.EmailField(max_length=255, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self) -> str:
        return f"{self.name} ({self.role})"
