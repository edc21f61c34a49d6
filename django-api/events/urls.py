from django.urls import path

from events.handlers import (
    EventDetailView,
    EventHighlightsView,
    EventListView,
    EventRegistrationView,
    LoginView,
    LogoutView,
    MeView,
    MyRegistrationsView,
    MyStudentView,
    SignupView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/highlights", EventHighlightsView.as_view(), name="event-highlights"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:event_id>/registration",
        EventRegistrationView.as_view(),
        name="event-registration",
    ),
    path("me/registrations", MyRegistrationsView.as_view(), name="my-registrations"),
    path("me/student", MyStudentView.as_view(), name="my-student"),
    path("auth/signup", SignupView.as_view(), name="auth-signup"),
    path("auth/login", LoginView.as_view(), name="auth-login"),
    path("auth/logout", LogoutView.as_view(), name="auth-logout"),
    path("auth/me", MeView.as_view(), name="auth-me"),
]
