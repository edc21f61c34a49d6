from events.handlers.views import (
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

__all__ = [
    "EventDetailView",
    "EventHighlightsView",
    "EventListView",
    "EventRegistrationView",
    "LoginView",
    "LogoutView",
    "MeView",
    "MyRegistrationsView",
    "MyStudentView",
    "SignupView",
]
