"""Request-scoped wiring: stores, services and the viewer context.

The viewer (identity, role, registered event ids) is resolved once per
request here and handed to services explicitly.
"""

from rest_framework.request import Request

from events.domain import ANONYMOUS, ViewerContext
from events.services import clock
from events.services.auth_service import AuthService
from events.services.event_service import EventService
from events.services.registration_service import RegistrationService
from events.stores.django_store import (
    DjangoEventStore,
    DjangoRegistrationStore,
    DjangoStudentStore,
    DjangoUserStore,
)


def event_service() -> EventService:
    return EventService(DjangoEventStore(), clock=clock.local_now)


def registration_service() -> RegistrationService:
    return RegistrationService(
        events=DjangoEventStore(),
        registrations=DjangoRegistrationStore(),
        students=DjangoStudentStore(),
        users=DjangoUserStore(),
        clock=clock.local_now,
    )


def auth_service() -> AuthService:
    return AuthService(DjangoUserStore())


def build_viewer(request: Request) -> ViewerContext:
    user = request.user
    if not user or not user.is_authenticated:
        return ANONYMOUS
    profile = DjangoUserStore().get_profile(user.pk)
    return ViewerContext(
        user_id=user.pk,
        role=profile.role if profile is not None else None,
        registered_event_ids=DjangoRegistrationStore().registered_event_ids(user.pk),
    )


class ViewerMixin:
    """Gives an APIView a single, lazily built ViewerContext per request."""

    _viewer: ViewerContext | None = None

    def get_viewer(self, refresh: bool = False) -> ViewerContext:
        if self._viewer is None or refresh:
            self._viewer = build_viewer(self.request)
        return self._viewer
