"""Account sign-up and role-checked login."""

import logging

from events.domain import Role, UserProfile
from events.domain.errors import (
    EmailTakenError,
    InvalidCredentialsError,
    InvalidEmailError,
    PasswordMismatchError,
    ProfileNotFoundError,
    RoleMismatchError,
    ValidationFailedError,
)
from events.domain.validation import is_gmail_email, normalize_email
from events.stores.interfaces import UserStore

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, users: UserStore) -> None:
        self._users = users

    def sign_up(self, name: str, email: str, password: str, confirm_password: str) -> UserProfile:
        """Create a student account.

        Only exact ``@gmail.com`` addresses are accepted; the email is
        trimmed and lower-cased before it is stored.
        """
        normalized = normalize_email(email)
        if not name.strip():
            raise ValidationFailedError("Name is required")
        if not is_gmail_email(normalized):
            raise InvalidEmailError()
        if not password:
            raise ValidationFailedError("Password is required")
        if password != confirm_password:
            raise PasswordMismatchError()
        if self._users.email_exists(normalized):
            raise EmailTakenError()

        profile = self._users.create_account(name.strip(), normalized, password, Role.STUDENT)
        logger.info("Account created for user %s", profile.user_id)
        return profile

    def log_in(self, email: str, password: str, requested_role: str | None) -> UserProfile:
        """Authenticate and require the profile role to match the requested one.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password.
            ProfileNotFoundError: The account has no profile row.
            RoleMismatchError: The account role differs from the requested role.
        """
        user_id = self._users.authenticate(normalize_email(email), password)
        if user_id is None:
            raise InvalidCredentialsError()

        profile = self._users.get_profile(user_id)
        if profile is None:
            logger.warning("Login for user %s without a profile row", user_id)
            raise ProfileNotFoundError()

        requested = (requested_role or "student").strip().lower()
        if profile.role.value != requested:
            logger.info("Role mismatch on login for user %s", user_id)
            raise RoleMismatchError(profile.role.value, requested)
        return profile

    def current_profile(self, user_id: int) -> UserProfile:
        profile = self._users.get_profile(user_id)
        if profile is None:
            raise ProfileNotFoundError()
        return profile
