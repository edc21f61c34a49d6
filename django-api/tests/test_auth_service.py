"""Unit tests for AuthService."""

import pytest

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
from events.services.auth_service import AuthService


@pytest.fixture
def service(user_store):
    return AuthService(user_store)


class TestSignUp:
    def test_creates_student_with_normalized_email(self, service, user_store):
        profile = service.sign_up(" Ravi ", "  Ravi.K@Gmail.COM ", "pw-123", "pw-123")
        assert profile.email == "ravi.k@gmail.com"
        assert profile.name == "Ravi"
        assert profile.role is Role.STUDENT
        assert user_store.authenticate("ravi.k@gmail.com", "pw-123") == profile.user_id

    @pytest.mark.parametrize("email", ["ravi@yahoo.com", "ravi@gmail.co.in", "ravi@googlemail.com", ""])
    def test_non_gmail_rejected(self, service, email):
        with pytest.raises(InvalidEmailError, match="Gmail"):
            service.sign_up("Ravi", email, "pw", "pw")

    def test_password_mismatch(self, service):
        with pytest.raises(PasswordMismatchError):
            service.sign_up("Ravi", "ravi@gmail.com", "pw-1", "pw-2")

    def test_blank_name(self, service):
        with pytest.raises(ValidationFailedError):
            service.sign_up(" ", "ravi@gmail.com", "pw", "pw")

    def test_blank_password(self, service):
        with pytest.raises(ValidationFailedError):
            service.sign_up("Ravi", "ravi@gmail.com", "", "")

    def test_duplicate_email(self, service):
        with pytest.raises(EmailTakenError):
            service.sign_up("Asha", "ASHA@gmail.com", "pw", "pw")


class TestLogIn:
    def test_student_login(self, service):
        profile = service.log_in("asha@gmail.com", "secret", "student")
        assert profile.user_id == 1

    def test_role_defaults_to_student(self, service):
        assert service.log_in(" Asha@Gmail.com ", "secret", None).user_id == 1

    def test_admin_login(self, service):
        assert service.log_in("admin@gmail.com", "secret", "admin").is_admin

    def test_role_mismatch(self, service):
        with pytest.raises(RoleMismatchError) as excinfo:
            service.log_in("asha@gmail.com", "secret", "admin")
        assert "'student'" in excinfo.value.message
        assert "'admin'" in excinfo.value.message

    def test_wrong_password(self, service):
        with pytest.raises(InvalidCredentialsError):
            service.log_in("asha@gmail.com", "nope", "student")

    def test_unknown_email(self, service):
        with pytest.raises(InvalidCredentialsError):
            service.log_in("ghost@gmail.com", "secret", "student")

    def test_missing_profile(self, service, user_store):
        user_store.passwords["orphan@gmail.com"] = (77, "secret")
        with pytest.raises(ProfileNotFoundError):
            service.log_in("orphan@gmail.com", "secret", "student")


class TestCurrentProfile:
    def test_returns_profile(self, service):
        assert isinstance(service.current_profile(2), UserProfile)

    def test_missing_profile(self, service):
        with pytest.raises(ProfileNotFoundError):
            service.current_profile(404)
