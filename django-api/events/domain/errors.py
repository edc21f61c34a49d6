"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_STATUS_FILTER = "INVALID_STATUS_FILTER"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    INVALID_EMAIL = "INVALID_EMAIL"
    PASSWORD_MISMATCH = "PASSWORD_MISMATCH"
    YEAR_NOT_CONFIRMED = "YEAR_NOT_CONFIRMED"
    REGISTRATION_CLOSED = "REGISTRATION_CLOSED"
    ALREADY_REGISTERED = "ALREADY_REGISTERED"
    NOT_REGISTERED = "NOT_REGISTERED"
    EVENT_LOCKED = "EVENT_LOCKED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    ROLE_MISMATCH = "ROLE_MISMATCH"
    ADMIN_REQUIRED = "ADMIN_REQUIRED"
    EMAIL_TAKEN = "EMAIL_TAKEN"
    STORE_WRITE_FAILED = "STORE_WRITE_FAILED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class InvalidStatusFilterError(DomainError):
    def __init__(self, raw: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_STATUS_FILTER,
            message=f"Unknown status filter '{raw}'",
        )


class ValidationFailedError(DomainError):
    """Raised when submitted fields are missing or malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.VALIDATION_FAILED, message=message)


class InvalidEmailError(DomainError):
    def __init__(self, message: str = "Please use a valid Gmail address (example@gmail.com).") -> None:
        super().__init__(code=ErrorCode.INVALID_EMAIL, message=message)


class PasswordMismatchError(DomainError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.PASSWORD_MISMATCH, message="Passwords do not match")


class YearNotConfirmedError(DomainError):
    """Raised when the year of study must be confirmed before registering."""

    def __init__(self, stored_year: int | None, submitted_year: int) -> None:
        super().__init__(
            code=ErrorCode.YEAR_NOT_CONFIRMED,
            message="Please confirm your Year of Study before registering.",
        )
        self.stored_year = stored_year
        self.submitted_year = submitted_year


class RegistrationClosedError(DomainError):
    def __init__(self, label: str = "Registration Closed") -> None:
        super().__init__(code=ErrorCode.REGISTRATION_CLOSED, message=label)


class AlreadyRegisteredError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ALREADY_REGISTERED,
            message="You are already registered for this event",
        )


class NotRegisteredError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NOT_REGISTERED,
            message="You are not registered for this event",
        )


class EventLockedError(DomainError):
    """Raised when an admin tries a management action the status forbids."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.EVENT_LOCKED, message=message)


class InvalidCredentialsError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CREDENTIALS,
            message="Invalid email or password",
        )


class ProfileNotFoundError(DomainError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.PROFILE_NOT_FOUND, message="User profile not found.")


class RoleMismatchError(DomainError):
    def __init__(self, actual: str, requested: str) -> None:
        super().__init__(
            code=ErrorCode.ROLE_MISMATCH,
            message=(
                f"Role mismatch: your account role is '{actual}' "
                f"but you tried to log in as '{requested}'."
            ),
        )


class AdminRequiredError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ADMIN_REQUIRED,
            message="Only administrators can manage events",
        )


class EmailTakenError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EMAIL_TAKEN,
            message="An account with this email already exists",
        )


class StoreWriteError(DomainError):
    """Raised by stores when the backing database rejects a write."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            code=ErrorCode.STORE_WRITE_FAILED,
            message=f"Could not {operation}. Please try again.",
        )
