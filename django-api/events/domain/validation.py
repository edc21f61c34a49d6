"""Input checks shared by sign-up and student registration."""

import re

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_GMAIL_RE = re.compile(r"^[^\s@]+@gmail\.com$", re.IGNORECASE)


def normalize_email(email: str | None) -> str:
    return (email or "").strip().lower()


def is_valid_email(email: str | None) -> bool:
    if not email or not isinstance(email, str):
        return False
    return bool(_EMAIL_RE.match(email.strip()))


def is_gmail_email(email: str | None) -> bool:
    """True only for addresses on exactly the gmail.com domain."""
    if not email or not isinstance(email, str):
        return False
    return bool(_GMAIL_RE.match(normalize_email(email)))
