from datetime import datetime

from django.utils import timezone


def local_now() -> datetime:
    """Current time in the configured TIME_ZONE; defines "today" for status."""
    return timezone.localtime()


def utc_now() -> datetime:
    return timezone.now()
