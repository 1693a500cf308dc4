from datetime import datetime, timezone
from email.utils import format_datetime


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_rfc1123(value: datetime) -> str:
    """Format a datetime as an RFC 1123 timestamp, e.g. `Tue, 03 Jun 2008 11:05:30 GMT`.

    Naive datetimes are assumed to already be in UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return format_datetime(value.astimezone(timezone.utc), usegmt=True)
