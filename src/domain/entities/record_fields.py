"""
Helpers shared by entities when converting to and from plain records
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current time, timezone-aware"""
    return datetime.now(UTC)


def parse_datetime(value) -> datetime | None:
    """Read a timestamp stored as ISO text (or already a datetime)"""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        moment = value
    else:
        moment = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment


def format_datetime(value: datetime | None) -> str | None:
    """Timestamps are stored as ISO text"""
    return value.isoformat() if value else None


def optional_int(value) -> int | None:
    if value is None or value == "":
        return None
    return int(value)
