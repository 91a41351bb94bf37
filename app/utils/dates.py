"""Timestamp helpers shared by models, services and the dashboard."""
from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """Return timezone-aware UTC datetime. Use this instead of datetime.now()."""
    return datetime.now(timezone.utc)


def utcnow_naive() -> datetime:
    """Naive UTC datetime, the form stored in DateTime columns."""
    return utc_now().replace(tzinfo=None)


def iso_now() -> str:
    """Current UTC time as an ISO-8601 string with a trailing Z."""
    return utc_now().isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_iso(value) -> Optional[datetime]:
    """Parse an ISO-8601 string (or datetime) into a naive UTC datetime.

    Returns None for empty or unparseable input. Aware values are converted
    to UTC before the tzinfo is dropped.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        raw = str(value).strip()
        if not raw:
            return None
        try:
            parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
        except ValueError:
            return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed
