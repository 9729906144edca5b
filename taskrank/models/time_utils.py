"""Time helpers for taskrank.

All datetimes handled by the engine are timezone-aware UTC. Naive values
coming in from callers are interpreted as UTC.
"""

from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    """Current wall-clock time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime) -> datetime:
    """Attach UTC to a naive datetime, or convert an aware one to UTC.

    Raises:
        ValueError: If the UTC equivalent falls outside the datetime range
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    try:
        return dt.astimezone(timezone.utc)
    except OverflowError as e:
        raise ValueError(f"datetime out of range: {dt.isoformat()}") from e


def resolve_now(now: Optional[datetime] = None) -> datetime:
    """Return `now` normalized to UTC, falling back to the wall clock."""
    if now is None:
        return utcnow()
    return ensure_utc(now)
