"""Timezone projection between absolute instants and local wall-clock time."""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from rsvp_window.exceptions import UnknownTimezoneError


def resolve_zone(name: str | None) -> ZoneInfo:
    """ZoneInfo for `name`, or the configured default zone when name is empty."""
    if not name:
        from rsvp_window.config import get_settings

        name = get_settings().schedule.default_timezone
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise UnknownTimezoneError(name) from e


def to_local(now: datetime, tz: ZoneInfo) -> datetime:
    """Project an aware instant onto the zone's wall clock (returned naive)."""
    if now.tzinfo is None or now.utcoffset() is None:
        raise ValueError("now must be a timezone-aware datetime")
    return now.astimezone(tz).replace(tzinfo=None)


def wall_to_instant(day: date, hour: int, minute: int, tz: ZoneInfo) -> datetime:
    """Local wall time on `day` in `tz` to an aware UTC instant."""
    return datetime.combine(day, time(hour, minute), tzinfo=tz).astimezone(timezone.utc)


def local_to_instant(local: datetime, tz: ZoneInfo) -> datetime:
    """Naive local datetime in `tz` to an aware UTC instant."""
    return local.replace(tzinfo=tz).astimezone(timezone.utc)
