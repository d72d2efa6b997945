"""Pydantic models for window evaluation results."""

from __future__ import annotations

from datetime import date
from enum import StrEnum

from pydantic import BaseModel


class WindowResult(BaseModel):
    """Open/closed status of the signup window at one instant.

    Instants are ISO-8601 UTC strings (`2026-01-07T09:00:00.000Z`).
    """

    is_open: bool
    message: str | None = None
    next_open_time: str | None = None
    close_time: str | None = None

    def to_dict(self) -> dict[str, object]:
        """camelCase payload for HTTP callers."""
        return {
            "isOpen": self.is_open,
            "message": self.message,
            "nextOpenTime": self.next_open_time,
            "closeTime": self.close_time,
        }


class CycleCheck(BaseModel):
    """Whether a once-per-cycle action (archive/reset) should run now."""

    needs_reset: bool
    period_id: str
    previous_period_id: str | None
    window: WindowResult


class TimelineEventType(StrEnum):
    RSVP_OPENS = "open"
    RSVP_CLOSES = "close"
    GAME_STARTS = "game-start"
    GAME_ENDS = "game-end"


class TimelineEvent(BaseModel):
    """One step of the recurring cycle, placed on a calendar date."""

    event_type: TimelineEventType
    label: str
    weekday: int            # Sunday=0
    hour: int
    minute: int
    date: date | None


class CycleTimeline(BaseModel):
    """Opens -> Closes -> Game Starts -> Game Ends, anchored to the next game."""

    next_game_date: date | None
    events: list[TimelineEvent]
