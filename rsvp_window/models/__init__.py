"""Pydantic models for schedules and evaluation results."""

from rsvp_window.models.schedule import (
    AccessPeriodConfig,
    GameInfoConfig,
    Occurrence,
    OrgSchedule,
    Recurrence,
    default_schedule,
    resolve_schedule,
)
from rsvp_window.models.window import (
    CycleCheck,
    CycleTimeline,
    TimelineEvent,
    TimelineEventType,
    WindowResult,
)

__all__ = [
    "AccessPeriodConfig",
    "CycleCheck",
    "CycleTimeline",
    "GameInfoConfig",
    "Occurrence",
    "OrgSchedule",
    "Recurrence",
    "TimelineEvent",
    "TimelineEventType",
    "WindowResult",
    "default_schedule",
    "resolve_schedule",
]
