"""Recurring RSVP windows: weekly/monthly signup windows and once-per-cycle period ids."""

# Config
from rsvp_window.config import Settings, get_settings

# Exceptions
from rsvp_window.exceptions import ScheduleConfigError, SettingsError, UnknownTimezoneError

# Models
from rsvp_window.models.schedule import (
    AccessPeriodConfig,
    GameInfoConfig,
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

# Engine
from rsvp_window.formatting import TimeFormatter
from rsvp_window.recurrence import (
    current_period_id,
    cycle_timeline,
    evaluate_monthly_window,
    evaluate_weekly_window,
    is_form_open,
    monthly_period_id,
    next_game_date,
    nth_weekday_of_month,
    weekly_period_id,
)

# Services
from rsvp_window.service.window import AccessWindowService
