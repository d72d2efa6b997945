"""Recurrence engine: nth-weekday dates, access windows, and period ids."""

from rsvp_window.recurrence._nth_weekday import nth_weekday_of_month
from rsvp_window.recurrence.monthly import evaluate_monthly_window
from rsvp_window.recurrence.period import (
    current_period_id,
    monthly_period_id,
    weekly_period_id,
)
from rsvp_window.recurrence.timeline import cycle_timeline, next_game_date
from rsvp_window.recurrence.weekly import evaluate_weekly_window
from rsvp_window.recurrence.window import is_form_open

__all__ = [
    "current_period_id",
    "cycle_timeline",
    "evaluate_monthly_window",
    "evaluate_weekly_window",
    "is_form_open",
    "monthly_period_id",
    "next_game_date",
    "nth_weekday_of_month",
    "weekly_period_id",
]
