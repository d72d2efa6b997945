"""Shared test fixtures for rsvp_window tests."""

import pytest

from rsvp_window.config import load_settings, reset_settings


@pytest.fixture(autouse=True)
def package_defaults(tmp_path):
    """Pin settings to defaults.yaml, ignoring any ~/.rsvp_window/config.yaml."""
    load_settings(user_config_path=tmp_path / "no-user-config.yaml", _force_reload=True)
    yield
    reset_settings()


@pytest.fixture
def weekly_schedule() -> dict:
    """Opens Monday 9am, closes Wednesday 6pm, Wednesday game (UTC)."""
    return {
        "accessPeriod": {
            "enabled": True,
            "timezone": "UTC",
            "startDay": 1, "startHour": 9, "startMinute": 0,
            "endDay": 3, "endHour": 18, "endMinute": 0,
        },
        "gameInfo": {"recurrence": "weekly", "gameDay": 3},
    }


@pytest.fixture
def wrapping_schedule() -> dict:
    """Opens Saturday 8am, closes Monday 8am (wraps over Sunday)."""
    return {
        "accessPeriod": {
            "enabled": True,
            "timezone": "UTC",
            "startDay": 6, "startHour": 8, "startMinute": 0,
            "endDay": 1, "endHour": 8, "endMinute": 0,
        },
        "gameInfo": {"recurrence": "weekly", "gameDay": 6},
    }


@pytest.fixture
def monthly_schedule() -> dict:
    """2nd Saturday; opens Wednesday 9am (game-3d), closes Friday 6pm (game-1d)."""
    return {
        "accessPeriod": {
            "enabled": True,
            "timezone": "UTC",
            "startDay": 3, "startHour": 9, "startMinute": 0,
            "endDay": 5, "endHour": 18, "endMinute": 0,
        },
        "gameInfo": {"recurrence": "monthly", "gameDay": 6, "monthlyOccurrence": 2},
    }
