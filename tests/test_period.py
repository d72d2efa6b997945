"""Tests for weekly/monthly period ids and recurrence dispatch."""

import re
from datetime import date, datetime, timedelta, timezone

import pytest

from rsvp_window.models.schedule import GameInfoConfig
from rsvp_window.recurrence.period import (
    current_period_id,
    monthly_period_id,
    week_number,
    weekly_period_id,
)


def _utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def _game(**kwargs) -> GameInfoConfig:
    return GameInfoConfig(**kwargs)


class TestWeekNumber:
    def test_jan_first_is_week_one(self):
        assert week_number(date(2026, 1, 1)) == 1

    def test_first_saturday_still_week_one(self):
        # Jan 1 2026 is a Thursday; weeks start on Sunday
        assert week_number(date(2026, 1, 3)) == 1
        assert week_number(date(2026, 1, 4)) == 2


class TestWeeklyPeriodId:
    def test_format(self):
        pid = weekly_period_id(_game(game_day=4), _utc(2026, 1, 26, 12, 0), "UTC")
        assert re.fullmatch(r"2026-W\d{2}", pid)

    def test_thursday_game_week(self):
        assert weekly_period_id(_game(game_day=4), _utc(2026, 1, 26, 12, 0), "UTC") == "2026-W05"

    def test_consistent_within_cycle(self):
        game = _game(game_day=4)
        monday = weekly_period_id(game, _utc(2026, 1, 26, 12, 0), "UTC")
        tuesday = weekly_period_id(game, _utc(2026, 1, 27, 12, 0), "UTC")
        assert monday == tuesday

    def test_game_day_stays_in_period(self):
        game = _game(game_day=4)
        assert (
            weekly_period_id(game, _utc(2026, 1, 29, 12, 0), "UTC")
            == weekly_period_id(game, _utc(2026, 1, 28, 12, 0), "UTC")
        )

    def test_rolls_over_at_midnight_after_game(self):
        game = _game(game_day=4)
        before = weekly_period_id(game, _utc(2026, 1, 29, 23, 59), "UTC")
        after = weekly_period_id(game, _utc(2026, 1, 30, 0, 0), "UTC")
        assert before == "2026-W05"
        assert after == "2026-W06"

    def test_saturday_game_resets_sunday(self):
        game = _game(game_day=6)
        saturday_night = weekly_period_id(game, _utc(2026, 1, 31, 23, 0), "UTC")
        sunday_midnight = weekly_period_id(game, _utc(2026, 2, 1, 0, 0), "UTC")
        assert saturday_night == "2026-W05"
        assert sunday_midnight == "2026-W06"

    def test_year_taken_from_game_date(self):
        # Cycle starting Fri Dec 26 2025 leads up to Thu Jan 1 2026
        assert weekly_period_id(_game(game_day=4), _utc(2025, 12, 26, 12, 0), "UTC") == "2026-W01"

    def test_stable_for_every_hour_of_cycle(self):
        game = _game(game_day=4)
        start = _utc(2026, 1, 30, 0, 0)
        ids = {weekly_period_id(game, start + timedelta(hours=h), "UTC") for h in range(7 * 24)}
        assert ids == {"2026-W06"}
        assert weekly_period_id(game, start + timedelta(days=7), "UTC") == "2026-W07"

    def test_local_midnight_in_timezone(self):
        # 23:30Z Thursday is 00:30 Friday in Lagos (UTC+1): already the next cycle there
        game = _game(game_day=4)
        now = _utc(2026, 1, 29, 23, 30)
        assert weekly_period_id(game, now, "UTC") == "2026-W05"
        assert weekly_period_id(game, now, "Africa/Lagos") == "2026-W06"


class TestMonthlyPeriodId:
    def test_second_saturday_on_game_day(self):
        game = _game(recurrence="monthly", game_day=6, monthly_occurrence=2)
        assert monthly_period_id(game, _utc(2026, 1, 10, 12, 0), "UTC") == "2026-M01-2SAT"

    def test_last_sunday_march(self):
        game = _game(recurrence="monthly", game_day=0, monthly_occurrence="last")
        assert monthly_period_id(game, _utc(2026, 3, 15, 12, 0), "UTC") == "2026-M03-LSUN"

    def test_first_wednesday_december(self):
        game = _game(recurrence="monthly", game_day=3, monthly_occurrence=1)
        assert monthly_period_id(game, _utc(2026, 12, 1, 12, 0), "UTC") == "2026-M12-1WED"

    def test_rolls_to_next_month_after_game(self):
        game = _game(recurrence="monthly", game_day=6, monthly_occurrence=2)
        assert monthly_period_id(game, _utc(2026, 1, 11, 0, 0), "UTC") == "2026-M02-2SAT"

    def test_game_night_stays_in_period(self):
        game = _game(recurrence="monthly", game_day=6, monthly_occurrence=2)
        assert monthly_period_id(game, _utc(2026, 1, 10, 23, 0), "UTC") == "2026-M01-2SAT"

    def test_rolls_over_year_end(self):
        # 1st Wednesday of Dec 2026 is Dec 2; from Dec 3 the next game is in January 2027
        game = _game(recurrence="monthly", game_day=3, monthly_occurrence=1)
        assert monthly_period_id(game, _utc(2026, 12, 3, 0, 0), "UTC") == "2027-M01-1WED"

    def test_stable_between_resets(self):
        game = _game(recurrence="monthly", game_day=6, monthly_occurrence=2)
        start = _utc(2026, 1, 11, 0, 0)
        end = _utc(2026, 2, 15, 0, 0)
        ids = set()
        t = start
        while t < end:
            ids.add(monthly_period_id(game, t, "UTC"))
            t += timedelta(hours=6)
        assert ids == {"2026-M02-2SAT"}
        assert monthly_period_id(game, end, "UTC") == "2026-M03-2SAT"


class TestCurrentPeriodId:
    def test_weekly_when_recurrence_weekly(self):
        raw = {"gameInfo": {"recurrence": "weekly", "gameDay": 6}}
        assert current_period_id(raw, _utc(2026, 1, 26, 12, 0), "UTC") == "2026-W05"

    def test_monthly_when_recurrence_monthly(self):
        raw = {"gameInfo": {"recurrence": "monthly", "gameDay": 6, "monthlyOccurrence": 2}}
        # Jan 26 is past the Jan 10 reset, so the February cycle is current
        assert current_period_id(raw, _utc(2026, 1, 26, 12, 0), "UTC") == "2026-M02-2SAT"

    def test_defaults_to_weekly_without_recurrence(self):
        raw = {"gameInfo": {"gameDay": 6}}
        assert re.fullmatch(r"2026-W\d{2}", current_period_id(raw, _utc(2026, 1, 26, 12, 0), "UTC"))

    def test_defaults_to_weekly_sunday_when_none(self):
        # Sunday game: the cycle starting Monday Jan 26 leads up to Sunday Feb 1
        assert current_period_id(None, _utc(2026, 1, 26, 12, 0), "UTC") == "2026-W06"

    def test_null_game_info(self):
        assert current_period_id({"gameInfo": None}, _utc(2026, 1, 26, 12, 0), "UTC") == "2026-W06"

    def test_uses_access_period_timezone(self):
        raw = {
            "accessPeriod": {"enabled": True, "timezone": "Africa/Lagos"},
            "gameInfo": {"gameDay": 4},
        }
        assert current_period_id(raw, _utc(2026, 1, 29, 23, 30)) == "2026-W06"

    def test_idempotent(self):
        raw = {"gameInfo": {"recurrence": "monthly", "gameDay": 6, "monthlyOccurrence": 2}}
        now = _utc(2026, 1, 26, 12, 0)
        assert current_period_id(raw, now, "UTC") == current_period_id(raw, now, "UTC")

    def test_naive_now_rejected(self):
        with pytest.raises(ValueError):
            current_period_id(None, datetime(2026, 1, 26, 12, 0), "UTC")
