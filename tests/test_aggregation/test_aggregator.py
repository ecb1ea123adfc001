"""Tests for SignalAggregator — windows, streaks, wellness averages, time zones."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from unittest.mock import MagicMock
from zoneinfo import ZoneInfo

import pytest

from risk_engine.aggregation.aggregator import SignalAggregator, count_consecutive_days
from risk_engine.aggregation.records import (
    EnduranceSession,
    InMemoryRecordSource,
    ReadinessCheckIn,
    StrengthSet,
    TrainingRecordSource,
)
from risk_engine.exceptions import SignalAggregationError
from risk_engine.models.signals import TrainingSignals

TODAY = date(2026, 3, 15)


def at(day: date, hour: int = 9) -> datetime:
    return datetime(day.year, day.month, day.day, hour)


class TestZeroHistory:
    def test_new_user_never_fails(self) -> None:
        signals = SignalAggregator(InMemoryRecordSource()).aggregate("nobody", today=TODAY)

        assert signals == TrainingSignals(
            current_week_volume=0.0,
            previous_week_volume=0.0,
            current_mileage=0.0,
            previous_mileage=0.0,
            current_run_count=0,
            consecutive_training_days=0,
        )

    def test_other_users_records_ignored(self, record_source_factory) -> None:
        source = record_source_factory(user_id="someone-else", current_volume=5000)
        signals = SignalAggregator(source).aggregate("athlete-1", today=TODAY)
        assert signals.current_week_volume == 0.0


class TestWindows:
    def test_volume_split_into_weeks(self, record_source_factory) -> None:
        source = record_source_factory(current_volume=70000, previous_volume=45000)
        signals = SignalAggregator(source).aggregate("athlete-1", today=TODAY)

        assert signals.current_week_volume == 70000.0
        assert signals.previous_week_volume == 45000.0

    def test_volume_is_weight_times_reps(self) -> None:
        source = InMemoryRecordSource()
        source.add_strength_set("u", StrengthSet(at(TODAY), 100.0, 5))
        source.add_strength_set("u", StrengthSet(at(TODAY, 10), 80.0, 10))
        signals = SignalAggregator(source).aggregate("u", today=TODAY)
        assert signals.current_week_volume == 1300.0

    def test_window_boundaries(self) -> None:
        source = InMemoryRecordSource()
        # today-6 is the first current day, today-7 the last previous day
        source.add_strength_set("u", StrengthSet(at(TODAY - timedelta(days=6)), 10.0, 1))
        source.add_strength_set("u", StrengthSet(at(TODAY - timedelta(days=7)), 20.0, 1))
        source.add_strength_set("u", StrengthSet(at(TODAY - timedelta(days=13)), 40.0, 1))
        source.add_strength_set("u", StrengthSet(at(TODAY - timedelta(days=14)), 80.0, 1))
        source.add_strength_set("u", StrengthSet(at(TODAY + timedelta(days=1)), 160.0, 1))

        signals = SignalAggregator(source).aggregate("u", today=TODAY)
        assert signals.current_week_volume == 10.0
        assert signals.previous_week_volume == 60.0

    def test_mileage_and_run_count(self, record_source_factory) -> None:
        source = record_source_factory(current_meters=42000, previous_meters=30000)
        signals = SignalAggregator(source).aggregate("athlete-1", today=TODAY)

        assert signals.current_mileage == 42000.0
        assert signals.previous_mileage == 30000.0
        assert signals.current_run_count == 1

    def test_sessions_logged_in_miles_become_meters(self) -> None:
        source = InMemoryRecordSource()
        source.add_endurance_session("u", EnduranceSession.from_miles(at(TODAY), 1.0))
        source.add_endurance_session("u", EnduranceSession.from_km(at(TODAY, 18), 5.0))
        signals = SignalAggregator(source).aggregate("u", today=TODAY)
        assert signals.current_mileage == pytest.approx(6609.344)
        assert signals.current_run_count == 2


class TestStreak:
    def test_streak_counts_back_from_today(self, record_source_factory) -> None:
        source = record_source_factory(streak_days=9)
        signals = SignalAggregator(source).aggregate("athlete-1", today=TODAY)
        assert signals.consecutive_training_days == 9

    def test_strength_and_runs_both_count(self) -> None:
        source = InMemoryRecordSource()
        source.add_strength_set("u", StrengthSet(at(TODAY), 50.0, 5))
        source.add_endurance_session("u", EnduranceSession(at(TODAY - timedelta(days=1)), 8000.0))
        source.add_strength_set("u", StrengthSet(at(TODAY - timedelta(days=2)), 50.0, 5))
        signals = SignalAggregator(source).aggregate("u", today=TODAY)
        assert signals.consecutive_training_days == 3

    def test_rest_day_today_resets(self) -> None:
        source = InMemoryRecordSource()
        for offset in range(1, 6):
            source.add_endurance_session(
                "u", EnduranceSession(at(TODAY - timedelta(days=offset)), 5000.0)
            )
        signals = SignalAggregator(source).aggregate("u", today=TODAY)
        assert signals.consecutive_training_days == 0

    def test_count_consecutive_days_gap(self) -> None:
        active = {TODAY, TODAY - timedelta(days=1), TODAY - timedelta(days=3)}
        assert count_consecutive_days(active, TODAY) == 2
        assert count_consecutive_days(set(), TODAY) == 0


class TestWellness:
    def test_averages_over_current_window(self, record_source_factory) -> None:
        checkins = (
            ReadinessCheckIn(at(TODAY), recovery_score=40.0, sleep_hours=6.0),
            ReadinessCheckIn(at(TODAY - timedelta(days=1)), recovery_score=60.0, sleep_hours=7.0),
            ReadinessCheckIn(at(TODAY - timedelta(days=7)), recovery_score=0.0, sleep_hours=0.0),
        )
        source = record_source_factory(checkins=checkins)
        signals = SignalAggregator(source).aggregate("athlete-1", today=TODAY)

        assert signals.avg_recovery_score == pytest.approx(50.0)
        assert signals.avg_sleep_hours == pytest.approx(6.5)

    def test_missing_metric_is_none_not_zero(self, record_source_factory) -> None:
        checkins = (ReadinessCheckIn(at(TODAY), stress_score=80.0),)
        source = record_source_factory(checkins=checkins)
        signals = SignalAggregator(source).aggregate("athlete-1", today=TODAY)

        assert signals.avg_stress_score == pytest.approx(80.0)
        assert signals.avg_recovery_score is None
        assert signals.avg_sleep_hours is None
        assert signals.avg_soreness_score is None

    def test_partial_checkins_average_reported_values_only(self, record_source_factory) -> None:
        checkins = (
            ReadinessCheckIn(at(TODAY), soreness_score=90.0),
            ReadinessCheckIn(at(TODAY - timedelta(days=2)), soreness_score=70.0, sleep_hours=8.0),
            ReadinessCheckIn(at(TODAY - timedelta(days=3)), sleep_hours=6.0),
        )
        source = record_source_factory(checkins=checkins)
        signals = SignalAggregator(source).aggregate("athlete-1", today=TODAY)

        assert signals.avg_soreness_score == pytest.approx(80.0)
        assert signals.avg_sleep_hours == pytest.approx(7.0)


class TestTimeZones:
    def test_aware_timestamps_use_local_calendar_day(self) -> None:
        tz = ZoneInfo("America/New_York")
        source = InMemoryRecordSource()
        # 02:00 UTC on the 16th is 22:00 on the 15th in New York
        source.add_endurance_session(
            "u", EnduranceSession(datetime(2026, 3, 16, 2, tzinfo=timezone.utc), 5000.0)
        )
        signals = SignalAggregator(source, tz=tz).aggregate("u", today=TODAY)

        assert signals.consecutive_training_days == 1
        assert signals.current_mileage == 5000.0

    def test_late_evening_utc_lands_on_previous_day(self) -> None:
        tz = ZoneInfo("America/New_York")
        source = InMemoryRecordSource()
        source.add_endurance_session(
            "u", EnduranceSession(datetime(2026, 3, 15, 2, tzinfo=timezone.utc), 5000.0)
        )
        signals = SignalAggregator(source, tz=tz).aggregate("u", today=TODAY)
        assert signals.consecutive_training_days == 0
        assert signals.current_run_count == 1


class TestSourceFailure:
    def test_source_error_is_wrapped(self) -> None:
        source = MagicMock(spec=TrainingRecordSource)
        source.strength_sets.side_effect = ConnectionError("database unreachable")

        with pytest.raises(SignalAggregationError) as exc_info:
            SignalAggregator(source).aggregate("athlete-1", today=TODAY)

        assert exc_info.value.user_id == "athlete-1"
        assert isinstance(exc_info.value.__cause__, ConnectionError)

    def test_requested_ranges_cover_history(self) -> None:
        source = MagicMock(spec=TrainingRecordSource)
        source.strength_sets.return_value = []
        source.endurance_sessions.return_value = []
        source.readiness_checkins.return_value = []

        SignalAggregator(source).aggregate("athlete-1", today=TODAY)

        _, start, end = source.strength_sets.call_args.args
        assert start <= TODAY - timedelta(days=27)
        assert end >= TODAY
        _, start, _ = source.readiness_checkins.call_args.args
        assert start <= TODAY - timedelta(days=6)
