"""Shared test fixtures: signal snapshots, engines, record sources."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Callable
from unittest.mock import MagicMock

import pytest

from risk_engine.aggregation.records import (
    EnduranceSession,
    InMemoryRecordSource,
    ReadinessCheckIn,
    StrengthSet,
)
from risk_engine.engine import RiskEngine
from risk_engine.models.signals import TrainingSignals
from risk_engine.models.thresholds import RiskThresholds

TODAY = date(2026, 3, 15)


@pytest.fixture
def engine() -> RiskEngine:
    return RiskEngine()


@pytest.fixture
def thresholds() -> RiskThresholds:
    return RiskThresholds()


@pytest.fixture
def empty_signals() -> TrainingSignals:
    """New user: every metric absent."""
    return TrainingSignals()


@pytest.fixture
def healthy_signals() -> TrainingSignals:
    """Steady training, good sleep, one rest day this week."""
    return TrainingSignals(
        current_week_volume=48000.0,
        previous_week_volume=45000.0,
        current_mileage=30000.0,
        previous_mileage=28000.0,
        current_run_count=4,
        avg_recovery_score=72.0,
        avg_sleep_hours=7.6,
        avg_stress_score=35.0,
        avg_soreness_score=30.0,
        consecutive_training_days=2,
    )


@pytest.fixture
def three_moderate_signals() -> TrainingSignals:
    """Exactly three moderate wellness factors, nothing else."""
    return TrainingSignals(
        avg_recovery_score=45.0,
        avg_sleep_hours=6.0,
        avg_stress_score=75.0,
    )


@pytest.fixture
def overloaded_signals() -> TrainingSignals:
    """Big volume spike on top of poor recovery, sleep, stress and soreness."""
    return TrainingSignals(
        current_week_volume=100000.0,
        previous_week_volume=40000.0,
        avg_recovery_score=30.0,
        avg_sleep_hours=4.0,
        avg_stress_score=90.0,
        avg_soreness_score=85.0,
    )


@pytest.fixture
def mixed_severity_signals() -> TrainingSignals:
    """One HIGH factor (sleep) and one MODERATE factor (stress)."""
    return TrainingSignals(avg_sleep_hours=5.0, avg_stress_score=75.0)


# ---------------------------------------------------------------------------
# Record fixtures for aggregation and service tests
# ---------------------------------------------------------------------------


def at(day: date, hour: int = 9) -> datetime:
    """Naive local datetime on *day*."""
    return datetime(day.year, day.month, day.day, hour)


@pytest.fixture
def record_source_factory() -> Callable[..., InMemoryRecordSource]:
    """Factory fixture for an InMemoryRecordSource with one user's history.

    Usage:
        source = record_source_factory(current_volume=70000, previous_volume=45000)
    """

    def factory(
        user_id: str = "athlete-1",
        current_volume: float = 0.0,
        previous_volume: float = 0.0,
        current_meters: float = 0.0,
        previous_meters: float = 0.0,
        streak_days: int = 0,
        checkins: tuple[ReadinessCheckIn, ...] = (),
        today: date = TODAY,
    ) -> InMemoryRecordSource:
        source = InMemoryRecordSource()
        # Single 1-rep set carrying the whole window volume
        if current_volume:
            source.add_strength_set(
                user_id, StrengthSet(at(today - timedelta(days=2)), current_volume, 1)
            )
        if previous_volume:
            source.add_strength_set(
                user_id, StrengthSet(at(today - timedelta(days=9)), previous_volume, 1)
            )
        if current_meters:
            source.add_endurance_session(
                user_id, EnduranceSession(at(today - timedelta(days=3), 7), current_meters)
            )
        if previous_meters:
            source.add_endurance_session(
                user_id, EnduranceSession(at(today - timedelta(days=10), 7), previous_meters)
            )
        for offset in range(streak_days):
            source.add_endurance_session(
                user_id, EnduranceSession(at(today - timedelta(days=offset), 6), 5000.0)
            )
        for checkin in checkins:
            source.add_checkin(user_id, checkin)
        return source

    return factory


@pytest.fixture
def mock_generator() -> MagicMock:
    """TextGenerator stand-in that returns a canned narrative."""
    generator = MagicMock()
    generator.generate.return_value = "Back off volume and sleep more."
    return generator
