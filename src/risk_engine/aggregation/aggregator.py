"""SignalAggregator — reduces raw training records to a TrainingSignals snapshot.

This is the only place calendar and timezone logic lives. Windows are local
calendar days:

    current  = [today - 6, today]
    previous = [today - 13, today - 7]
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta, tzinfo

import numpy as np
import pandas as pd

from risk_engine.aggregation.records import (
    EnduranceSession,
    ReadinessCheckIn,
    StrengthSet,
    TrainingRecordSource,
)
from risk_engine.exceptions import SignalAggregationError
from risk_engine.models.enums import STREAK_LOOKBACK_DAYS, WINDOW_DAYS
from risk_engine.models.signals import TrainingSignals

logger = logging.getLogger(__name__)

# Extra day requested on each side so records near midnight in another
# zone are not lost before local re-filtering.
_FETCH_MARGIN = timedelta(days=1)

_WELLNESS_COLUMNS = ["recovery_score", "sleep_hours", "stress_score", "soreness_score"]


class SignalAggregator:
    """Builds TrainingSignals for a user from a TrainingRecordSource.

    Never fails for a user with no history: sums and counts come back as
    zero and wellness averages as None.

    Usage:
        aggregator = SignalAggregator(source, tz=ZoneInfo("Europe/London"))
        signals = aggregator.aggregate("user-1")
    """

    def __init__(self, source: TrainingRecordSource, tz: tzinfo | None = None) -> None:
        self.source = source
        self.tz = tz

    def aggregate(self, user_id: str, today: date | None = None) -> TrainingSignals:
        """Read the user's recent records and reduce them to signals.

        Args:
            user_id: Whose records to read.
            today: Last day of the current window. Defaults to today in the
                aggregator's time zone.

        Raises:
            SignalAggregationError: if the record source fails.
        """
        today = today or self._today()
        current_start = today - timedelta(days=WINDOW_DAYS - 1)
        previous_start = today - timedelta(days=2 * WINDOW_DAYS - 1)
        previous_end = current_start - timedelta(days=1)
        history_start = min(
            previous_start, today - timedelta(days=STREAK_LOOKBACK_DAYS - 1)
        )

        fetch_end = today + _FETCH_MARGIN
        try:
            sets = self.source.strength_sets(user_id, history_start - _FETCH_MARGIN, fetch_end)
            sessions = self.source.endurance_sessions(
                user_id, history_start - _FETCH_MARGIN, fetch_end
            )
            checkins = self.source.readiness_checkins(
                user_id, current_start - _FETCH_MARGIN, fetch_end
            )
        except Exception as exc:
            raise SignalAggregationError(
                f"Failed to read training records for user {user_id}: {exc}",
                user_id=user_id,
            ) from exc

        strength = self._strength_frame(sets)
        endurance = self._endurance_frame(sessions)
        wellness = self._wellness_frame(checkins)

        current_runs = _in_window(endurance, current_start, today)
        current_wellness = _in_window(wellness, current_start, today)

        active_days = set(strength["day"]) | set(endurance["day"])

        signals = TrainingSignals(
            current_week_volume=_window_sum(strength, "volume", current_start, today),
            previous_week_volume=_window_sum(strength, "volume", previous_start, previous_end),
            current_mileage=_window_sum(endurance, "distance_m", current_start, today),
            previous_mileage=_window_sum(endurance, "distance_m", previous_start, previous_end),
            current_run_count=int(len(current_runs)),
            avg_recovery_score=_mean_or_none(current_wellness["recovery_score"]),
            avg_sleep_hours=_mean_or_none(current_wellness["sleep_hours"]),
            avg_stress_score=_mean_or_none(current_wellness["stress_score"]),
            avg_soreness_score=_mean_or_none(current_wellness["soreness_score"]),
            consecutive_training_days=count_consecutive_days(active_days, today),
        )
        logger.debug("Aggregated signals for %s: %s", user_id, signals)
        return signals

    # ------------------------------------------------------------------
    # Frame builders
    # ------------------------------------------------------------------

    def _strength_frame(self, sets: list[StrengthSet]) -> pd.DataFrame:
        rows = [
            (self._local_date(s.performed_at), float(s.weight_kg) * int(s.reps))
            for s in sets
        ]
        return pd.DataFrame(rows, columns=["day", "volume"])

    def _endurance_frame(self, sessions: list[EnduranceSession]) -> pd.DataFrame:
        rows = [(self._local_date(s.started_at), float(s.distance_m)) for s in sessions]
        return pd.DataFrame(rows, columns=["day", "distance_m"])

    def _wellness_frame(self, checkins: list[ReadinessCheckIn]) -> pd.DataFrame:
        rows = [
            (
                self._local_date(c.recorded_at),
                c.recovery_score,
                c.sleep_hours,
                c.stress_score,
                c.soreness_score,
            )
            for c in checkins
        ]
        frame = pd.DataFrame(rows, columns=["day", *_WELLNESS_COLUMNS])
        frame[_WELLNESS_COLUMNS] = frame[_WELLNESS_COLUMNS].astype(np.float64)
        return frame

    # ------------------------------------------------------------------
    # Calendar helpers
    # ------------------------------------------------------------------

    def _today(self) -> date:
        if self.tz is not None:
            return datetime.now(self.tz).date()
        return date.today()

    def _local_date(self, ts: datetime) -> date:
        """Calendar date of *ts* in the aggregator's zone (naive = already local)."""
        if ts.tzinfo is not None and self.tz is not None:
            return ts.astimezone(self.tz).date()
        return ts.date()


def count_consecutive_days(active_days: set[date], today: date) -> int:
    """Count days in a row with activity, ending on *today*.

    Returns 0 when *today* itself has no session.
    """
    count = 0
    day = today
    while day in active_days:
        count += 1
        day -= timedelta(days=1)
    return count


def _in_window(frame: pd.DataFrame, start: date, end: date) -> pd.DataFrame:
    """Rows whose local day falls in [start, end]."""
    if frame.empty:
        return frame
    mask = frame["day"].map(lambda d: start <= d <= end).astype(bool)
    return frame[mask]


def _window_sum(frame: pd.DataFrame, column: str, start: date, end: date) -> float:
    return float(_in_window(frame, start, end)[column].sum())


def _mean_or_none(series: pd.Series) -> float | None:
    """Mean of the non-missing values, or None when none are present."""
    values = series.dropna()
    if values.empty:
        return None
    return float(values.mean())
