"""Frozen training signals — the sole input to RiskEngine.assess()."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Mapping

# camelCase names used by API payloads → field names
_WIRE_NAMES = {
    "currentWeekVolume": "current_week_volume",
    "previousWeekVolume": "previous_week_volume",
    "currentMileage": "current_mileage",
    "previousMileage": "previous_mileage",
    "currentRunCount": "current_run_count",
    "avgRecoveryScore": "avg_recovery_score",
    "avgSleepHours": "avg_sleep_hours",
    "avgStressScore": "avg_stress_score",
    "avgSorenessScore": "avg_soreness_score",
    "consecutiveTrainingDays": "consecutive_training_days",
}


@dataclass(frozen=True)
class TrainingSignals:
    """Rolling-window metrics for one user.

    Every field may be None: a new user has no history, and a missing metric
    means "no evidence" rather than zero risk. Detectors skip any metric that
    is None.
    """

    # Strength volume: sum of weight x reps, trailing 7 days / the 7 before
    current_week_volume: float | None = None
    previous_week_volume: float | None = None

    # Endurance distance in meters over the same windows
    current_mileage: float | None = None
    previous_mileage: float | None = None
    current_run_count: int | None = None

    # 7-day wellness averages (0-100, sleep in hours)
    avg_recovery_score: float | None = None
    avg_sleep_hours: float | None = None
    avg_stress_score: float | None = None
    avg_soreness_score: float | None = None

    # Days in a row with a logged session, ending today (0 = rest day today)
    consecutive_training_days: int | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TrainingSignals":
        """Build signals from a payload using snake_case or camelCase keys.

        Unknown keys are ignored.
        """
        field_names = {f.name for f in dataclasses.fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _WIRE_NAMES.get(key, key)
            if name in field_names:
                kwargs[name] = value
        return cls(**kwargs)
