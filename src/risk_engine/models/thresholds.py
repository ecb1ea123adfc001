"""Frozen threshold table: every number the engine scores with."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Mapping

from risk_engine.exceptions import ThresholdConfigError
from risk_engine.models.enums import (
    COMPOUND_BONUS_POINTS,
    COMPOUND_FACTOR_COUNT,
    CRITICAL_SCORE,
    HIGH_POINTS,
    HIGH_SCORE,
    HIGH_SORENESS_HIGH,
    HIGH_SORENESS_THRESHOLD,
    HIGH_STRESS_HIGH,
    HIGH_STRESS_THRESHOLD,
    LOW_POINTS,
    LOW_RECOVERY_HIGH,
    LOW_RECOVERY_THRESHOLD,
    MAX_RISK_SCORE,
    MILEAGE_SPIKE_HIGH_PCT,
    MILEAGE_SPIKE_MODERATE_PCT,
    MODERATE_POINTS,
    MODERATE_SCORE,
    NO_REST_HIGH_DAYS,
    NO_REST_MODERATE_DAYS,
    POOR_SLEEP_HIGH_H,
    POOR_SLEEP_THRESHOLD_H,
    VOLUME_SPIKE_HIGH_PCT,
    VOLUME_SPIKE_MODERATE_PCT,
    Severity,
)


@dataclass(frozen=True)
class RiskThresholds:
    """Named thresholds and weights used by the detectors and the scorer.

    Defaults come from ``risk_engine.models.enums``. Override single values
    with ``dataclasses.replace(RiskThresholds(), poor_sleep_h=7.0)`` or load
    a partial table with :meth:`from_mapping`.
    """

    # Load spikes (percent increase)
    volume_spike_moderate_pct: float = VOLUME_SPIKE_MODERATE_PCT
    volume_spike_high_pct: float = VOLUME_SPIKE_HIGH_PCT
    mileage_spike_moderate_pct: float = MILEAGE_SPIKE_MODERATE_PCT
    mileage_spike_high_pct: float = MILEAGE_SPIKE_HIGH_PCT

    # Wellness
    low_recovery: float = LOW_RECOVERY_THRESHOLD
    low_recovery_high: float = LOW_RECOVERY_HIGH
    poor_sleep_h: float = POOR_SLEEP_THRESHOLD_H
    poor_sleep_high_h: float = POOR_SLEEP_HIGH_H
    high_stress: float = HIGH_STRESS_THRESHOLD
    high_stress_high: float = HIGH_STRESS_HIGH
    high_soreness: float = HIGH_SORENESS_THRESHOLD
    high_soreness_high: float = HIGH_SORENESS_HIGH

    # Rest days
    no_rest_moderate_days: int = NO_REST_MODERATE_DAYS
    no_rest_high_days: int = NO_REST_HIGH_DAYS

    # Scoring
    high_points: int = HIGH_POINTS
    moderate_points: int = MODERATE_POINTS
    low_points: int = LOW_POINTS
    compound_factor_count: int = COMPOUND_FACTOR_COUNT
    compound_bonus_points: int = COMPOUND_BONUS_POINTS
    max_score: int = MAX_RISK_SCORE

    # Classification
    critical_score: int = CRITICAL_SCORE
    high_score: int = HIGH_SCORE
    moderate_score: int = MODERATE_SCORE

    def points_for(self, severity: Severity) -> int:
        """Base points a factor of *severity* adds to the risk score."""
        points = {
            Severity.LOW: self.low_points,
            Severity.MODERATE: self.moderate_points,
            Severity.HIGH: self.high_points,
        }
        return points[severity]

    @classmethod
    def from_mapping(cls, overrides: Mapping[str, Any]) -> "RiskThresholds":
        """Build a table from defaults plus *overrides* (e.g. a parsed JSON file).

        Raises:
            ThresholdConfigError: on unknown keys, non-numeric values, or a
                fractional value for a whole-number field.
        """
        known = {f.name: f for f in dataclasses.fields(cls)}
        unknown = sorted(set(overrides) - set(known))
        if unknown:
            raise ThresholdConfigError(f"Unknown threshold keys: {', '.join(unknown)}")

        values: dict[str, Any] = {}
        for key, raw in overrides.items():
            if isinstance(raw, bool) or not isinstance(raw, (int, float)):
                raise ThresholdConfigError(f"Threshold {key!r} must be a number, got {raw!r}")
            if not isinstance(known[key].default, int):
                values[key] = float(raw)
            elif float(raw).is_integer():
                values[key] = int(raw)
            else:
                raise ThresholdConfigError(
                    f"Threshold {key!r} must be a whole number, got {raw!r}"
                )
        return cls(**values)
