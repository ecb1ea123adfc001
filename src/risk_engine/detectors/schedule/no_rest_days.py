"""SCHEDULE detector: too many consecutive training days.

Thresholds:
    >= 8 days → HIGH
    >= 6 days → MODERATE
"""

from __future__ import annotations

from risk_engine.detectors.base import RiskDetector
from risk_engine.models.assessment import RiskFactor
from risk_engine.models.enums import FactorType, Severity
from risk_engine.models.signals import TrainingSignals
from risk_engine.models.thresholds import RiskThresholds


class NoRestDaysDetector(RiskDetector):
    """Flags a training streak with no rest day in it."""

    factor_type = FactorType.NO_REST_DAYS
    order = 7
    required_data = ["consecutive_training_days"]

    def detect(
        self, signals: TrainingSignals, thresholds: RiskThresholds
    ) -> RiskFactor | None:
        days = signals.consecutive_training_days

        if days < thresholds.no_rest_moderate_days:  # type: ignore[operator]
            return None

        severity = (
            Severity.HIGH
            if days >= thresholds.no_rest_high_days  # type: ignore[operator]
            else Severity.MODERATE
        )
        return RiskFactor(
            type=self.factor_type,
            severity=severity,
            value=days,  # type: ignore[arg-type]
            threshold=thresholds.no_rest_moderate_days,
            description=f"{days} consecutive training days without rest",
            recommendation=(
                "Take a rest day in the next 48 hours and schedule 1-2 rest "
                "days per week"
            ),
        )
