"""WELLNESS detector: low average recovery score.

Uses the 7-day average recovery score (0-100, higher = better recovered)
from readiness check-ins or a wearable.

Thresholds:
    < 40 → HIGH
    < 50 → MODERATE
"""

from __future__ import annotations

from risk_engine.detectors.base import RiskDetector
from risk_engine.models.assessment import RiskFactor
from risk_engine.models.enums import FactorType, Severity
from risk_engine.models.signals import TrainingSignals
from risk_engine.models.thresholds import RiskThresholds


class LowRecoveryDetector(RiskDetector):
    """Flags a recovery score that has stayed low over the past week."""

    factor_type = FactorType.LOW_RECOVERY
    order = 3
    required_data = ["avg_recovery_score"]

    def detect(
        self, signals: TrainingSignals, thresholds: RiskThresholds
    ) -> RiskFactor | None:
        recovery = signals.avg_recovery_score  # guaranteed not None by required_data

        if recovery >= thresholds.low_recovery:  # type: ignore[operator]
            return None

        severity = (
            Severity.HIGH
            if recovery < thresholds.low_recovery_high  # type: ignore[operator]
            else Severity.MODERATE
        )
        return RiskFactor(
            type=self.factor_type,
            severity=severity,
            value=round(recovery),  # type: ignore[arg-type]
            threshold=thresholds.low_recovery,
            description=(
                f"Average recovery score is {recovery:.0f}% "
                f"(below {thresholds.low_recovery:.0f}%)"
            ),
            recommendation=(
                "Prioritize rest and active recovery: easy movement, "
                "nutrition and sleep before hard sessions"
            ),
        )
