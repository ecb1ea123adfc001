"""WELLNESS detector: elevated average stress (0-100)."""

from __future__ import annotations

from risk_engine.detectors.base import RiskDetector
from risk_engine.models.assessment import RiskFactor
from risk_engine.models.enums import FactorType, Severity
from risk_engine.models.signals import TrainingSignals
from risk_engine.models.thresholds import RiskThresholds


class HighStressDetector(RiskDetector):
    """Flags an average stress level that stays above the threshold."""

    factor_type = FactorType.HIGH_STRESS
    order = 5
    required_data = ["avg_stress_score"]

    def detect(
        self, signals: TrainingSignals, thresholds: RiskThresholds
    ) -> RiskFactor | None:
        stress = signals.avg_stress_score

        if stress <= thresholds.high_stress:  # type: ignore[operator]
            return None

        severity = (
            Severity.HIGH
            if stress > thresholds.high_stress_high  # type: ignore[operator]
            else Severity.MODERATE
        )
        return RiskFactor(
            type=self.factor_type,
            severity=severity,
            value=round(stress),  # type: ignore[arg-type]
            threshold=thresholds.high_stress,
            description=f"Stress level is elevated at {stress:.0f}%",
            recommendation=(
                "High stress increases injury risk. Consider stress-reduction "
                "techniques and lighter sessions until it settles"
            ),
        )
