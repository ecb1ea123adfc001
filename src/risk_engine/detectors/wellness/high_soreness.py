"""WELLNESS detector: persistent muscle soreness (0-100)."""

from __future__ import annotations

from risk_engine.detectors.base import RiskDetector
from risk_engine.models.assessment import RiskFactor
from risk_engine.models.enums import FactorType, Severity
from risk_engine.models.signals import TrainingSignals
from risk_engine.models.thresholds import RiskThresholds


class HighSorenessDetector(RiskDetector):
    """Flags soreness that has stayed high across the week's check-ins."""

    factor_type = FactorType.HIGH_SORENESS
    order = 6
    required_data = ["avg_soreness_score"]

    def detect(
        self, signals: TrainingSignals, thresholds: RiskThresholds
    ) -> RiskFactor | None:
        soreness = signals.avg_soreness_score

        if soreness <= thresholds.high_soreness:  # type: ignore[operator]
            return None

        severity = (
            Severity.HIGH
            if soreness > thresholds.high_soreness_high  # type: ignore[operator]
            else Severity.MODERATE
        )
        return RiskFactor(
            type=self.factor_type,
            severity=severity,
            value=round(soreness),  # type: ignore[arg-type]
            threshold=thresholds.high_soreness,
            description=f"Muscle soreness is high at {soreness:.0f}%",
            recommendation=(
                "Reduce intensity and use recovery modalities such as foam "
                "rolling, stretching and light mobility work"
            ),
        )
