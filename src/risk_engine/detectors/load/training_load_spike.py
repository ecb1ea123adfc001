"""LOAD detector: week-over-week strength volume spike.

Reference:
    Gabbett (2016). The training-injury prevention paradox. Br J Sports Med
    50(5):273-280.

Thresholds (percent increase over the previous 7 days):
    >= 50% → HIGH
    >= 30% → MODERATE
    <  30% → no factor
"""

from __future__ import annotations

from risk_engine.detectors.base import RiskDetector
from risk_engine.math.load_change import classify_spike, percent_change
from risk_engine.models.assessment import RiskFactor
from risk_engine.models.enums import FactorType
from risk_engine.models.signals import TrainingSignals
from risk_engine.models.thresholds import RiskThresholds


class TrainingLoadSpikeDetector(RiskDetector):
    """Flags a sharp increase in weight x reps volume versus last week."""

    factor_type = FactorType.TRAINING_LOAD_SPIKE
    order = 1
    required_data = ["current_week_volume", "previous_week_volume"]

    def detect(
        self, signals: TrainingSignals, thresholds: RiskThresholds
    ) -> RiskFactor | None:
        change = percent_change(
            signals.current_week_volume,  # type: ignore[arg-type]
            signals.previous_week_volume,  # type: ignore[arg-type]
        )
        severity = classify_spike(
            change,
            thresholds.volume_spike_moderate_pct,
            thresholds.volume_spike_high_pct,
        )
        if severity is None:
            return None

        return RiskFactor(
            type=self.factor_type,
            severity=severity,
            value=round(change, 1),  # type: ignore[arg-type]
            threshold=thresholds.volume_spike_moderate_pct,
            description=f"Training volume increased {change:.0f}% from last week",
            recommendation=(
                "Cap week-over-week volume growth at about 10% to let your "
                "tissues adapt"
            ),
        )
