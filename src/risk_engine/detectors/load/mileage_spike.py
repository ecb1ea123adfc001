"""LOAD detector: week-over-week running mileage spike.

Tracked separately from strength volume: the two are different kinds of
load and are never summed into one number.

Reference:
    Nielsen et al. (2014). Excessive progression in weekly running distance
    and risk of running-related injuries. J Orthop Sports Phys Ther
    44(10):739-747.
"""

from __future__ import annotations

from risk_engine.detectors.base import RiskDetector
from risk_engine.math.load_change import classify_spike, percent_change
from risk_engine.models.assessment import RiskFactor
from risk_engine.models.enums import FactorType
from risk_engine.models.signals import TrainingSignals
from risk_engine.models.thresholds import RiskThresholds


class MileageSpikeDetector(RiskDetector):
    """Flags a sharp increase in endurance distance versus last week."""

    factor_type = FactorType.MILEAGE_SPIKE
    order = 2
    required_data = ["current_mileage", "previous_mileage"]

    def detect(
        self, signals: TrainingSignals, thresholds: RiskThresholds
    ) -> RiskFactor | None:
        change = percent_change(
            signals.current_mileage,  # type: ignore[arg-type]
            signals.previous_mileage,  # type: ignore[arg-type]
        )
        severity = classify_spike(
            change,
            thresholds.mileage_spike_moderate_pct,
            thresholds.mileage_spike_high_pct,
        )
        if severity is None:
            return None

        return RiskFactor(
            type=self.factor_type,
            severity=severity,
            value=round(change, 1),  # type: ignore[arg-type]
            threshold=thresholds.mileage_spike_moderate_pct,
            description=f"Running mileage increased {change:.0f}% from last week",
            recommendation=(
                "Follow the 10% rule: increase weekly mileage by no more than 10%"
            ),
        )
