"""WELLNESS detector: short average sleep.

Reference:
    Milewski et al. (2014). Chronic lack of sleep is associated with
    increased sports injuries in adolescent athletes. J Pediatr Orthop
    34(2):129-133.

Thresholds (7-day average hours):
    < 5.5 h → HIGH
    < 6.5 h → MODERATE
"""

from __future__ import annotations

from risk_engine.detectors.base import RiskDetector
from risk_engine.models.assessment import RiskFactor
from risk_engine.models.enums import FactorType, Severity
from risk_engine.models.signals import TrainingSignals
from risk_engine.models.thresholds import RiskThresholds


class PoorSleepDetector(RiskDetector):
    """Flags an average sleep duration below the recovery minimum."""

    factor_type = FactorType.POOR_SLEEP
    order = 4
    required_data = ["avg_sleep_hours"]

    def detect(
        self, signals: TrainingSignals, thresholds: RiskThresholds
    ) -> RiskFactor | None:
        hours = signals.avg_sleep_hours

        if hours >= thresholds.poor_sleep_h:  # type: ignore[operator]
            return None

        severity = (
            Severity.HIGH
            if hours < thresholds.poor_sleep_high_h  # type: ignore[operator]
            else Severity.MODERATE
        )
        return RiskFactor(
            type=self.factor_type,
            severity=severity,
            value=round(hours, 1),  # type: ignore[arg-type]
            threshold=thresholds.poor_sleep_h,
            description=(
                f"Average sleep is {hours:.1f} hours "
                f"(below {thresholds.poor_sleep_h:g} hours)"
            ),
            recommendation=(
                "Improve sleep duration and quality: aim for 7-9 hours per "
                "night with a consistent bedtime"
            ),
        )
