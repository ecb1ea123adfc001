"""RiskEngine — runs every detector over a signals snapshot and scores the result."""

from __future__ import annotations

import logging

from risk_engine.models.assessment import Assessment, RiskFactor
from risk_engine.models.signals import TrainingSignals
from risk_engine.models.thresholds import RiskThresholds
from risk_engine.registry import DetectorRegistry
from risk_engine.scoring import build_assessment

logger = logging.getLogger(__name__)


class RiskEngine:
    """Pure injury risk assessment over TrainingSignals.

    No I/O, no clock, no randomness: the same signals always produce an
    identical Assessment, so one engine can be shared across threads.

    Usage:
        engine = RiskEngine()
        assessment = engine.assess(TrainingSignals(avg_sleep_hours=5.0))
    """

    def __init__(
        self,
        thresholds: RiskThresholds | None = None,
        registry: DetectorRegistry | None = None,
    ) -> None:
        self.thresholds = thresholds or RiskThresholds()
        self.registry = registry or DetectorRegistry()

        # Auto-discover detectors if using default registry
        if registry is None:
            self.registry.discover_detectors()

    def detect_factors(self, signals: TrainingSignals) -> list[RiskFactor]:
        """Run all detectors in detection order and collect what they find."""
        factors: list[RiskFactor] = []
        for detector in self.registry.get_all_detectors():
            if not detector.has_required_data(signals):
                logger.debug(
                    "%s not applicable, missing %s",
                    detector.detector_id,
                    detector.required_data,
                )
                continue

            factor = detector.detect(signals, self.thresholds)
            if factor is None:
                logger.debug("%s: no factor", detector.detector_id)
                continue

            logger.debug(
                "%s fired (%s): %s",
                detector.detector_id,
                factor.severity.label,
                factor.description,
            )
            factors.append(factor)
        return factors

    def assess(self, signals: TrainingSignals) -> Assessment:
        """Evaluate all detectors and compose the Assessment.

        Args:
            signals: Frozen snapshot of the user's aggregated metrics.

        Returns:
            The Assessment: score, category, factors and suggested actions.
        """
        factors = self.detect_factors(signals)
        assessment = build_assessment(factors, self.thresholds)
        logger.info(
            "Assessed risk %s (score=%d, factors=%d)",
            assessment.overall_risk.label,
            assessment.risk_score,
            len(assessment.factors),
        )
        return assessment
