"""InjuryRiskService — per-user facade over aggregation, scoring and narrative.

Exposes the three operations an API layer relays to clients:
get_assessment, get_warnings and get_ai_analysis. Each call aggregates a
fresh signals snapshot; nothing is cached between calls.
"""

from __future__ import annotations

import logging
from datetime import date, tzinfo

from risk_engine.aggregation.aggregator import SignalAggregator
from risk_engine.aggregation.records import TrainingRecordSource
from risk_engine.engine import RiskEngine
from risk_engine.models.assessment import Assessment, Warnings
from risk_engine.models.thresholds import RiskThresholds
from risk_engine.narrative.explainer import NarrativeExplainer
from risk_engine.narrative.generator import TextGenerator
from risk_engine.scoring import build_warnings

logger = logging.getLogger(__name__)


class InjuryRiskService:
    """Assess a user's injury risk from their stored training records.

    Usage:
        service = create_injury_risk_service(source)
        assessment = service.get_assessment("user-1")
        warnings = service.get_warnings("user-1")
    """

    def __init__(
        self,
        aggregator: SignalAggregator,
        engine: RiskEngine | None = None,
        explainer: NarrativeExplainer | None = None,
    ) -> None:
        self.aggregator = aggregator
        self.engine = engine or RiskEngine()
        self.explainer = explainer or NarrativeExplainer()

    def get_assessment(self, user_id: str, today: date | None = None) -> Assessment:
        """Aggregate the user's signals and score them.

        Raises:
            SignalAggregationError: if the user's records cannot be read.
        """
        signals = self.aggregator.aggregate(user_id, today=today)
        return self.engine.assess(signals)

    def get_warnings(self, user_id: str, today: date | None = None) -> Warnings:
        """High-severity factor descriptions from a freshly computed assessment."""
        warnings = build_warnings(self.get_assessment(user_id, today=today))
        if warnings.has_warning:
            logger.info("User %s has %d injury warnings", user_id, len(warnings.warnings))
        return warnings

    def get_ai_analysis(self, user_id: str, today: date | None = None) -> str:
        """Narrative explanation of a freshly computed assessment.

        Text-generation failures degrade to a fallback message; they never
        affect get_assessment or get_warnings.
        """
        return self.explainer.explain(self.get_assessment(user_id, today=today))


def create_injury_risk_service(
    source: TrainingRecordSource,
    thresholds: RiskThresholds | None = None,
    generator: TextGenerator | None = None,
    tz: tzinfo | None = None,
) -> InjuryRiskService:
    """Wire a service from a record source and optional collaborators."""
    return InjuryRiskService(
        aggregator=SignalAggregator(source, tz=tz),
        engine=RiskEngine(thresholds=thresholds),
        explainer=NarrativeExplainer(generator),
    )
