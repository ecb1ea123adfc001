"""NarrativeExplainer — optional prose on top of a computed Assessment.

The narrative never changes the assessment. If the generator fails, the
explainer degrades to a plain fallback that says no analysis was produced
and repeats the engine's suggested actions.
"""

from __future__ import annotations

import logging

from risk_engine.exceptions import NarrativeUnavailableError
from risk_engine.models.assessment import Assessment
from risk_engine.narrative.generator import TextGenerator
from risk_engine.narrative.prompts import (
    BALANCED_MESSAGE,
    SYSTEM_PROMPT,
    build_prompt,
    fallback_text,
)

logger = logging.getLogger(__name__)

NARRATIVE_MAX_TOKENS = 400


class NarrativeExplainer:
    """Turns an Assessment into a short prose explanation."""

    def __init__(self, generator: TextGenerator | None = None) -> None:
        self.generator = generator

    def explain(self, assessment: Assessment) -> str:
        """Return a short natural-language explanation of *assessment*.

        No factors → the static balanced message; the generator is not called.
        No generator configured, or generator failure → fallback text.
        """
        if not assessment.factors:
            return BALANCED_MESSAGE

        if self.generator is None:
            logger.info("No text generator configured, returning fallback")
            return fallback_text(assessment)

        try:
            return self.generator.generate(
                build_prompt(assessment),
                system_prompt=SYSTEM_PROMPT,
                max_tokens=NARRATIVE_MAX_TOKENS,
            ).strip()
        except (NarrativeUnavailableError, TimeoutError, ConnectionError) as exc:
            logger.warning("Narrative unavailable, returning fallback: %s", exc)
            return fallback_text(assessment)
