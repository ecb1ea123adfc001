"""Narrative explanations of assessments via a text-generation service."""

from risk_engine.narrative.explainer import NarrativeExplainer
from risk_engine.narrative.generator import AnthropicTextGenerator, TextGenerator

__all__ = ["AnthropicTextGenerator", "NarrativeExplainer", "TextGenerator"]
