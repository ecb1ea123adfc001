"""Prompt text for the narrative explanation of an assessment."""

from __future__ import annotations

from risk_engine.models.assessment import Assessment

SYSTEM_PROMPT = (
    "You are a sports medicine expert providing injury prevention advice. "
    "Be specific, evidence-based, and actionable."
)

BALANCED_MESSAGE = (
    "Your training load looks balanced. Keep up the good work and maintain "
    "your recovery practices!"
)

UNAVAILABLE_PREFIX = "AI analysis is unavailable right now."


def build_prompt(assessment: Assessment) -> str:
    """Summarize an assessment's score and factors for the text generator."""
    factor_lines = "\n".join(
        f"- {f.type.value} ({f.severity.label}): {f.description}"
        for f in assessment.factors
    )
    action_lines = "\n".join(f"- {a}" for a in assessment.suggested_actions)
    return (
        "Analyze this athlete's injury risk data and provide personalized advice.\n\n"
        f"Overall Risk: {assessment.overall_risk.label} "
        f"({assessment.risk_score}/100)\n\n"
        f"Risk Factors:\n{factor_lines}\n\n"
        f"Suggested Actions:\n{action_lines}\n\n"
        "Provide 3-4 specific, actionable recommendations to reduce injury "
        "risk. Be concise and practical."
    )


def fallback_text(assessment: Assessment) -> str:
    """Plain text used when no narrative could be generated."""
    if not assessment.suggested_actions:
        return UNAVAILABLE_PREFIX
    return f"{UNAVAILABLE_PREFIX} Suggested actions: " + "; ".join(
        assessment.suggested_actions
    )
