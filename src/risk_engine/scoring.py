"""Score composition, risk classification and suggested actions.

Pure functions over a list of detected factors. Kept apart from the
detectors so "what is a risk factor" and "how a list of them is scored"
can change independently.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from risk_engine.models.assessment import Assessment, RiskFactor, Warnings
from risk_engine.models.enums import FactorType, RiskLevel, Severity
from risk_engine.models.thresholds import RiskThresholds

COMPLETE_REST_ACTION = "Take a complete rest day today"
CRITICAL_VOLUME_ACTION = "Reduce training volume by 40-50% this week"
HIGH_VOLUME_ACTION = "Reduce training volume by 20-30% this week"
MODERATE_MONITOR_ACTION = "Monitor symptoms closely and watch for pain that persists or worsens"

DELOAD_ACTION = "Multiple risk factors detected. Consider taking a deload week."
RECOVERY_AND_SLEEP_ACTION = (
    "Both recovery and sleep are low. This significantly increases injury risk."
)

# Category guidance appended after the factor recommendations
_LEVEL_ACTIONS: dict[RiskLevel, tuple[str, ...]] = {
    RiskLevel.CRITICAL: (COMPLETE_REST_ACTION, CRITICAL_VOLUME_ACTION),
    RiskLevel.HIGH: (HIGH_VOLUME_ACTION,),
    RiskLevel.MODERATE: (MODERATE_MONITOR_ACTION,),
    RiskLevel.LOW: (),
}


def calculate_risk_score(
    factors: Sequence[RiskFactor], thresholds: RiskThresholds
) -> int:
    """Sum severity points, add the compound bonus, clamp to [0, max_score].

    Raises:
        KeyError: if a factor carries a severity with no point value.
    """
    score = sum(thresholds.points_for(f.severity) for f in factors)
    if len(factors) >= thresholds.compound_factor_count:
        score += thresholds.compound_bonus_points
    return max(0, min(thresholds.max_score, score))


def classify_risk(score: int, thresholds: RiskThresholds) -> RiskLevel:
    """Map a 0-100 risk score onto a RiskLevel."""
    if score >= thresholds.critical_score:
        return RiskLevel.CRITICAL
    if score >= thresholds.high_score:
        return RiskLevel.HIGH
    if score >= thresholds.moderate_score:
        return RiskLevel.MODERATE
    return RiskLevel.LOW


def should_reduce_load(level: RiskLevel) -> bool:
    return level >= RiskLevel.HIGH


def build_suggested_actions(
    factors: Sequence[RiskFactor], level: RiskLevel
) -> tuple[str, ...]:
    """Factor recommendations, then the guidance for the risk category.

    Duplicates are dropped by exact text, keeping the first occurrence.
    """
    actions = [f.recommendation for f in factors]
    actions.extend(_LEVEL_ACTIONS[level])
    return _dedupe(actions)


def build_recommendations(
    factors: Sequence[RiskFactor], thresholds: RiskThresholds
) -> tuple[str, ...]:
    """Factor recommendations plus notes on co-occurring factors."""
    recommendations = [f.recommendation for f in factors]

    types = {f.type for f in factors}
    if FactorType.LOW_RECOVERY in types and FactorType.POOR_SLEEP in types:
        recommendations.append(RECOVERY_AND_SLEEP_ACTION)
    if len(factors) >= thresholds.compound_factor_count:
        recommendations.append(DELOAD_ACTION)
    return _dedupe(recommendations)


def build_assessment(
    factors: Sequence[RiskFactor], thresholds: RiskThresholds
) -> Assessment:
    """Compose a full Assessment from the detected factors."""
    score = calculate_risk_score(factors, thresholds)
    level = classify_risk(score, thresholds)
    return Assessment(
        overall_risk=level,
        risk_score=score,
        factors=tuple(factors),
        should_reduce_load=should_reduce_load(level),
        suggested_actions=build_suggested_actions(factors, level),
        recommendations=build_recommendations(factors, thresholds),
    )


def build_warnings(assessment: Assessment) -> Warnings:
    """Descriptions of the HIGH severity factors only."""
    warnings = tuple(
        f.description for f in assessment.factors if f.severity == Severity.HIGH
    )
    return Warnings(has_warning=bool(warnings), warnings=warnings)


def _dedupe(items: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(items))
