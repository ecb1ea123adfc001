"""Engine output — risk factors, the assessment, and the warnings view."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from risk_engine.models.enums import FactorType, RiskLevel, Severity


@dataclass(frozen=True)
class RiskFactor:
    """One detected condition and how to mitigate it."""

    type: FactorType
    severity: Severity
    value: float  # the metric that triggered the factor
    threshold: float  # the configured trigger threshold
    description: str
    recommendation: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "severity": self.severity.label,
            "value": self.value,
            "threshold": self.threshold,
            "description": self.description,
            "recommendation": self.recommendation,
        }


@dataclass(frozen=True)
class Assessment:
    """Complete result of a single RiskEngine.assess() call.

    Built fresh per request and never mutated; persisting it is up to the
    caller.
    """

    overall_risk: RiskLevel
    risk_score: int  # 0-100
    factors: tuple[RiskFactor, ...] = field(default_factory=tuple)
    should_reduce_load: bool = False
    suggested_actions: tuple[str, ...] = field(default_factory=tuple)
    # Factor recommendations plus co-occurrence notes (deload, recovery + sleep)
    recommendations: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """Render the camelCase shape callers and API layers consume."""
        return {
            "overallRisk": self.overall_risk.label,
            "riskScore": self.risk_score,
            "factors": [f.to_dict() for f in self.factors],
            "shouldReduceLoad": self.should_reduce_load,
            "suggestedActions": list(self.suggested_actions),
            "recommendations": list(self.recommendations),
        }


@dataclass(frozen=True)
class Warnings:
    """High-severity subset of an assessment, for proactive notifications."""

    has_warning: bool = False
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {"hasWarning": self.has_warning, "warnings": list(self.warnings)}
