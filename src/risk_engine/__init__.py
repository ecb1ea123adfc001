"""Rule-based injury risk assessment from recent training signals."""

from risk_engine.engine import RiskEngine
from risk_engine.models import (
    Assessment,
    FactorType,
    RiskFactor,
    RiskLevel,
    RiskThresholds,
    Severity,
    TrainingSignals,
    Warnings,
)
from risk_engine.service import InjuryRiskService, create_injury_risk_service

__all__ = [
    "Assessment",
    "FactorType",
    "InjuryRiskService",
    "RiskEngine",
    "RiskFactor",
    "RiskLevel",
    "RiskThresholds",
    "Severity",
    "TrainingSignals",
    "Warnings",
    "create_injury_risk_service",
]
