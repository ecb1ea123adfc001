"""Data models for the injury risk engine."""

from risk_engine.models.assessment import Assessment, RiskFactor, Warnings
from risk_engine.models.enums import FactorType, RiskLevel, Severity
from risk_engine.models.signals import TrainingSignals
from risk_engine.models.thresholds import RiskThresholds

__all__ = [
    "Assessment",
    "FactorType",
    "RiskFactor",
    "RiskLevel",
    "RiskThresholds",
    "Severity",
    "TrainingSignals",
    "Warnings",
]
