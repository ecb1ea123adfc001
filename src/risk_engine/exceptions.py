"""Custom exception hierarchy for the injury risk engine."""

from __future__ import annotations


class RiskEngineError(Exception):
    """Base exception for all risk_engine errors."""


class ThresholdConfigError(RiskEngineError, ValueError):
    """A threshold override table could not be applied."""


class SignalAggregationError(RiskEngineError):
    """Training records for a user could not be read or reduced to signals."""

    def __init__(self, message: str, user_id: str | None = None) -> None:
        super().__init__(message)
        self.user_id = user_id


class NarrativeUnavailableError(RiskEngineError):
    """The text-generation service failed, timed out, or returned nothing."""
