"""Signal aggregation: raw training records → TrainingSignals."""

from risk_engine.aggregation.aggregator import SignalAggregator, count_consecutive_days
from risk_engine.aggregation.records import (
    EnduranceSession,
    InMemoryRecordSource,
    ReadinessCheckIn,
    StrengthSet,
    TrainingRecordSource,
)

__all__ = [
    "EnduranceSession",
    "InMemoryRecordSource",
    "ReadinessCheckIn",
    "SignalAggregator",
    "StrengthSet",
    "TrainingRecordSource",
    "count_consecutive_days",
]
