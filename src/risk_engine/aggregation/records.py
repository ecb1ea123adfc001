"""Raw training records and the source interface the aggregator reads them from."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import defaultdict
from dataclasses import dataclass
from datetime import date, datetime

from risk_engine.aggregation.units import km_to_meters, miles_to_meters


@dataclass(frozen=True)
class StrengthSet:
    """One logged strength-training set."""

    performed_at: datetime
    weight_kg: float
    reps: int


@dataclass(frozen=True)
class EnduranceSession:
    """One logged endurance session (run, ride, ...). Distance in meters."""

    started_at: datetime
    distance_m: float

    @classmethod
    def from_miles(cls, started_at: datetime, miles: float) -> "EnduranceSession":
        return cls(started_at, miles_to_meters(miles))

    @classmethod
    def from_km(cls, started_at: datetime, km: float) -> "EnduranceSession":
        return cls(started_at, km_to_meters(km))


@dataclass(frozen=True)
class ReadinessCheckIn:
    """A self-reported or device-derived wellness check-in.

    Any metric may be missing; averages only count check-ins that report it.
    """

    recorded_at: datetime
    recovery_score: float | None = None  # 0-100
    sleep_hours: float | None = None
    stress_score: float | None = None  # 0-100
    soreness_score: float | None = None  # 0-100


class TrainingRecordSource(ABC):
    """Read-only access to a user's training records.

    Date bounds are inclusive local calendar dates. Implementations may return
    records slightly outside the bounds; the aggregator re-filters them.
    """

    @abstractmethod
    def strength_sets(self, user_id: str, start: date, end: date) -> list[StrengthSet]:
        ...

    @abstractmethod
    def endurance_sessions(
        self, user_id: str, start: date, end: date
    ) -> list[EnduranceSession]:
        ...

    @abstractmethod
    def readiness_checkins(
        self, user_id: str, start: date, end: date
    ) -> list[ReadinessCheckIn]:
        ...


class InMemoryRecordSource(TrainingRecordSource):
    """Record source backed by plain lists, keyed by user id.

    Usage:
        source = InMemoryRecordSource()
        source.add_strength_set("u1", StrengthSet(now, 100.0, 5))
    """

    def __init__(self) -> None:
        self._sets: dict[str, list[StrengthSet]] = defaultdict(list)
        self._sessions: dict[str, list[EnduranceSession]] = defaultdict(list)
        self._checkins: dict[str, list[ReadinessCheckIn]] = defaultdict(list)

    def add_strength_set(self, user_id: str, record: StrengthSet) -> None:
        self._sets[user_id].append(record)

    def add_endurance_session(self, user_id: str, record: EnduranceSession) -> None:
        self._sessions[user_id].append(record)

    def add_checkin(self, user_id: str, record: ReadinessCheckIn) -> None:
        self._checkins[user_id].append(record)

    def strength_sets(self, user_id: str, start: date, end: date) -> list[StrengthSet]:
        return [
            r for r in self._sets.get(user_id, [])
            if start <= r.performed_at.date() <= end
        ]

    def endurance_sessions(
        self, user_id: str, start: date, end: date
    ) -> list[EnduranceSession]:
        return [
            r for r in self._sessions.get(user_id, [])
            if start <= r.started_at.date() <= end
        ]

    def readiness_checkins(
        self, user_id: str, start: date, end: date
    ) -> list[ReadinessCheckIn]:
        return [
            r for r in self._checkins.get(user_id, [])
            if start <= r.recorded_at.date() <= end
        ]
