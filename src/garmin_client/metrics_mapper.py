"""Pure functions mapping Garmin API response dicts to training records.

No I/O. Takes raw dicts from GarminClient methods and returns the record
types the signal aggregator consumes. Every extractor tolerates None and
malformed input by returning None or an empty list.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time
from typing import Any, Optional

from risk_engine.aggregation.records import (
    EnduranceSession,
    ReadinessCheckIn,
    StrengthSet,
)

logger = logging.getLogger(__name__)

_STRENGTH_TYPE_KEYS = frozenset({"strength_training", "indoor_strength_training"})

# Garmin stores exercise-set weight in grams
_GRAMS_PER_KG = 1000.0


def activity_type_key(activity: dict[str, Any]) -> str:
    """Return the activity's typeKey (e.g. "running"), or "" if absent."""
    activity_type = activity.get("activityType")
    if isinstance(activity_type, dict):
        return str(activity_type.get("typeKey") or "")
    return ""


def is_running(activity: dict[str, Any]) -> bool:
    """True for running, trail_running, treadmill_running, track_running, ..."""
    return "running" in activity_type_key(activity)


def is_strength(activity: dict[str, Any]) -> bool:
    return activity_type_key(activity) in _STRENGTH_TYPE_KEYS


def map_endurance_sessions(activities: list[dict[str, Any]]) -> list[EnduranceSession]:
    """Map running activities to EnduranceSessions (distance stays in meters)."""
    sessions: list[EnduranceSession] = []
    for activity in activities or []:
        if not isinstance(activity, dict) or not is_running(activity):
            continue
        started_at = _parse_start(activity)
        if started_at is None:
            continue
        try:
            distance_m = float(activity.get("distance") or 0.0)
        except (ValueError, TypeError):
            continue
        sessions.append(EnduranceSession(started_at=started_at, distance_m=distance_m))
    return sessions


def map_strength_sets(
    activity: dict[str, Any], exercise_sets: Any
) -> list[StrengthSet]:
    """Map the ACTIVE sets of a strength activity to StrengthSets.

    All sets take the activity's local start time; rest sets and sets
    without weight or reps are dropped.
    """
    started_at = _parse_start(activity)
    if started_at is None or not isinstance(exercise_sets, dict):
        return []

    result: list[StrengthSet] = []
    for entry in exercise_sets.get("exerciseSets") or []:
        if not isinstance(entry, dict) or entry.get("setType") != "ACTIVE":
            continue
        try:
            weight_kg = float(entry.get("weight") or 0.0) / _GRAMS_PER_KG
            reps = int(entry.get("repetitionCount") or 0)
        except (ValueError, TypeError):
            continue
        if weight_kg <= 0 or reps <= 0:
            continue
        result.append(StrengthSet(performed_at=started_at, weight_kg=weight_kg, reps=reps))
    return result


def map_readiness_checkin(cdate: date, raw: dict[str, Any]) -> Optional[ReadinessCheckIn]:
    """Map one day of pull_daily_wellness() output to a ReadinessCheckIn.

    Returns None when the day carries none of the metrics. Garmin has no
    soreness metric, so soreness is always absent.
    """
    recovery = _extract_recovery_score(raw.get("training_readiness"))
    sleep_hours = _extract_sleep_hours(raw.get("sleep"))
    stress = _extract_stress(raw.get("stats"))
    if recovery is None and sleep_hours is None and stress is None:
        return None
    return ReadinessCheckIn(
        recorded_at=datetime.combine(cdate, time(hour=12)),
        recovery_score=recovery,
        sleep_hours=sleep_hours,
        stress_score=stress,
    )


# ---------------------------------------------------------------------------
# Internal extractors, each tolerant of None input
# ---------------------------------------------------------------------------


def _parse_start(activity: dict[str, Any]) -> Optional[datetime]:
    """Local start time of an activity ("2025-01-15 07:00:00")."""
    raw = activity.get("startTimeLocal")
    if not raw:
        return None
    try:
        return datetime.fromisoformat(str(raw))
    except ValueError:
        logger.debug("Unparseable activity start %r", raw)
        return None


def _extract_sleep_hours(data: Any) -> Optional[float]:
    """Total sleep in hours. Path: dailySleepDTO.sleepTimeSeconds"""
    if not data or not isinstance(data, dict):
        return None

    dto = data.get("dailySleepDTO")
    if not isinstance(dto, dict):
        return None
    seconds = dto.get("sleepTimeSeconds")
    if seconds is None:
        return None
    try:
        return round(float(seconds) / 3600.0, 2)
    except (ValueError, TypeError):
        return None


def _extract_stress(data: Any) -> Optional[float]:
    """Average daily stress (0-100) from daily stats.

    Garmin reports negative values when there was not enough data.
    """
    if not data or not isinstance(data, dict):
        return None

    value = data.get("averageStressLevel")
    if value is None:
        return None
    try:
        stress = float(value)
    except (ValueError, TypeError):
        return None
    return stress if stress >= 0 else None


def _extract_recovery_score(data: Any) -> Optional[float]:
    """Training Readiness score (0-100), used as the recovery score."""
    if not data:
        return None

    # data may be a list or dict
    entry = data
    if isinstance(data, list) and len(data) > 0:
        entry = data[0]

    if not isinstance(entry, dict):
        return None

    score = entry.get("score")
    if score is None:
        return None
    try:
        return float(score)
    except (ValueError, TypeError):
        return None
