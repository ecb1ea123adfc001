"""Fixtures with realistic Garmin API response dicts for testing."""

from __future__ import annotations

import pytest


@pytest.fixture
def garmin_run_activity() -> dict:
    """Realistic get_activities_by_date() entry for a run."""
    return {
        "activityId": 1001,
        "activityName": "Morning Run",
        "startTimeLocal": "2025-01-15 07:00:00",
        "startTimeGMT": "2025-01-15 12:00:00",
        "activityType": {"typeId": 1, "typeKey": "running", "parentTypeId": 17},
        "distance": 10012.5,
        "duration": 3120.4,
        "averageHR": 148.0,
    }


@pytest.fixture
def garmin_strength_activity() -> dict:
    """Realistic get_activities_by_date() entry for a gym session."""
    return {
        "activityId": 2002,
        "activityName": "Strength",
        "startTimeLocal": "2025-01-14 18:30:00",
        "startTimeGMT": "2025-01-14 23:30:00",
        "activityType": {"typeId": 13, "typeKey": "strength_training", "parentTypeId": 29},
        "distance": 0.0,
        "duration": 2700.0,
    }


@pytest.fixture
def garmin_exercise_sets() -> dict:
    """Realistic get_activity_exercise_sets() response (weight in grams)."""
    return {
        "activityId": 2002,
        "exerciseSets": [
            {
                "setType": "ACTIVE",
                "repetitionCount": 5,
                "weight": 100000.0,
                "exercises": [{"category": "SQUAT", "name": "BARBELL_BACK_SQUAT"}],
            },
            {"setType": "REST", "repetitionCount": None, "weight": None, "exercises": []},
            {
                "setType": "ACTIVE",
                "repetitionCount": 8,
                "weight": 60000.0,
                "exercises": [{"category": "BENCH_PRESS", "name": "BARBELL_BENCH_PRESS"}],
            },
            {
                "setType": "ACTIVE",
                "repetitionCount": 12,
                "weight": None,  # bodyweight
                "exercises": [{"category": "PULL_UP", "name": "PULL_UP"}],
            },
        ],
    }


@pytest.fixture
def garmin_sleep_data() -> dict:
    """Realistic Garmin sleep API response."""
    return {
        "dailySleepDTO": {
            "calendarDate": "2025-01-15",
            "sleepTimeSeconds": 27000,  # 7.5 hours
            "deepSleepSeconds": 5400,
            "lightSleepSeconds": 14400,
            "remSleepSeconds": 5400,
            "awakeSleepSeconds": 1800,
            "sleepScores": {"overall": {"value": 82.0, "qualifierKey": "GOOD"}},
        }
    }


@pytest.fixture
def garmin_stats_data() -> dict:
    """Realistic Garmin daily stats API response."""
    return {
        "calendarDate": "2025-01-15",
        "totalSteps": 12345,
        "restingHeartRate": 52,
        "averageStressLevel": 35,
        "maxStressLevel": 92,
    }


@pytest.fixture
def garmin_training_readiness_data() -> list:
    """Realistic Garmin Training Readiness API response."""
    return [
        {
            "calendarDate": "2025-01-15",
            "score": 72.0,
            "level": "MODERATE",
            "sleepScore": 80,
            "recoveryTime": 620,
        }
    ]


@pytest.fixture
def garmin_daily_wellness(
    garmin_sleep_data,
    garmin_stats_data,
    garmin_training_readiness_data,
) -> dict:
    """Full pull_daily_wellness() return value with all endpoints populated."""
    return {
        "training_readiness": garmin_training_readiness_data,
        "sleep": garmin_sleep_data,
        "stats": garmin_stats_data,
    }
