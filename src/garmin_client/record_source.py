"""TrainingRecordSource backed by a Garmin Connect account."""

from __future__ import annotations

import logging
from datetime import date, timedelta

from garmin_client.client import GarminClient
from garmin_client.exceptions import GarminAPIError
from garmin_client.metrics_mapper import (
    is_strength,
    map_endurance_sessions,
    map_readiness_checkin,
    map_strength_sets,
)
from risk_engine.aggregation.records import (
    EnduranceSession,
    ReadinessCheckIn,
    StrengthSet,
    TrainingRecordSource,
)

logger = logging.getLogger(__name__)


class GarminRecordSource(TrainingRecordSource):
    """Serves the single athlete whose account *client* is logged into.

    ``user_id`` is only used for logging. Activity-list failures propagate
    (the aggregator reports them); per-activity and per-day failures are
    logged and skipped so one bad day does not hide the rest of the week.
    The activity list is pulled once per date range and shared by
    ``strength_sets`` and ``endurance_sessions``; build a new source for each
    aggregation run.
    """

    def __init__(self, client: GarminClient) -> None:
        self.client = client
        self._activities: dict[tuple[date, date], list[dict]] = {}

    def _activities_for(self, start: date, end: date) -> list[dict]:
        key = (start, end)
        if key not in self._activities:
            self._activities[key] = self.client.pull_activities(start, end)
        return self._activities[key]

    def strength_sets(self, user_id: str, start: date, end: date) -> list[StrengthSet]:
        result: list[StrengthSet] = []
        for activity in self._activities_for(start, end):
            if not isinstance(activity, dict) or not is_strength(activity):
                continue
            activity_id = activity.get("activityId")
            if activity_id is None:
                continue
            try:
                raw_sets = self.client.pull_exercise_sets(int(activity_id))
            except GarminAPIError:
                logger.warning(
                    "Failed to pull exercise sets of activity %s for %s",
                    activity_id,
                    user_id,
                )
                continue
            result.extend(map_strength_sets(activity, raw_sets))
        return result

    def endurance_sessions(
        self, user_id: str, start: date, end: date
    ) -> list[EnduranceSession]:
        return map_endurance_sessions(self._activities_for(start, end))

    def readiness_checkins(
        self, user_id: str, start: date, end: date
    ) -> list[ReadinessCheckIn]:
        checkins: list[ReadinessCheckIn] = []
        day = start
        while day <= end:
            checkin = map_readiness_checkin(day, self.client.pull_daily_wellness(day))
            if checkin is not None:
                checkins.append(checkin)
            day += timedelta(days=1)
        logger.debug("Pulled %d check-ins for %s", len(checkins), user_id)
        return checkins
