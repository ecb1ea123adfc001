"""Read-only Garmin Connect facade for the injury risk record source.

Every endpoint call goes through ``_safe_call``: HTTP 429 responses are
retried with exponential backoff, anything else becomes GarminAPIError.
"""

from __future__ import annotations

import logging
import time
from datetime import date
from pathlib import Path
from typing import Any, Callable, Optional

from garminconnect import Garmin

from garmin_client.auth import DEFAULT_TOKEN_DIR, create_session
from garmin_client.exceptions import GarminAPIError, GarminRateLimitError

logger = logging.getLogger(__name__)

_MAX_ATTEMPTS = 3
_BACKOFF_BASE_S = 2

# pull_daily_wellness() key → Garmin method taking an ISO date
_WELLNESS_ENDPOINTS = {
    "training_readiness": "get_training_readiness",
    "sleep": "get_sleep_data",
    "stats": "get_stats",
}


class GarminClient:
    """Pulls the activities and daily wellness one athlete's risk is built from.

    Usage:
        client = GarminClient(email, password, token_dir=TOKEN_DIR)
        activities = client.pull_activities(date(2025, 1, 1), date(2025, 1, 14))
    """

    def __init__(
        self,
        email: str | None = None,
        password: str | None = None,
        token_dir: Path | str = DEFAULT_TOKEN_DIR,
        prompt_mfa: Optional[Callable[[], str]] = None,
    ) -> None:
        self._garmin = create_session(
            email=email or "",
            password=password or "",
            token_dir=token_dir,
            prompt_mfa=prompt_mfa,
        )

    @classmethod
    def from_garmin(cls, garmin: Garmin) -> "GarminClient":
        """Wrap an already-authenticated Garmin session."""
        client = cls.__new__(cls)
        client._garmin = garmin
        return client

    def pull_activities(self, start: date, end: date) -> list[dict]:
        """Activities of any type started between *start* and *end* inclusive."""
        activities = self._safe_call(
            self._garmin.get_activities_by_date, start.isoformat(), end.isoformat()
        ) or []
        logger.debug("Pulled %d activities for %s..%s", len(activities), start, end)
        return activities

    def pull_exercise_sets(self, activity_id: int) -> dict[str, Any] | None:
        """Logged sets of one strength-training activity."""
        return self._safe_call(self._garmin.get_activity_exercise_sets, activity_id)

    def pull_daily_wellness(self, cdate: date) -> dict[str, Any]:
        """Raw readiness, sleep and stats payloads for one calendar day.

        A failing endpoint leaves its key as None; the rest of the day is
        still returned.
        """
        day = cdate.isoformat()
        wellness: dict[str, Any] = {}
        for key, method_name in _WELLNESS_ENDPOINTS.items():
            endpoint = getattr(self._garmin, method_name)
            try:
                wellness[key] = self._safe_call(endpoint, day)
            except GarminAPIError as exc:
                logger.warning("Skipping %s for %s: %s", key, day, exc)
                wellness[key] = None
        return wellness

    def _safe_call(self, fn: Callable, *args: Any) -> Any:
        for attempt in range(1, _MAX_ATTEMPTS + 1):
            try:
                return fn(*args)
            except Exception as exc:
                status = _status_of(exc)
                if status != 429:
                    raise GarminAPIError(str(exc), status_code=status) from exc
                delay = _BACKOFF_BASE_S * 2 ** (attempt - 1)
                logger.warning(
                    "Garmin rate limit hit (attempt %d/%d), sleeping %ds",
                    attempt,
                    _MAX_ATTEMPTS,
                    delay,
                )
                time.sleep(delay)

        raise GarminRateLimitError(f"Still rate limited after {_MAX_ATTEMPTS} attempts")


def _status_of(exc: Exception) -> int | None:
    return getattr(exc, "status", None) or getattr(exc, "status_code", None)
