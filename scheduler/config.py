"""Environment-variable-based configuration for the nightly risk check."""

from __future__ import annotations

import os
from pathlib import Path

GARMIN_EMAIL: str = os.environ.get("GARMIN_EMAIL", "")
GARMIN_PASSWORD: str = os.environ.get("GARMIN_PASSWORD", "")
TOKEN_DIR: Path = Path(os.environ.get("GARMIN_TOKEN_DIR", "~/.garminconnect")).expanduser()
NIGHTLY_HOUR: int = int(os.environ.get("SCHEDULER_HOUR", "21"))
NIGHTLY_MINUTE: int = int(os.environ.get("SCHEDULER_MINUTE", "0"))

RISK_USER_ID: str = os.environ.get("RISK_USER_ID", "garmin")
RISK_TIMEZONE: str = os.environ.get("RISK_TIMEZONE", "")
REPORT_DIR: Path = Path(os.environ.get("RISK_REPORT_DIR", "reports")).expanduser()
# Optional JSON object of RiskThresholds overrides
THRESHOLDS_PATH: str = os.environ.get("RISK_THRESHOLDS_PATH", "")

ANTHROPIC_API_KEY: str = os.environ.get("ANTHROPIC_API_KEY", "")
NARRATIVE_MODEL: str = os.environ.get("RISK_NARRATIVE_MODEL", "claude-sonnet-4-5-20250929")
NARRATIVE_TIMEOUT_S: float = float(os.environ.get("RISK_NARRATIVE_TIMEOUT_S", "20"))
