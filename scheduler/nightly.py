"""Nightly scheduler — assesses injury risk from Garmin data and writes a report.

Usage:
    python -m scheduler.nightly --once                # single run (for cron)
    python -m scheduler.nightly --daemon              # APScheduler loop
    python -m scheduler.nightly --once --narrative    # include AI analysis
"""

from __future__ import annotations

import argparse
import json
import logging
from datetime import date, datetime
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo

from garmin_client import GarminClient, GarminClientError, GarminRecordSource
from risk_engine.exceptions import SignalAggregationError
from risk_engine.models.thresholds import RiskThresholds
from risk_engine.narrative import AnthropicTextGenerator
from risk_engine.scoring import build_warnings
from risk_engine.service import InjuryRiskService, create_injury_risk_service

from scheduler.config import (
    ANTHROPIC_API_KEY,
    GARMIN_EMAIL,
    GARMIN_PASSWORD,
    NARRATIVE_MODEL,
    NARRATIVE_TIMEOUT_S,
    NIGHTLY_HOUR,
    NIGHTLY_MINUTE,
    REPORT_DIR,
    RISK_TIMEZONE,
    RISK_USER_ID,
    THRESHOLDS_PATH,
    TOKEN_DIR,
)

logger = logging.getLogger(__name__)


def load_thresholds(path: str) -> RiskThresholds:
    """Default thresholds, with overrides from a JSON file when *path* is set."""
    if not path:
        return RiskThresholds()
    with open(path) as f:
        overrides = json.load(f)
    logger.info("Loaded %d threshold overrides from %s", len(overrides), path)
    return RiskThresholds.from_mapping(overrides)


def local_today(tz_name: str) -> date:
    """Today's date in the zone named by *tz_name*, or the host's date if unset."""
    if tz_name:
        return datetime.now(ZoneInfo(tz_name)).date()
    return date.today()


def build_service(client: GarminClient, narrative: bool) -> InjuryRiskService:
    """Wire the risk service over a Garmin-backed record source."""
    generator = None
    if narrative:
        if ANTHROPIC_API_KEY:
            generator = AnthropicTextGenerator(
                api_key=ANTHROPIC_API_KEY,
                model=NARRATIVE_MODEL,
                timeout_s=NARRATIVE_TIMEOUT_S,
            )
        else:
            logger.warning("ANTHROPIC_API_KEY not set, narrative will use fallback text")

    return create_injury_risk_service(
        GarminRecordSource(client),
        thresholds=load_thresholds(THRESHOLDS_PATH),
        generator=generator,
        tz=ZoneInfo(RISK_TIMEZONE) if RISK_TIMEZONE else None,
    )


def write_report(report: dict[str, Any], report_dir: Path, day: date) -> Path:
    """Write *report* as JSON to ``<report_dir>/risk-<day>.json``."""
    report_dir.mkdir(parents=True, exist_ok=True)
    path = report_dir / f"risk-{day.isoformat()}.json"
    with open(path, "w") as f:
        json.dump(report, f, indent=2)
    return path


def nightly_job(narrative: bool = False) -> None:
    """Execute one nightly cycle: pull records, assess, log warnings, write report."""
    logger.info("Starting nightly risk check")

    # 1. Connect to Garmin
    try:
        client = GarminClient(
            email=GARMIN_EMAIL,
            password=GARMIN_PASSWORD,
            token_dir=TOKEN_DIR,
        )
    except GarminClientError as exc:
        logger.error("Failed to connect to Garmin: %s", exc)
        return

    service = build_service(client, narrative)
    today = local_today(RISK_TIMEZONE)

    # 2. Assess
    try:
        assessment = service.get_assessment(RISK_USER_ID, today=today)
    except SignalAggregationError as exc:
        logger.error("Failed to aggregate training signals: %s", exc)
        return

    warnings = build_warnings(assessment)
    logger.info(
        "Risk %s (score %d), reduce load: %s",
        assessment.overall_risk.label,
        assessment.risk_score,
        assessment.should_reduce_load,
    )
    for warning in warnings.warnings:
        logger.warning("Injury warning: %s", warning)

    # 3. Report
    report: dict[str, Any] = {
        "date": today.isoformat(),
        "userId": RISK_USER_ID,
        "assessment": assessment.to_dict(),
        **warnings.to_dict(),
    }
    if narrative:
        report["analysis"] = service.explainer.explain(assessment)

    path = write_report(report, REPORT_DIR, today)
    logger.info("Nightly risk check complete, report at %s", path)


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    parser = argparse.ArgumentParser(description="Nightly injury risk check")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--once", action="store_true", help="Run once and exit")
    group.add_argument("--daemon", action="store_true", help="Run as APScheduler daemon")
    parser.add_argument(
        "--narrative", action="store_true", help="Add an AI narrative to the report"
    )
    args = parser.parse_args()

    if args.once:
        nightly_job(narrative=args.narrative)
    else:
        from apscheduler.schedulers.blocking import BlockingScheduler

        scheduler = BlockingScheduler()
        scheduler.add_job(
            nightly_job,
            "cron",
            hour=NIGHTLY_HOUR,
            minute=NIGHTLY_MINUTE,
            kwargs={"narrative": args.narrative},
            id="nightly_risk_check",
        )
        logger.info(
            "Scheduler started, nightly risk check at %02d:%02d",
            NIGHTLY_HOUR,
            NIGHTLY_MINUTE,
        )
        try:
            scheduler.start()
        except (KeyboardInterrupt, SystemExit):
            logger.info("Scheduler stopped")


if __name__ == "__main__":
    main()
