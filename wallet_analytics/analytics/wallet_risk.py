"""
Analytics: wallet_risk
======================
Risk score and factors over each wallet's most recent activity window.
"""

from prefect import get_run_logger, task

from wallet_analytics.analysis import analyze_wallet_risk
from wallet_analytics.analytics._activity import read_activity
from wallet_analytics.config import Settings, get_settings
from wallet_analytics.db import upsert_batch

TABLE_NAME = "analytics.wallet_risk"
SOURCE_TABLES = ["raw.wallet_activity"]


def recent_window(records: list[dict], window_hours: int) -> list[dict]:
    """
    Records within `window_hours` of the wallet's latest timestamp.

    Records without a timestamp cannot be placed in the window and are dropped,
    unless no record has one, in which case all records are returned.
    """
    timestamps = [r["timestamp"] for r in records if r.get("timestamp") is not None]
    if not timestamps:
        return list(records)

    cutoff = max(timestamps) - window_hours * 60 * 60 * 1000
    return [r for r in records if r.get("timestamp") is not None and r["timestamp"] >= cutoff]


def read_source() -> dict[str, list[dict]]:
    """Read activity grouped by wallet."""
    return read_activity()


def transform(activities: dict[str, list[dict]], settings: Settings | None = None) -> list[dict]:
    """
    Score each wallet's recent activity.

    Returns:
        wallet_risk records (score, category, one column per factor)
    """
    settings = settings or get_settings()

    records = []
    for wallet, activity in activities.items():
        recent = recent_window(activity, settings.risk_window_hours)
        risk = analyze_wallet_risk(wallet, recent, settings)
        records.append({**risk.to_dict(), "window_transactions": len(recent)})

    return records


def load(records: list[dict]) -> int:
    """Upsert records to analytics.wallet_risk."""
    logger = get_run_logger()

    count = upsert_batch(TABLE_NAME, records, on_conflict="wallet")
    logger.info(f"✅ Loaded {count:,} records to {TABLE_NAME}")

    return count


@task(name="build-wallet-risk")
def build() -> int:
    """Full pipeline: read → transform → load."""
    logger = get_run_logger()
    logger.info(f"🔨 Building {TABLE_NAME}")

    activities = read_source()
    records = transform(activities)

    flagged = sum(1 for r in records if r["category"] in ("high", "extreme"))
    logger.info(f"   Scored {len(records):,} wallets ({flagged:,} high or extreme)")

    count = load(records)

    logger.info(f"✅ Built {TABLE_NAME}: {count:,} records")
    return count
