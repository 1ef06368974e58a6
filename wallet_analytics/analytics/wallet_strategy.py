"""
Analytics: wallet_strategy
==========================
Trading-strategy label per wallet from average holding time.
"""

from prefect import get_run_logger, task

from wallet_analytics.analysis.strategy import average_hold_time, calculate_hold_times, label_hold_time
from wallet_analytics.analytics._activity import read_activity
from wallet_analytics.db import upsert_batch

TABLE_NAME = "analytics.wallet_strategy"
SOURCE_TABLES = ["raw.wallet_activity"]


def read_source() -> dict[str, list[dict]]:
    """Read activity grouped by wallet."""
    return read_activity()


def transform(activities: dict[str, list[dict]]) -> list[dict]:
    """
    Label each wallet's strategy.

    Returns:
        wallet_strategy records (strategy, closed_positions, avg_hold_time_ms)
    """
    records = []
    for wallet, activity in activities.items():
        avg_hold = average_hold_time(activity)
        records.append(
            {
                "wallet": wallet,
                "strategy": label_hold_time(avg_hold),
                "closed_positions": len(calculate_hold_times(activity)),
                "avg_hold_time_ms": avg_hold,
            }
        )
    return records


def load(records: list[dict]) -> int:
    """Upsert records to analytics.wallet_strategy."""
    logger = get_run_logger()

    count = upsert_batch(TABLE_NAME, records, on_conflict="wallet")
    logger.info(f"✅ Loaded {count:,} records to {TABLE_NAME}")

    return count


@task(name="build-wallet-strategy")
def build() -> int:
    """Full pipeline: read → transform → load."""
    logger = get_run_logger()
    logger.info(f"🔨 Building {TABLE_NAME}")

    activities = read_source()
    records = transform(activities)
    count = load(records)

    logger.info(f"✅ Built {TABLE_NAME}: {count:,} records")
    return count
