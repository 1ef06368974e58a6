"""
Analytics: wallet_metrics
=========================
Per-wallet performance metrics from raw.wallet_activity.
"""

from prefect import get_run_logger, task

from wallet_analytics.analysis import calculate_wallet_metrics
from wallet_analytics.analytics._activity import read_activity
from wallet_analytics.db import upsert_batch

TABLE_NAME = "analytics.wallet_metrics"
SOURCE_TABLES = ["raw.wallet_activity"]


def read_source() -> dict[str, list[dict]]:
    """Read activity grouped by wallet."""
    return read_activity()


def transform(activities: dict[str, list[dict]]) -> list[dict]:
    """
    Compute one wallet_metrics row per wallet.

    Args:
        activities: wallet → activity records

    Returns:
        wallet_metrics records
    """
    return [
        {"wallet": wallet, **calculate_wallet_metrics(records).to_dict()}
        for wallet, records in activities.items()
    ]


def load(records: list[dict]) -> int:
    """Upsert records to analytics.wallet_metrics."""
    logger = get_run_logger()

    count = upsert_batch(TABLE_NAME, records, on_conflict="wallet")
    logger.info(f"✅ Loaded {count:,} records to {TABLE_NAME}")

    return count


@task(name="build-wallet-metrics")
def build() -> int:
    """
    Full pipeline: read → transform → load.

    Returns:
        Number of records loaded
    """
    logger = get_run_logger()
    logger.info(f"🔨 Building {TABLE_NAME}")

    activities = read_source()
    logger.info(f"   Read activity for {len(activities):,} wallets")

    records = transform(activities)
    count = load(records)

    logger.info(f"✅ Built {TABLE_NAME}: {count:,} records")
    return count
