"""
Analytics: wallet_cluster
=========================
Behavioral performance cluster per wallet.
"""

from collections import Counter

from prefect import get_run_logger, task

from wallet_analytics.analysis import cluster_wallets_by_behavior
from wallet_analytics.analytics._activity import read_activity
from wallet_analytics.db import upsert_batch

TABLE_NAME = "analytics.wallet_cluster"
SOURCE_TABLES = ["raw.wallet_activity"]


def read_source() -> dict[str, list[dict]]:
    """Read activity grouped by wallet."""
    return read_activity()


def transform(activities: dict[str, list[dict]]) -> list[dict]:
    """
    Flatten cluster membership to one row per wallet.

    Returns:
        wallet_cluster records (wallet, cluster)
    """
    clusters = cluster_wallets_by_behavior(list(activities), activities)
    return [
        {"wallet": wallet, "cluster": label}
        for label, members in clusters.items()
        for wallet in members
    ]


def load(records: list[dict]) -> int:
    """Upsert records to analytics.wallet_cluster."""
    logger = get_run_logger()

    count = upsert_batch(TABLE_NAME, records, on_conflict="wallet")
    logger.info(f"✅ Loaded {count:,} records to {TABLE_NAME}")

    return count


@task(name="build-wallet-cluster")
def build() -> int:
    """Full pipeline: read → transform → load."""
    logger = get_run_logger()
    logger.info(f"🔨 Building {TABLE_NAME}")

    activities = read_source()
    records = transform(activities)

    for label, size in Counter(r["cluster"] for r in records).most_common():
        logger.info(f"   {label}: {size:,} wallets")

    count = load(records)

    logger.info(f"✅ Built {TABLE_NAME}: {count:,} records")
    return count
