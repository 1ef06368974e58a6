"""
Behavioral Clustering
=====================
Groups wallets by trading performance (win rate and profit factor).
"""

from collections.abc import Mapping, Sequence

from wallet_analytics.analysis.performance import calculate_wallet_metrics
from wallet_analytics.analysis.records import WalletMetrics

HIGH_PERFORMERS = "high-performers"
MODERATE_PERFORMERS = "moderate-performers"
LOW_PERFORMERS = "low-performers"

CLUSTER_LABELS = (HIGH_PERFORMERS, MODERATE_PERFORMERS, LOW_PERFORMERS)


def classify_performance(metrics: WalletMetrics) -> str:
    """Cluster label for one wallet's metrics."""
    if metrics.win_rate > 0.7 and metrics.profit_factor > 2:
        return HIGH_PERFORMERS
    if metrics.win_rate > 0.5:
        return MODERATE_PERFORMERS
    return LOW_PERFORMERS


def cluster_wallets_by_behavior(
    wallets: Sequence[str],
    activities: Mapping[str, Sequence[Mapping]],
) -> dict[str, list[str]]:
    """
    Group wallets into performance clusters.

    Args:
        wallets: Wallet addresses, in the order members should appear
        activities: wallet → activity records (missing wallets have none)

    Returns:
        cluster label → wallets; only non-empty clusters are present
    """
    clusters: dict[str, list[str]] = {}

    for wallet in wallets:
        metrics = calculate_wallet_metrics(activities.get(wallet, []))
        clusters.setdefault(classify_performance(metrics), []).append(wallet)

    return clusters
