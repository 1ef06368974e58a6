"""
Analytics Layer
===============
Transform modules: raw.wallet_activity → analytics schema (one row per wallet).
"""

from wallet_analytics.analytics import wallet_cluster, wallet_metrics, wallet_risk, wallet_strategy

__all__ = [
    "wallet_metrics",
    "wallet_risk",
    "wallet_strategy",
    "wallet_cluster",
]
