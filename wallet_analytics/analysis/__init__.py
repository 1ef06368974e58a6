"""
Analysis Layer
==============
Pure wallet analytics: performance metrics, risk scoring, behavioral
clustering and trading-strategy labels. No I/O.
"""

from wallet_analytics.analysis.clustering import cluster_wallets_by_behavior
from wallet_analytics.analysis.formatting import format_wallet_address
from wallet_analytics.analysis.performance import (
    calculate_max_drawdown,
    calculate_sharpe_ratio,
    calculate_wallet_metrics,
)
from wallet_analytics.analysis.records import RiskFactors, WalletMetrics, WalletRiskScore
from wallet_analytics.analysis.risk import analyze_wallet_risk, detect_unusual_patterns
from wallet_analytics.analysis.strategy import calculate_hold_times, identify_trading_strategy

__all__ = [
    "RiskFactors",
    "WalletMetrics",
    "WalletRiskScore",
    "analyze_wallet_risk",
    "calculate_hold_times",
    "calculate_max_drawdown",
    "calculate_sharpe_ratio",
    "calculate_wallet_metrics",
    "cluster_wallets_by_behavior",
    "detect_unusual_patterns",
    "format_wallet_address",
    "identify_trading_strategy",
]
