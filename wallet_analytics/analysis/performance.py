"""
Performance Metrics
===================
Win rate, profit factor, Sharpe ratio and max drawdown from realized
profits on sell transactions.
"""

import math
from collections.abc import Mapping, Sequence

from wallet_analytics.analysis.records import WalletMetrics, num


def realized_profits(transactions: Sequence[Mapping]) -> list[float]:
    """Profit of each sell, in order. Sells without a profit count as 0."""
    return [num(tx, "profit") for tx in transactions if tx.get("type") == "sell"]


def calculate_wallet_metrics(transactions: Sequence[Mapping]) -> WalletMetrics:
    """
    Calculate wallet performance metrics.

    Args:
        transactions: Activity records for one wallet

    Returns:
        WalletMetrics (all zeros for an empty history)
    """
    if not transactions:
        return WalletMetrics()

    profits = realized_profits(transactions)

    winning = sum(1 for p in profits if p > 0)
    losing = sum(1 for p in profits if p < 0)

    gross_profit = sum(p for p in profits if p > 0)
    gross_loss = sum(abs(p) for p in profits if p < 0)

    decided = winning + losing

    return WalletMetrics(
        total_transactions=len(transactions),
        avg_transaction_size=sum(num(tx, "amount") for tx in transactions) / len(transactions),
        win_rate=winning / decided if decided else 0.0,
        # No losing trades: report gross profit itself
        profit_factor=gross_profit / gross_loss if gross_loss > 0 else gross_profit,
        sharpe_ratio=calculate_sharpe_ratio(profits),
        max_drawdown=calculate_max_drawdown(profits),
    )


def calculate_sharpe_ratio(returns: Sequence[float]) -> float:
    """Mean return over its population standard deviation (0 if undefined)."""
    if not returns:
        return 0.0

    mean = sum(returns) / len(returns)
    variance = sum((r - mean) ** 2 for r in returns) / len(returns)
    std_dev = math.sqrt(variance)

    return mean / std_dev if std_dev > 0 else 0.0


def calculate_max_drawdown(profits: Sequence[float]) -> float:
    """
    Largest peak-to-trough decline of cumulative profit, as a ratio of the peak.

    The peak starts at 0 and only positive peaks are measured against, so a
    history that never goes above break-even has no drawdown.
    """
    peak = 0.0
    running = 0.0
    max_drawdown = 0.0

    for profit in profits:
        running += profit
        if running > peak:
            peak = running
        if peak <= 0:
            continue
        drawdown = (peak - running) / peak
        if drawdown > max_drawdown:
            max_drawdown = drawdown

    return max_drawdown
