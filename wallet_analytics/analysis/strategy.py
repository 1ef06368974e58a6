"""
Trading Strategy
================
Labels a wallet's trading style from the average time it holds a token.
"""

from collections.abc import Mapping, Sequence

HOUR_MS = 60 * 60 * 1000
DAY_MS = 24 * HOUR_MS
WEEK_MS = 7 * DAY_MS

UNKNOWN = "unknown"

# (exclusive upper bound on average hold time in ms, label)
STRATEGY_BUCKETS = [
    (HOUR_MS, "scalper"),
    (DAY_MS, "day-trader"),
    (WEEK_MS, "swing-trader"),
]
POSITION_TRADER = "position-trader"

STRATEGY_LABELS = tuple(label for _, label in STRATEGY_BUCKETS) + (POSITION_TRADER, UNKNOWN)


def calculate_hold_times(transactions: Sequence[Mapping]) -> list[float]:
    """
    Holding time (ms) of each closed position, in close order.

    A buy opens the position for its token, replacing any open one. A sell
    closes it. Sells with no open position are ignored, as are buys and
    sells without a timestamp.
    """
    hold_times = []
    open_positions: dict = {}

    for tx in transactions:
        timestamp = tx.get("timestamp")
        if timestamp is None:
            continue

        token = tx.get("token")
        if tx.get("type") == "buy":
            open_positions[token] = timestamp
        elif tx.get("type") == "sell" and token in open_positions:
            hold_times.append(timestamp - open_positions.pop(token))

    return hold_times


def average_hold_time(transactions: Sequence[Mapping]) -> float | None:
    """Mean holding time in ms, or None if no position was closed."""
    hold_times = calculate_hold_times(transactions)
    if not hold_times:
        return None
    return sum(hold_times) / len(hold_times)


def label_hold_time(avg_hold_ms: float | None) -> str:
    if avg_hold_ms is None:
        return UNKNOWN
    for upper, label in STRATEGY_BUCKETS:
        if avg_hold_ms < upper:
            return label
    return POSITION_TRADER


def identify_trading_strategy(transactions: Sequence[Mapping]) -> str:
    """
    Estimate a wallet's trading strategy.

    Returns:
        'scalper' (< 1h), 'day-trader' (< 1d), 'swing-trader' (< 1w),
        'position-trader', or 'unknown' when no position was closed
    """
    return label_hold_time(average_hold_time(transactions))
