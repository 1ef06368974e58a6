"""
Tests for hold-time based strategy identification.
"""

from wallet_analytics.analysis import calculate_hold_times, identify_trading_strategy
from wallet_analytics.analysis.strategy import DAY_MS, HOUR_MS, WEEK_MS


def round_trip(hold_ms, token="TOKEN1", start=1000):
    return [
        {"type": "buy", "token": token, "timestamp": start},
        {"type": "sell", "token": token, "timestamp": start + hold_ms},
    ]


class TestIdentifyTradingStrategy:
    def test_scalper(self):
        assert identify_trading_strategy(round_trip(30 * 60 * 1000)) == "scalper"

    def test_day_trader(self):
        assert identify_trading_strategy(round_trip(4 * HOUR_MS)) == "day-trader"

    def test_swing_trader(self):
        assert identify_trading_strategy(round_trip(3 * DAY_MS)) == "swing-trader"

    def test_position_trader(self):
        assert identify_trading_strategy(round_trip(10 * DAY_MS)) == "position-trader"

    def test_bucket_upper_bounds_are_exclusive(self):
        assert identify_trading_strategy(round_trip(HOUR_MS)) == "day-trader"
        assert identify_trading_strategy(round_trip(DAY_MS)) == "swing-trader"
        assert identify_trading_strategy(round_trip(WEEK_MS)) == "position-trader"

    def test_uses_average_hold_time(self):
        # 10 min and 2h average to 65 min
        transactions = round_trip(10 * 60 * 1000, "A") + round_trip(2 * HOUR_MS, "B")
        assert identify_trading_strategy(transactions) == "day-trader"

    def test_no_closed_positions(self):
        assert identify_trading_strategy([]) == "unknown"
        assert identify_trading_strategy([{"type": "buy", "token": "A", "timestamp": 1}]) == "unknown"


class TestCalculateHoldTimes:
    def test_interleaved_tokens(self):
        transactions = [
            {"type": "buy", "token": "A", "timestamp": 0},
            {"type": "buy", "token": "B", "timestamp": 100},
            {"type": "sell", "token": "A", "timestamp": 500},
            {"type": "sell", "token": "B", "timestamp": 1000},
        ]
        assert calculate_hold_times(transactions) == [500, 900]

    def test_sell_without_open_position_ignored(self):
        transactions = [
            {"type": "sell", "token": "C", "timestamp": 2000},
            {"type": "buy", "token": "A", "timestamp": 0},
            {"type": "sell", "token": "A", "timestamp": 300},
            {"type": "sell", "token": "A", "timestamp": 900},
        ]
        assert calculate_hold_times(transactions) == [300]

    def test_rebuy_replaces_open_position(self):
        transactions = [
            {"type": "buy", "token": "A", "timestamp": 0},
            {"type": "buy", "token": "A", "timestamp": 100},
            {"type": "sell", "token": "A", "timestamp": 400},
        ]
        assert calculate_hold_times(transactions) == [300]

    def test_other_types_ignored(self):
        transactions = [
            {"type": "buy", "token": "A", "timestamp": 0},
            {"type": "transfer", "token": "A", "timestamp": 50},
            {"type": "sell", "token": "A", "timestamp": 80},
        ]
        assert calculate_hold_times(transactions) == [80]

    def test_records_without_timestamp_skipped(self):
        transactions = [
            {"type": "buy", "token": "A"},
            {"type": "sell", "token": "A", "timestamp": 1_700_000_000_000},
            {"type": "buy", "token": "B", "timestamp": 0},
            {"type": "sell", "token": "B", "timestamp": None},
            {"type": "sell", "token": "B", "timestamp": 600},
        ]
        assert calculate_hold_times(transactions) == [600]

    def test_timestampless_buy_does_not_inflate_strategy(self):
        transactions = [
            {"type": "buy", "token": "A"},
            {"type": "sell", "token": "A", "timestamp": 1_700_000_000_000},
        ] + round_trip(10 * 60 * 1000, "B")
        assert identify_trading_strategy(transactions) == "scalper"
