"""
Tests for analytics transform steps (no database).
"""

from wallet_analytics.analytics import wallet_cluster, wallet_metrics, wallet_risk, wallet_strategy
from wallet_analytics.analytics._activity import group_by_wallet
from wallet_analytics.analysis.strategy import HOUR_MS
from wallet_analytics.config import Settings

T0 = 1_700_000_000_000


def raw_row(wallet, signature, **data):
    """Row shaped like raw.wallet_activity (JSONB data column)."""
    return {"wallet": wallet, "signature": signature, "data": {"wallet": wallet, "signature": signature, **data}}


# =============================================================================
# group_by_wallet Tests
# =============================================================================


class TestGroupByWallet:
    def test_groups_and_sorts_by_timestamp(self):
        rows = [
            raw_row("A", "s2", type="sell", timestamp=T0 + 10),
            raw_row("B", "s3", type="buy", timestamp=T0),
            raw_row("A", "s1", type="buy", timestamp=T0),
        ]

        grouped = group_by_wallet(rows)

        assert set(grouped) == {"A", "B"}
        assert [r["signature"] for r in grouped["A"]] == ["s1", "s2"]

    def test_drops_duplicate_signatures(self):
        rows = [raw_row("A", "s1", timestamp=T0), raw_row("A", "s1", timestamp=T0)]
        assert len(group_by_wallet(rows)["A"]) == 1

    def test_flat_records_and_missing_wallet(self):
        rows = [{"wallet": "A", "type": "sell", "profit": 5}, {"type": "sell"}]
        assert group_by_wallet(rows) == {"A": [{"wallet": "A", "type": "sell", "profit": 5}]}


# =============================================================================
# Transform Tests
# =============================================================================


ACTIVITIES = {
    "winner": [
        {"type": "buy", "token": "A", "amount": 100, "timestamp": T0},
        {"type": "sell", "token": "A", "amount": 150, "profit": 50, "timestamp": T0 + 10 * 60 * 1000},
    ],
    "loser": [
        {"type": "buy", "token": "B", "amount": 100, "timestamp": T0},
        {"type": "sell", "token": "B", "amount": 60, "profit": -40, "timestamp": T0 + 5 * HOUR_MS},
    ],
}


def test_wallet_metrics_transform():
    rows = {r["wallet"]: r for r in wallet_metrics.transform(ACTIVITIES)}

    assert rows["winner"]["win_rate"] == 1
    assert rows["winner"]["profit_factor"] == 50
    assert rows["loser"]["win_rate"] == 0
    assert rows["loser"]["total_transactions"] == 2


def test_wallet_strategy_transform():
    rows = {r["wallet"]: r for r in wallet_strategy.transform(ACTIVITIES)}

    assert rows["winner"] == {
        "wallet": "winner",
        "strategy": "scalper",
        "closed_positions": 1,
        "avg_hold_time_ms": 10 * 60 * 1000,
    }
    assert rows["loser"]["strategy"] == "day-trader"


def test_wallet_strategy_transform_without_closed_positions():
    rows = wallet_strategy.transform({"w": [{"type": "buy", "token": "A", "timestamp": T0}]})
    assert rows == [
        {"wallet": "w", "strategy": "unknown", "closed_positions": 0, "avg_hold_time_ms": None}
    ]


def test_wallet_cluster_transform():
    rows = {r["wallet"]: r["cluster"] for r in wallet_cluster.transform(ACTIVITIES)}
    assert rows == {"winner": "high-performers", "loser": "low-performers"}


class TestWalletRisk:
    def test_recent_window_relative_to_latest(self):
        records = [
            {"timestamp": T0},
            {"timestamp": T0 + 2 * HOUR_MS},
            {"timestamp": T0 + 2 * HOUR_MS + 1000},
            {"amount": 5},
        ]

        recent = wallet_risk.recent_window(records, window_hours=1)

        assert [r["timestamp"] for r in recent] == [T0 + 2 * HOUR_MS, T0 + 2 * HOUR_MS + 1000]

    def test_recent_window_without_timestamps_keeps_everything(self):
        records = [{"amount": 1}, {"amount": 2}]
        assert wallet_risk.recent_window(records, window_hours=1) == records

    def test_transform_scores_only_the_window(self):
        settings = Settings(frequency_threshold=2)
        old = [{"amount": 7, "timestamp": T0 + i * 10_000} for i in range(5)]
        new = [{"amount": 9, "timestamp": T0 + 5 * HOUR_MS}]

        rows = wallet_risk.transform({"w": old + new}, settings)

        assert rows == [
            {
                "wallet": "w",
                "score": 0,
                "category": "low",
                "volume_spike": False,
                "unusual_activity": False,
                "high_frequency": False,
                "large_positions": False,
                "window_transactions": 1,
            }
        ]
