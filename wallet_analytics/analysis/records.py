"""
Analysis Records
================
Result types for wallet analytics and helpers for reading loosely-typed
activity records.

Activity records are plain mappings. Any of these keys may be missing:
type, amount, profit, timestamp (epoch ms), volume, token.
"""

from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from typing import Literal

RiskCategory = Literal["low", "medium", "high", "extreme"]


def num(record: Mapping, key: str) -> float:
    """Numeric value of `key`, treating missing and None as 0."""
    value = record.get(key)
    return value if value is not None else 0


@dataclass
class WalletMetrics:
    """Performance metrics derived from a wallet's transaction history."""

    total_transactions: int = 0
    avg_transaction_size: float = 0.0
    win_rate: float = 0.0
    profit_factor: float = 0.0
    sharpe_ratio: float = 0.0
    max_drawdown: float = 0.0

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class RiskFactors:
    """Boolean risk signals. Each true factor adds 25 to the risk score."""

    volume_spike: bool = False
    unusual_activity: bool = False
    high_frequency: bool = False
    large_positions: bool = False

    @property
    def count(self) -> int:
        return sum(
            (self.volume_spike, self.unusual_activity, self.high_frequency, self.large_positions)
        )


@dataclass
class WalletRiskScore:
    """Risk score (0-100) with its category and contributing factors."""

    wallet: str
    score: int = 0
    category: RiskCategory = "low"
    factors: RiskFactors = field(default_factory=RiskFactors)

    def to_dict(self) -> dict:
        return {
            "wallet": self.wallet,
            "score": self.score,
            "category": self.category,
            **asdict(self.factors),
        }
