"""
Risk Scoring
============
Threshold-based risk scoring over a wallet's recent activity.
"""

from collections.abc import Mapping, Sequence

from wallet_analytics.analysis.records import RiskCategory, RiskFactors, WalletRiskScore, num
from wallet_analytics.config import Settings, get_settings

POINTS_PER_FACTOR = 25

# (minimum score, category), highest first
RISK_CATEGORIES: list[tuple[int, RiskCategory]] = [
    (75, "extreme"),
    (50, "high"),
    (25, "medium"),
]


def categorize_score(score: int) -> RiskCategory:
    """Map a 0-100 risk score to its category."""
    for minimum, category in RISK_CATEGORIES:
        if score >= minimum:
            return category
    return "low"


def analyze_wallet_risk(
    wallet: str,
    recent_activity: Sequence[Mapping],
    settings: Settings | None = None,
) -> WalletRiskScore:
    """
    Score a wallet's recent activity for risk.

    Args:
        wallet: Wallet address (carried through to the result)
        recent_activity: Activity records inside the risk window
        settings: Threshold overrides (defaults to environment settings)

    Returns:
        WalletRiskScore with score = 25 per true factor
    """
    settings = settings or get_settings()

    total_volume = sum(num(a, "volume") for a in recent_activity)
    large_position = settings.volume_threshold / 10

    factors = RiskFactors(
        volume_spike=total_volume > settings.volume_threshold,
        unusual_activity=detect_unusual_patterns(recent_activity, settings),
        high_frequency=len(recent_activity) > settings.frequency_threshold,
        large_positions=any(num(a, "amount") > large_position for a in recent_activity),
    )

    score = factors.count * POINTS_PER_FACTOR

    return WalletRiskScore(
        wallet=wallet,
        score=score,
        category=categorize_score(score),
        factors=factors,
    )


def detect_unusual_patterns(activity: Sequence[Mapping], settings: Settings | None = None) -> bool:
    """
    Flag rapid-fire transactions or a dominance of round-number amounts.

    Rapid fire: two timestamps closer than settings.rapid_fire_ms.
    Round numbers: more than settings.round_number_ratio of amounts are
    multiples of 100.
    """
    if not activity:
        return False

    settings = settings or get_settings()

    timestamps = sorted(a["timestamp"] for a in activity if a.get("timestamp") is not None)
    for earlier, later in zip(timestamps, timestamps[1:]):
        if later - earlier < settings.rapid_fire_ms:
            return True

    round_count = sum(
        1 for a in activity if a.get("amount") is not None and a["amount"] % 100 == 0
    )
    return round_count / len(activity) > settings.round_number_ratio
