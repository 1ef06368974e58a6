"""
Data Quality Checks
===================
Individual check functions organized by category.

Each takes the analytics tables as lists of row dicts. Empty tables are
skipped rather than failed.
"""

from collections import Counter

from wallet_analytics.analysis.clustering import CLUSTER_LABELS
from wallet_analytics.analysis.risk import POINTS_PER_FACTOR, categorize_score
from wallet_analytics.analysis.strategy import STRATEGY_LABELS
from wallet_analytics.validation.core import DQReport, add_check, add_stat

FACTOR_COLUMNS = ("volume_spike", "unusual_activity", "high_frequency", "large_positions")


def check_required_fields(report: DQReport, tables: dict[str, list[dict]]) -> None:
    """Every analytics row must carry its wallet."""
    for name, rows in tables.items():
        if rows:
            add_check(
                report,
                "REQUIRED_FIELD",
                f"{name}.wallet NOT NULL",
                sum(1 for r in rows if r.get("wallet")),
                len(rows),
            )


def check_uniqueness(report: DQReport, tables: dict[str, list[dict]]) -> None:
    """One row per wallet in every analytics table."""
    for name, rows in tables.items():
        if rows:
            add_check(
                report,
                "UNIQUENESS",
                f"{name}.wallet is unique",
                len(set(r.get("wallet") for r in rows)),
                len(rows),
            )


def check_coverage(report: DQReport, tables: dict[str, list[dict]]) -> None:
    """Every wallet with metrics should also be scored, labeled and clustered."""
    metrics = tables.get("wallet_metrics") or []
    if not metrics:
        return

    metric_wallets = set(r.get("wallet") for r in metrics)
    for name, rows in tables.items():
        if name == "wallet_metrics":
            continue
        covered = metric_wallets & set(r.get("wallet") for r in rows)
        add_check(
            report,
            "COVERAGE",
            f"wallet_metrics wallets present in {name}",
            len(covered),
            len(metric_wallets),
            message=f"{len(metric_wallets) - len(covered)} missing",
        )


def check_metric_ranges(report: DQReport, wallet_metrics: list[dict]) -> None:
    """Bounds that hold for any valid metrics row."""
    if not wallet_metrics:
        return

    add_check(
        report,
        "BUSINESS_LOGIC",
        "wallet_metrics.win_rate within [0, 1]",
        sum(1 for m in wallet_metrics if 0 <= (m.get("win_rate") or 0) <= 1),
        len(wallet_metrics),
    )
    add_check(
        report,
        "BUSINESS_LOGIC",
        "wallet_metrics.max_drawdown >= 0",
        sum(1 for m in wallet_metrics if (m.get("max_drawdown") or 0) >= 0),
        len(wallet_metrics),
    )
    add_check(
        report,
        "BUSINESS_LOGIC",
        "wallet_metrics.profit_factor >= 0",
        sum(1 for m in wallet_metrics if (m.get("profit_factor") or 0) >= 0),
        len(wallet_metrics),
    )


def check_risk_consistency(report: DQReport, wallet_risk: list[dict]) -> None:
    """Score must equal 25 per true factor and match its category."""
    if not wallet_risk:
        return

    score_ok = sum(
        1
        for r in wallet_risk
        if r.get("score") == POINTS_PER_FACTOR * sum(bool(r.get(c)) for c in FACTOR_COLUMNS)
    )
    add_check(
        report,
        "CONSISTENCY",
        "wallet_risk.score = 25 x factor count",
        score_ok,
        len(wallet_risk),
    )

    category_ok = sum(
        1 for r in wallet_risk if r.get("category") == categorize_score(r.get("score") or 0)
    )
    add_check(
        report,
        "CONSISTENCY",
        "wallet_risk.category matches score",
        category_ok,
        len(wallet_risk),
    )


def check_labels(
    report: DQReport,
    wallet_strategy: list[dict],
    wallet_cluster: list[dict],
) -> None:
    """Strategy and cluster labels must come from their known sets."""
    if wallet_strategy:
        add_check(
            report,
            "BUSINESS_LOGIC",
            "wallet_strategy.strategy is a known label",
            sum(1 for s in wallet_strategy if s.get("strategy") in STRATEGY_LABELS),
            len(wallet_strategy),
        )

    if wallet_cluster:
        add_check(
            report,
            "BUSINESS_LOGIC",
            "wallet_cluster.cluster is a known label",
            sum(1 for c in wallet_cluster if c.get("cluster") in CLUSTER_LABELS),
            len(wallet_cluster),
        )


def _distribution(report: DQReport, category: str, rows: list[dict], column: str) -> None:
    for value, count in Counter(r.get(column, "UNKNOWN") for r in rows).most_common():
        add_stat(
            report,
            category,
            f"{column} = {value}",
            f"{count:,} ({count / len(rows) * 100:.1f}%)",
        )


def collect_statistics(report: DQReport, tables: dict[str, list[dict]]) -> None:
    """Collect informational distributions."""
    if tables.get("wallet_risk"):
        _distribution(report, "RISK", tables["wallet_risk"], "category")

    if tables.get("wallet_strategy"):
        _distribution(report, "STRATEGY", tables["wallet_strategy"], "strategy")

    if tables.get("wallet_cluster"):
        _distribution(report, "CLUSTER", tables["wallet_cluster"], "cluster")

    metrics = tables.get("wallet_metrics")
    if metrics:
        profitable = sum(1 for m in metrics if (m.get("profit_factor") or 0) > 1)
        add_stat(
            report,
            "PERFORMANCE",
            "Wallets with profit_factor > 1",
            f"{profitable:,}/{len(metrics):,} ({profitable / len(metrics) * 100:.1f}%)",
        )
