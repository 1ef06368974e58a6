"""
Data Quality Validation
=======================
Runs every check category over the wallet analytics tables.
"""

from prefect import get_run_logger, task

from wallet_analytics.validation.checks import (
    check_coverage,
    check_labels,
    check_metric_ranges,
    check_required_fields,
    check_risk_consistency,
    check_uniqueness,
    collect_statistics,
)
from wallet_analytics.validation.core import DQReport


def run_checks(
    wallet_metrics: list[dict],
    wallet_risk: list[dict],
    wallet_strategy: list[dict],
    wallet_cluster: list[dict],
) -> DQReport:
    """Build a DQReport from the four analytics tables."""
    tables = {
        "wallet_metrics": wallet_metrics,
        "wallet_risk": wallet_risk,
        "wallet_strategy": wallet_strategy,
        "wallet_cluster": wallet_cluster,
    }
    report = DQReport()

    check_required_fields(report, tables)
    check_uniqueness(report, tables)
    check_coverage(report, tables)
    check_metric_ranges(report, wallet_metrics)
    check_risk_consistency(report, wallet_risk)
    check_labels(report, wallet_strategy, wallet_cluster)
    collect_statistics(report, tables)

    return report


@task(name="validate-data-quality")
def validate_data_quality(
    wallet_metrics: list[dict],
    wallet_risk: list[dict],
    wallet_strategy: list[dict],
    wallet_cluster: list[dict],
) -> DQReport:
    """
    Run data quality validation and log each check.

    Returns:
        DQReport with all checks and statistics
    """
    logger = get_run_logger()
    logger.info("🔍 Running data quality validation...")

    report = run_checks(wallet_metrics, wallet_risk, wallet_strategy, wallet_cluster)

    icons = {"PASS": "✅", "WARN": "⚠️", "FAIL": "❌"}
    for check in report.checks:
        logger.info(
            f"   {icons[check['status']]} [{check['category']}] {check['check']}: "
            f"{check['passed']:,}/{check['total']:,} ({check['percentage']})"
        )

    for stat in report.statistics:
        logger.info(f"   📈 [{stat['category']}] {stat['metric']}: {stat['value']}")

    logger.info(
        f"   Summary: {report.passed} passed, {report.warnings} warnings, {report.failed} failed"
    )
    return report
