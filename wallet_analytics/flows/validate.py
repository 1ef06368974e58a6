#!/usr/bin/env python3
"""
Validate Flow
=============
Runs data quality checks on the wallet analytics tables.

Emits Prefect events on DQ failures for alerting.

Usage:
    python -m wallet_analytics.flows.validate
"""

from prefect import flow, get_run_logger
from prefect.events import emit_event

from wallet_analytics.analytics import wallet_cluster, wallet_metrics, wallet_risk, wallet_strategy
from wallet_analytics.db import read_table
from wallet_analytics.validation.data_quality import validate_data_quality

RESOURCE = {"prefect.resource.id": "wallet-analytics.validate-analytics"}


@flow(name="validate-analytics", log_prints=True)
def validate_flow() -> dict:
    """
    Run data quality checks on analytics tables.

    Returns:
        DQ report summary
    """
    logger = get_run_logger()
    logger.info("🔍 Starting validate-analytics flow")

    # ==================== READ ANALYTICS TABLES ====================
    logger.info("\n📊 Reading analytics tables")
    logger.info("-" * 40)

    tables = {}
    for module in (wallet_metrics, wallet_risk, wallet_strategy, wallet_cluster):
        name = module.TABLE_NAME.split(".", 1)[1]
        tables[name] = read_table(module.TABLE_NAME)
        logger.info(f"   {name}: {len(tables[name]):,} rows")

    # ==================== RUN DQ CHECKS ====================
    logger.info("\n✅ Running data quality checks")
    logger.info("-" * 40)

    dq_report = validate_data_quality(**tables)
    summary = dq_report.summary()

    # ==================== HANDLE RESULTS ====================
    if dq_report.failed > 0:
        logger.error(f"❌ DQ FAILED: {dq_report.failed} checks failed")

        emit_event(
            event="wallet-analytics.dq.failure",
            resource=RESOURCE,
            payload={
                "failed_count": dq_report.failed,
                "total_checks": dq_report.total,
                "failed_checks": [
                    {"check": c["check"], "percentage": c["percentage"]}
                    for c in dq_report.failed_checks()
                ],
            },
        )
    else:
        logger.info(f"✅ DQ PASSED: {dq_report.passed}/{dq_report.total} checks passed")

        emit_event(
            event="wallet-analytics.dq.success",
            resource=RESOURCE,
            payload=summary,
        )

    return summary


def main():
    """CLI entry point."""
    result = validate_flow()

    print("\nValidation complete!")
    print(f"Passed: {result['passed']}/{result['total_checks']}")
    print(f"Failed: {result['failed']}")


if __name__ == "__main__":
    main()
