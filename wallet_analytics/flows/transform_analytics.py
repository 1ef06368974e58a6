#!/usr/bin/env python3
"""
Transform Analytics Flow
========================
Derives per-wallet analytics from raw activity.

Tables populated:
- analytics.wallet_metrics
- analytics.wallet_risk
- analytics.wallet_strategy
- analytics.wallet_cluster

Usage:
    python -m wallet_analytics.flows.transform_analytics
"""

from prefect import flow, get_run_logger
from prefect.events import emit_event

from wallet_analytics.analytics import wallet_cluster, wallet_metrics, wallet_risk, wallet_strategy


@flow(name="transform-analytics", log_prints=True)
def transform_analytics_flow() -> dict:
    """
    Transform raw activity to the analytics tables.

    The four tables read the same source and are independent of each other.

    Returns:
        Summary of records transformed
    """
    logger = get_run_logger()
    logger.info("🚀 Starting transform-analytics flow")

    counts = {}
    for icon, module in (
        ("📈", wallet_metrics),
        ("🚨", wallet_risk),
        ("⏱️", wallet_strategy),
        ("🧩", wallet_cluster),
    ):
        name = module.TABLE_NAME.split(".", 1)[1]
        logger.info(f"\n{icon} Building {name}")
        logger.info("-" * 40)
        counts[name] = module.build()

    # ==================== SUMMARY ====================
    logger.info("\n" + "=" * 60)
    logger.info("TRANSFORM COMPLETE")
    logger.info("=" * 60)

    summary = {"counts": counts}

    logger.info(f"📊 Total records transformed: {sum(counts.values()):,}")
    for table, count in counts.items():
        logger.info(f"   {table}: {count:,}")

    emit_event(
        event="wallet-analytics.transform.complete",
        resource={"prefect.resource.id": "wallet-analytics.transform-analytics"},
        payload=summary,
    )

    return summary


def main():
    """CLI entry point."""
    result = transform_analytics_flow()

    print("\nTransform complete!")
    print(f"Total records: {sum(result['counts'].values()):,}")


if __name__ == "__main__":
    main()
