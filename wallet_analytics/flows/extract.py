#!/usr/bin/env python3
"""
Extract Flow
============
Extracts tracked wallets' activity to the raw schema.

Tables populated:
- raw.wallet_activity

Usage:
    python -m wallet_analytics.flows.extract
    python -m wallet_analytics.flows.extract --start-date 2025-01-01 --end-date 2025-01-31
"""

import argparse
import uuid
from datetime import datetime, timedelta

from prefect import flow, get_run_logger

from wallet_analytics.config import get_settings
from wallet_analytics.raw import wallet_activity


@flow(name="extract-wallet-activity", log_prints=True)
def extract_flow(
    start_date: str | None = None,
    end_date: str | None = None,
) -> dict:
    """
    Extract wallet activity to raw schema.

    Args:
        start_date: Start date (YYYY-MM-DD), defaults to yesterday
        end_date: End date (YYYY-MM-DD), defaults to today

    Returns:
        Summary of records extracted
    """
    logger = get_run_logger()

    batch_id = str(uuid.uuid4())
    logger.info(f"🚀 Starting extract flow (batch_id: {batch_id[:8]}...)")

    if not start_date:
        start_date = (datetime.now() - timedelta(days=1)).strftime("%Y-%m-%d")
    if not end_date:
        end_date = datetime.now().strftime("%Y-%m-%d")

    logger.info(f"📅 Date range: {start_date} to {end_date}")

    wallets = get_settings().tracked_wallets
    if not wallets:
        logger.warning("⚠️  No tracked wallets configured (TRACKED_WALLETS)")

    # ==================== EXTRACT ACTIVITY ====================
    logger.info(f"\n📊 Activity for {len(wallets):,} wallets")
    logger.info("-" * 40)

    result = wallet_activity.sync(start_date, end_date, batch_id)

    # ==================== SUMMARY ====================
    summary = {
        "batch_id": batch_id,
        "date_range": {"start": start_date, "end": end_date},
        "counts": {
            "wallet_activity": result["count"],
        },
    }

    logger.info("\n" + "=" * 60)
    logger.info("EXTRACT COMPLETE")
    logger.info("=" * 60)
    logger.info(f"📊 Total records extracted: {result['count']:,}")

    return summary


def main():
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Extract wallet activity to raw schema")
    parser.add_argument("--start-date", help="Start date (YYYY-MM-DD)")
    parser.add_argument("--end-date", help="End date (YYYY-MM-DD)")

    args = parser.parse_args()

    result = extract_flow(
        start_date=args.start_date,
        end_date=args.end_date,
    )

    print("\nExtract complete!")
    print(f"Batch ID: {result['batch_id']}")
    print(f"Total records: {sum(result['counts'].values()):,}")


if __name__ == "__main__":
    main()
