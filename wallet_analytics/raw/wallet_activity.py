"""
Raw: Wallet Activity
====================
Extracts buy/sell/transfer activity for tracked wallets.
"""

from datetime import datetime, timedelta, timezone

from prefect import get_run_logger, task

from wallet_analytics.config import get_settings
from wallet_analytics.db import insert_batch, wrap_for_raw
from wallet_analytics.raw.activity_client import paginated_activity

TABLE_NAME = "raw.wallet_activity"

NUMERIC_FIELDS = ("amount", "profit", "volume")


def date_window_ms(start_date: str, end_date: str) -> tuple[int, int]:
    """
    Convert a YYYY-MM-DD date range to epoch milliseconds (UTC).

    The end date is inclusive: the window runs to the last millisecond of it.
    """
    start = datetime.strptime(start_date, "%Y-%m-%d").replace(tzinfo=timezone.utc)
    end = datetime.strptime(end_date, "%Y-%m-%d").replace(tzinfo=timezone.utc) + timedelta(days=1)
    return int(start.timestamp() * 1000), int(end.timestamp() * 1000) - 1


def normalize_record(wallet: str, record: dict) -> dict:
    """
    Coerce an API record to the canonical activity shape.

    Timestamps given in seconds are scaled to milliseconds. Numeric fields
    arriving as strings are parsed; missing ones stay None.
    """
    timestamp = record.get("timestamp")
    if timestamp is not None:
        value = float(timestamp)
        if value < 10**12:
            value *= 1000
        timestamp = int(value)

    normalized = {
        "wallet": wallet,
        "signature": record.get("signature"),
        "type": (record.get("type") or "").lower() or None,
        "token": record.get("token") or record.get("mint"),
        "timestamp": timestamp,
    }
    for key in NUMERIC_FIELDS:
        value = record.get(key)
        normalized[key] = float(value) if value is not None else None

    return normalized


def extract(start_date: str, end_date: str, wallets: list[str] | None = None) -> list[dict]:
    """
    Extract activity for tracked wallets over a date range.

    Args:
        start_date: Start date (YYYY-MM-DD)
        end_date: End date (YYYY-MM-DD)
        wallets: Wallets to pull (defaults to settings.tracked_wallets)

    Returns:
        Normalized activity records
    """
    if wallets is None:
        wallets = get_settings().tracked_wallets

    start_ts, end_ts = date_window_ms(start_date, end_date)

    records = []
    for wallet in wallets:
        for record in paginated_activity(wallet, start_ts, end_ts):
            records.append(normalize_record(wallet, record))

    return records


def load(records: list[dict], batch_id: str) -> int:
    """Append records to raw.wallet_activity tagged with the batch id."""
    wrapped = wrap_for_raw(records, id_field="signature")
    for row in wrapped:
        row["batch_id"] = batch_id
    return insert_batch(TABLE_NAME, wrapped)


@task(name="sync-wallet-activity", retries=2, retry_delay_seconds=30)
def sync(start_date: str, end_date: str, batch_id: str) -> dict:
    """
    Extract and load wallet activity.

    Returns dict with normalized records (for downstream use) and count.
    """
    logger = get_run_logger()
    logger.info(f"📊 Syncing {TABLE_NAME} for {start_date} to {end_date}")

    records = extract(start_date, end_date)
    logger.info(f"   Extracted {len(records):,} activity records")

    count = load(records, batch_id)

    logger.info(f"✅ Synced {count:,} activity records")
    return {"records": records, "count": count}
