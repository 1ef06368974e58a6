"""
Shared source reader for analytics modules.
"""

from collections import defaultdict

from wallet_analytics.db import read_table

SOURCE_TABLE = "raw.wallet_activity"


def group_by_wallet(rows: list[dict]) -> dict[str, list[dict]]:
    """
    Group raw rows into wallet → activity records, ordered by timestamp.

    Rows may be raw-table rows ({"wallet": ..., "data": {...}}) or flat
    activity records. Records without a timestamp keep their relative order
    at the front. Duplicate signatures (re-extracted overlapping windows)
    are kept once.
    """
    grouped: dict[str, list[dict]] = defaultdict(list)
    seen: set[tuple[str, str]] = set()

    for row in rows:
        record = row.get("data") or row
        wallet = row.get("wallet") or record.get("wallet")
        if not wallet:
            continue

        signature = record.get("signature")
        if signature:
            if (wallet, signature) in seen:
                continue
            seen.add((wallet, signature))

        grouped[wallet].append(record)

    for records in grouped.values():
        records.sort(key=lambda r: r.get("timestamp") or 0)

    return dict(grouped)


def read_activity() -> dict[str, list[dict]]:
    """Read raw.wallet_activity grouped by wallet."""
    return group_by_wallet(read_table(SOURCE_TABLE, columns="wallet, data"))
