"""
Database Client
===============
Supabase client helpers for the raw and analytics schemas.

Environment-aware routing:
    ENVIRONMENT=dev  → all tables go to 'dev' schema
    ENVIRONMENT=prod → tables go to their defined schema (raw, analytics)
"""

from functools import lru_cache

from wallet_analytics.config import get_settings


@lru_cache
def get_supabase_client():
    """
    Get Supabase client.

    Returns:
        Supabase client instance
    """
    # Import here so the pure analysis layer never needs supabase installed
    from supabase import create_client

    settings = get_settings()
    return create_client(settings.supabase_url, settings.supabase_service_key)


def resolve_table(table_name: str) -> tuple[str, str]:
    """
    Resolve table name to (schema, table) based on environment.

    Examples:
        ENVIRONMENT=prod: 'raw.wallet_activity' → ('raw', 'wallet_activity')
        ENVIRONMENT=dev:  'raw.wallet_activity' → ('dev', 'raw_wallet_activity')
    """
    settings = get_settings()

    if "." in table_name:
        schema, table = table_name.split(".", 1)
    else:
        schema, table = "public", table_name

    if settings.environment == "dev":
        return "dev", f"{schema}_{table}"

    return schema, table


def _batches(records: list[dict], batch_size: int):
    for i in range(0, len(records), batch_size):
        yield records[i : i + batch_size]


def insert_batch(
    table_name: str,
    records: list[dict],
    batch_size: int | None = None,
) -> int:
    """
    Insert records in batches (append-only for raw tables).

    Args:
        table_name: Full table name (e.g., 'raw.wallet_activity')
        records: List of records to insert
        batch_size: Records per batch (defaults to settings.batch_size)

    Returns:
        Number of records inserted
    """
    if not records:
        return 0

    batch_size = batch_size or get_settings().batch_size
    client = get_supabase_client()
    schema, table = resolve_table(table_name)
    total = 0

    for batch in _batches(records, batch_size):
        client.schema(schema).table(table).insert(batch).execute()
        total += len(batch)

    return total


def upsert_batch(
    table_name: str,
    records: list[dict],
    on_conflict: str = "wallet",
    batch_size: int | None = None,
) -> int:
    """
    Upsert records in batches (for analytics tables keyed by wallet).

    Args:
        table_name: Full table name (e.g., 'analytics.wallet_metrics')
        records: List of records to upsert
        on_conflict: Column(s) to use for conflict resolution
        batch_size: Records per batch (defaults to settings.batch_size)

    Returns:
        Number of records upserted
    """
    if not records:
        return 0

    batch_size = batch_size or get_settings().batch_size
    client = get_supabase_client()
    schema, table = resolve_table(table_name)
    total = 0

    for batch in _batches(records, batch_size):
        client.schema(schema).table(table).upsert(batch, on_conflict=on_conflict).execute()
        total += len(batch)

    return total


def read_table(
    table_name: str,
    columns: str = "*",
    filters: dict | None = None,
    page_size: int = 1000,
) -> list[dict]:
    """
    Read all records from a table, paging through PostgREST's row cap.

    Args:
        table_name: Full table name (e.g., 'raw.wallet_activity')
        columns: Columns to select (default: all)
        filters: Optional equality filters as {column: value}
        page_size: Rows requested per round trip

    Returns:
        List of records
    """
    client = get_supabase_client()
    schema, table = resolve_table(table_name)
    rows: list[dict] = []
    offset = 0

    while True:
        query = client.schema(schema).table(table).select(columns)
        for col, val in (filters or {}).items():
            query = query.eq(col, val)

        result = query.range(offset, offset + page_size - 1).execute()
        page = list(result.data)  # type: ignore[arg-type]
        rows.extend(page)

        if len(page) < page_size:
            break
        offset += page_size

    return rows


def wrap_for_raw(records: list[dict], id_field: str) -> list[dict]:
    """
    Wrap records for raw table insert (JSONB data column pattern).

    Raw tables have: id, wallet, <id_field>, data JSONB, extracted_at

    Args:
        records: Normalized activity records
        id_field: Field to extract as indexed column (e.g., 'signature')

    Returns:
        List of {wallet, <id_field>, data} ready for insert
    """
    return [
        {
            "wallet": record.get("wallet"),
            id_field: record.get(id_field),
            "data": record,
        }
        for record in records
    ]
