"""
Wallet Activity Client
======================
Shared HTTP client for the wallet activity API used by raw modules.
"""

import time

import requests

from wallet_analytics.config import get_settings


def query_activity(path: str, params: dict | None = None, retry: int = 0) -> dict | list | None:
    """
    GET an activity API endpoint with retry logic.

    Args:
        path: Endpoint path relative to settings.activity_api_url
        params: Optional query parameters
        retry: Current retry count (internal use)

    Returns:
        Decoded JSON payload or None on failure
    """
    settings = get_settings()
    max_retries = settings.max_retries

    headers = {
        "Authorization": f"Bearer {settings.activity_api_key}",
        "Accept": "application/json",
    }
    url = f"{settings.activity_api_url.rstrip('/')}/{path.lstrip('/')}"

    try:
        response = requests.get(url, headers=headers, params=params, timeout=60)

        if response.status_code != 200:
            print(f"⚠️  HTTP {response.status_code}: {response.text[:200]}")
            if retry < max_retries:
                wait_time = 5 if response.status_code >= 500 else 1
                print(f"   Waiting {wait_time}s before retry ({retry + 1}/{max_retries})...")
                time.sleep(wait_time)
                return query_activity(path, params, retry + 1)
            return None

        # A 200 with a non-JSON body raises requests.JSONDecodeError here
        result = response.json()

    except requests.RequestException as e:
        print(f"⚠️  Request failed: {e}")
        if retry < max_retries:
            print(f"   Retrying ({retry + 1}/{max_retries})...")
            time.sleep(1)
            return query_activity(path, params, retry + 1)
        return None

    if isinstance(result, dict) and result.get("error"):
        print(f"⚠️  API Error: {result['error']}")
        return None

    return result


def paginated_activity(
    wallet: str,
    start_ts: int,
    end_ts: int,
    page_size: int | None = None,
    max_records: int | None = None,
) -> list[dict]:
    """
    Fetch a wallet's activity between two epoch-ms timestamps.

    Args:
        wallet: Wallet address
        start_ts: Window start (epoch ms, inclusive)
        end_ts: Window end (epoch ms, inclusive)
        page_size: Records per page (defaults to settings.page_size)
        max_records: Max total records to fetch (None = unlimited)

    Returns:
        List of raw API records
    """
    settings = get_settings()
    if page_size is None:
        page_size = settings.page_size

    all_records: list[dict] = []
    offset = 0

    print(f"\n📊 Querying activity for {wallet}...")

    while True:
        result = query_activity(
            f"wallets/{wallet}/activity",
            params={"start": start_ts, "end": end_ts, "limit": page_size, "offset": offset},
        )

        # Endpoints return either a bare list or {"data": [...]}
        records = result.get("data") if isinstance(result, dict) else result
        if not records:
            break

        all_records.extend(records)
        offset += page_size
        print(f"   Fetched {len(all_records):,} records so far...")

        if max_records and len(all_records) >= max_records:
            all_records = all_records[:max_records]
            break

        if len(records) < page_size:
            break

    print(f"   ✅ Fetched {len(all_records):,} total records")
    return all_records
