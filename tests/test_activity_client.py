"""
Tests for the wallet activity HTTP client.
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from wallet_analytics.raw.activity_client import paginated_activity, query_activity


def response(status=200, payload=None):
    resp = MagicMock()
    resp.status_code = status
    resp.json.return_value = payload
    resp.text = str(payload)
    return resp


@pytest.fixture(autouse=True)
def no_sleep():
    with patch("wallet_analytics.raw.activity_client.time.sleep") as sleep:
        yield sleep


class TestQueryActivity:
    def test_success(self):
        with patch("wallet_analytics.raw.activity_client.requests.get") as get:
            get.return_value = response(payload=[{"signature": "s1"}])

            result = query_activity("wallets/A/activity", {"limit": 1})

        assert result == [{"signature": "s1"}]
        url = get.call_args.args[0]
        assert url == "https://activity.test/v1/wallets/A/activity"
        assert get.call_args.kwargs["headers"]["Authorization"] == "Bearer test-key"

    def test_retries_server_error(self, no_sleep):
        with patch("wallet_analytics.raw.activity_client.requests.get") as get:
            get.side_effect = [response(503), response(payload={"data": []})]

            result = query_activity("wallets/A/activity")

        assert result == {"data": []}
        assert get.call_count == 2
        no_sleep.assert_called_once_with(5)

    def test_gives_up_after_max_retries(self, settings):
        with patch("wallet_analytics.raw.activity_client.requests.get") as get:
            get.return_value = response(429)

            assert query_activity("wallets/A/activity") is None

        assert get.call_count == settings.max_retries + 1

    def test_retries_connection_errors(self):
        with patch("wallet_analytics.raw.activity_client.requests.get") as get:
            get.side_effect = [requests.ConnectionError("reset"), response(payload=[])]

            assert query_activity("wallets/A/activity") == []

    def test_api_error_payload(self):
        with patch("wallet_analytics.raw.activity_client.requests.get") as get:
            get.return_value = response(payload={"error": "unknown wallet"})

            assert query_activity("wallets/A/activity") is None

    def test_non_json_body_retried_then_gives_up(self, settings):
        html = response(payload=None)
        html.json.side_effect = requests.JSONDecodeError("Expecting value", "<html>", 0)

        with patch("wallet_analytics.raw.activity_client.requests.get", return_value=html) as get:
            assert query_activity("wallets/A/activity") is None

        assert get.call_count == settings.max_retries + 1

    def test_non_json_body_recovers_on_retry(self):
        html = response(payload=None)
        html.json.side_effect = requests.JSONDecodeError("Expecting value", "<html>", 0)

        with patch("wallet_analytics.raw.activity_client.requests.get") as get:
            get.side_effect = [html, response(payload=[{"signature": "s1"}])]

            assert query_activity("wallets/A/activity") == [{"signature": "s1"}]


class TestPaginatedActivity:
    def test_pages_until_short_page(self):
        pages = [[{"signature": "a"}, {"signature": "b"}], {"data": [{"signature": "c"}]}]

        with patch("wallet_analytics.raw.activity_client.query_activity", side_effect=pages) as query:
            records = paginated_activity("A", 0, 10, page_size=2)

        assert [r["signature"] for r in records] == ["a", "b", "c"]
        assert query.call_count == 2
        assert query.call_args.kwargs["params"]["offset"] == 2

    def test_stops_on_empty_or_failed_page(self):
        pages = [[{"signature": "a"}, {"signature": "b"}], None]

        with patch("wallet_analytics.raw.activity_client.query_activity", side_effect=pages):
            records = paginated_activity("A", 0, 10, page_size=2)

        assert len(records) == 2

    def test_max_records(self):
        page = [{"signature": str(i)} for i in range(5)]

        with patch("wallet_analytics.raw.activity_client.query_activity", return_value=page):
            records = paginated_activity("A", 0, 10, page_size=5, max_records=3)

        assert len(records) == 3
