"""
Tests for the public market data client.
"""
import uuid
from datetime import datetime, timezone
from typing import Callable
from unittest.mock import Mock, MagicMock

import pytest

from gdax.errors import ApiError, DecodeError
from gdax.models import BookEntry, FullBookEntry, Level, Side
from gdax.public import PublicClient


BASE_URL = "https://api.example.com"
ORDER_ID = "3b0f1225-7f84-490b-a29f-0faef9de823a"


@pytest.fixture
def client() -> PublicClient:
    return PublicClient(api_base_url=BASE_URL)


class TestPublicClient:
    """Test PublicClient endpoints."""

    def test_get_products(
        self, client: PublicClient, mock_requests_get: Mock, make_response: Callable[..., MagicMock]
    ) -> None:
        mock_requests_get.return_value = make_response(200, [{
            "id": "BTC-USD",
            "base_currency": "BTC",
            "quote_currency": "USD",
            "base_min_size": "0.01",
            "base_max_size": "10000.00",
            "quote_increment": "0.01",
        }])

        products = client.get_products()

        assert mock_requests_get.call_args[0][0] == f"{BASE_URL}/products"
        assert [p.id for p in products] == ["BTC-USD"]

    def test_get_best_order(
        self, client: PublicClient, mock_requests_get: Mock, make_response: Callable[..., MagicMock]
    ) -> None:
        mock_requests_get.return_value = make_response(200, {
            "sequence": 3,
            "bids": [["295.96", "4.39088265", 2]],
            "asks": [["295.97", "25.23542881", 12]],
        })

        book = client.get_best_order("BTC-USD")

        assert mock_requests_get.call_args[0][0] == f"{BASE_URL}/products/BTC-USD/book?level=1"
        assert book.sequence == 3
        assert book.bids[0] == BookEntry(price=295.96, size=4.39088265, num_orders=2)

    def test_get_top50_orders(
        self, client: PublicClient, mock_requests_get: Mock, make_response: Callable[..., MagicMock]
    ) -> None:
        mock_requests_get.return_value = make_response(200, {"sequence": 4, "bids": [], "asks": []})

        client.get_top50_orders("BTC-USD")

        assert mock_requests_get.call_args[0][0] == f"{BASE_URL}/products/BTC-USD/book?level=2"

    def test_get_full_book(
        self, client: PublicClient, mock_requests_get: Mock, make_response: Callable[..., MagicMock]
    ) -> None:
        mock_requests_get.return_value = make_response(200, {
            "sequence": 5,
            "bids": [["295.96", "0.05088265", ORDER_ID]],
            "asks": [],
        })

        book = client.get_full_book("BTC-USD")

        assert mock_requests_get.call_args[0][0] == f"{BASE_URL}/products/BTC-USD/book?level=3"
        assert book.bids == [FullBookEntry(price=295.96, size=0.05088265, order_id=uuid.UUID(ORDER_ID))]

    def test_order_book_level_by_int(
        self, client: PublicClient, mock_requests_get: Mock, make_response: Callable[..., MagicMock]
    ) -> None:
        mock_requests_get.return_value = make_response(200, {"sequence": 1, "bids": [], "asks": []})

        client.get_product_order_book("ETH-USD", 2)

        assert mock_requests_get.call_args[0][0] == f"{BASE_URL}/products/ETH-USD/book?level=2"

    def test_invalid_level(self, client: PublicClient, mock_requests_get: Mock) -> None:
        with pytest.raises(ValueError):
            client.get_product_order_book("BTC-USD", 4)

        mock_requests_get.assert_not_called()

    def test_get_product_ticker(
        self, client: PublicClient, mock_requests_get: Mock, make_response: Callable[..., MagicMock]
    ) -> None:
        mock_requests_get.return_value = make_response(200, {
            "trade_id": 4729088,
            "price": "333.99",
            "size": "0.193",
            "bid": "333.98",
            "ask": "333.99",
            "volume": "5957.11914015",
            "time": "2015-11-14T20:46:03.511254Z",
        })

        tick = client.get_product_ticker("BTC-USD")

        assert mock_requests_get.call_args[0][0] == f"{BASE_URL}/products/BTC-USD/ticker"
        assert tick.price == 333.99

    def test_get_trades(
        self, client: PublicClient, mock_requests_get: Mock, make_response: Callable[..., MagicMock]
    ) -> None:
        mock_requests_get.return_value = make_response(200, [{
            "time": "2014-11-07T22:19:28.578544Z",
            "trade_id": 74,
            "price": "10.00000000",
            "size": "0.01000000",
            "side": "SELL",
        }])

        trades = client.get_trades("BTC-USD")

        assert mock_requests_get.call_args[0][0] == f"{BASE_URL}/products/BTC-USD/trades"
        assert trades[0].side is Side.SELL

    def test_get_historic_rates(
        self, client: PublicClient, mock_requests_get: Mock, make_response: Callable[..., MagicMock]
    ) -> None:
        mock_requests_get.return_value = make_response(200, [
            [1465560000, 570.1, 575.0, 571.0, 574.5, 120.5],
        ])

        candles = client.get_historic_rates(
            "BTC-USD",
            datetime(2016, 6, 10, 12, 0, 0, tzinfo=timezone.utc),
            datetime(2016, 6, 11, 0, 0, 0, tzinfo=timezone.utc),
            30 * 60,
        )

        assert mock_requests_get.call_args[0][0] == (
            f"{BASE_URL}/products/BTC-USD/candles"
            "?start=2016-06-10T12%3A00%3A00%2B00%3A00"
            "&end=2016-06-11T00%3A00%3A00%2B00%3A00"
            "&granularity=1800"
        )
        assert candles[0].time == 1465560000
        assert candles[0].close == 574.5

    def test_historic_rates_naive_datetimes_are_utc(
        self, client: PublicClient, mock_requests_get: Mock, make_response: Callable[..., MagicMock]
    ) -> None:
        mock_requests_get.return_value = make_response(200, [])

        client.get_historic_rates("BTC-USD", datetime(2016, 6, 10), datetime(2016, 6, 11), 3600)

        assert "start=2016-06-10T00%3A00%3A00%2B00%3A00" in mock_requests_get.call_args[0][0]

    def test_historic_rates_rejects_reversed_range(self, client: PublicClient, mock_requests_get: Mock) -> None:
        """Test start after end is rejected before any request is sent."""
        with pytest.raises(ValueError, match="must not be after end"):
            client.get_historic_rates("BTC-USD", datetime(2016, 6, 11), datetime(2016, 6, 10, 12), 1800)

        mock_requests_get.assert_not_called()

    def test_historic_rates_rejects_bad_granularity(self, client: PublicClient, mock_requests_get: Mock) -> None:
        with pytest.raises(ValueError, match="granularity"):
            client.get_historic_rates("BTC-USD", datetime(2016, 6, 10), datetime(2016, 6, 11), 0)

        mock_requests_get.assert_not_called()

    def test_get_24hr_stats(
        self, client: PublicClient, mock_requests_get: Mock, make_response: Callable[..., MagicMock]
    ) -> None:
        mock_requests_get.return_value = make_response(200, {
            "open": "34.19000000", "high": "95.70000000", "low": "7.06000000", "volume": "2.41000000"
        })

        stats = client.get_24hr_stats("BTC-USD")

        assert mock_requests_get.call_args[0][0] == f"{BASE_URL}/products/BTC-USD/stats"
        assert stats.high == 95.7

    def test_get_currencies(
        self, client: PublicClient, mock_requests_get: Mock, make_response: Callable[..., MagicMock]
    ) -> None:
        mock_requests_get.return_value = make_response(200, [
            {"id": "BTC", "name": "Bitcoin", "min_size": "0.00000001"},
            {"id": "USD", "name": "United States Dollar", "min_size": 0.01},
        ])

        currencies = client.get_currencies()

        assert mock_requests_get.call_args[0][0] == f"{BASE_URL}/currencies"
        assert [c.min_size for c in currencies] == [0.00000001, 0.01]

    def test_get_time(
        self, client: PublicClient, mock_requests_get: Mock, make_response: Callable[..., MagicMock]
    ) -> None:
        mock_requests_get.return_value = make_response(200, {"iso": "2015-01-07T23:47:25.201Z", "epoch": 1420674445.201})

        server_time = client.get_time()

        assert mock_requests_get.call_args[0][0] == f"{BASE_URL}/time"
        assert server_time.iso.year == 2015

    def test_no_auth_headers(
        self, client: PublicClient, mock_requests_get: Mock, make_response: Callable[..., MagicMock]
    ) -> None:
        mock_requests_get.return_value = make_response(200, {"iso": "2015-01-07T23:47:25.201Z", "epoch": 1.0})

        client.get_time()

        headers = mock_requests_get.call_args[1]["headers"]
        assert "CB-ACCESS-KEY" not in headers

    def test_api_error(
        self, client: PublicClient, mock_requests_get: Mock, make_response: Callable[..., MagicMock]
    ) -> None:
        mock_requests_get.return_value = make_response(404, {"message": "NotFound"})

        with pytest.raises(ApiError, match="NotFound"):
            client.get_product_ticker("NOPE-USD")

    def test_schema_mismatch(
        self, client: PublicClient, mock_requests_get: Mock, make_response: Callable[..., MagicMock]
    ) -> None:
        mock_requests_get.return_value = make_response(200, {"unexpected": True})

        with pytest.raises(DecodeError):
            client.get_products()

    def test_level_enum_values(self) -> None:
        assert [level.value for level in Level] == [1, 2, 3]
