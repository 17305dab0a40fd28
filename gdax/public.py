"""
Unauthenticated GDAX market data client.
"""
from datetime import datetime, timezone
from typing import List, Optional
from urllib.parse import quote, urlencode
import logging

from .models import (
    BookEntry,
    Candle,
    Candles,
    Currencies,
    Currency,
    FullBookEntry,
    Level,
    OrderBook,
    Product,
    Products,
    ServerTime,
    Stats,
    Tick,
    Trade,
    Trades,
)
from .request import DEFAULT_TIMEOUT, Requester


def _as_utc(value: datetime) -> datetime:
    # naive datetimes are taken as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def product_path(product_id: str, *parts: str) -> str:
    """Build ``/products/{product_id}/...`` with the product id path-escaped."""
    return "/".join(["/products", quote(product_id, safe="")] + list(parts))


class PublicClient:
    """Client for the public (market data) GDAX endpoints."""

    def __init__(self, api_base_url: Optional[str] = None, timeout: float = DEFAULT_TIMEOUT):
        """
        Args:
            api_base_url: Override default API base URL (for testing or sandbox)
            timeout: Per-request timeout in seconds
        """
        self.requester = Requester(api_base_url, timeout=timeout)

    def get_products(self) -> List[Product]:
        return self.requester.get("/products", Products.validate_python)

    def get_product_order_book(self, product_id: str, level: Level = Level.BEST) -> OrderBook:
        """
        Get the order book at the given detail level.

        Levels 1 and 2 return aggregated ``BookEntry`` rows, level 3 returns
        one ``FullBookEntry`` per resting order.
        """
        level = Level(level)
        book = OrderBook[FullBookEntry] if level is Level.FULL else OrderBook[BookEntry]
        path = f"{product_path(product_id, 'book')}?level={level.value}"
        return self.requester.get(path, book.model_validate)

    def get_best_order(self, product_id: str) -> OrderBook[BookEntry]:
        """Best bid and ask only."""
        return self.get_product_order_book(product_id, Level.BEST)

    def get_top50_orders(self, product_id: str) -> OrderBook[BookEntry]:
        """Top 50 bids and asks, aggregated by price."""
        return self.get_product_order_book(product_id, Level.TOP50)

    def get_full_book(self, product_id: str) -> OrderBook[FullBookEntry]:
        """Every resting order, not aggregated."""
        return self.get_product_order_book(product_id, Level.FULL)

    def get_product_ticker(self, product_id: str) -> Tick:
        return self.requester.get(product_path(product_id, "ticker"), Tick.model_validate)

    def get_trades(self, product_id: str) -> List[Trade]:
        return self.requester.get(product_path(product_id, "trades"), Trades.validate_python)

    def get_historic_rates(
        self,
        product_id: str,
        start: datetime,
        end: datetime,
        granularity: int
    ) -> List[Candle]:
        """
        Get candles for ``product_id`` between ``start`` and ``end``.

        Args:
            product_id: Product, e.g. "BTC-USD"
            start: Start of the range (naive values are UTC)
            end: End of the range, not before ``start``
            granularity: Bucket width in seconds

        Raises:
            ValueError: If ``start`` is after ``end`` or granularity is not positive
        """
        start = _as_utc(start)
        end = _as_utc(end)
        start_text = start.isoformat()
        end_text = end.isoformat()
        if start > end:
            raise ValueError(f"start ({start_text}) must not be after end ({end_text})")
        if granularity <= 0:
            raise ValueError(f"granularity must be a positive number of seconds, got {granularity}")

        query = urlencode({"start": start_text, "end": end_text, "granularity": int(granularity)})
        logging.debug(f"Historic rates for {product_id}: {start_text} .. {end_text} every {granularity}s")
        return self.requester.get(
            f"{product_path(product_id, 'candles')}?{query}",
            Candles.validate_python
        )

    def get_24hr_stats(self, product_id: str) -> Stats:
        return self.requester.get(product_path(product_id, "stats"), Stats.model_validate)

    def get_currencies(self) -> List[Currency]:
        return self.requester.get("/currencies", Currencies.validate_python)

    def get_time(self) -> ServerTime:
        return self.requester.get("/time", ServerTime.model_validate)
