"""
Authenticated GDAX client for accounts and orders.
"""
from datetime import datetime
from typing import Any, List, Optional, Union
from urllib.parse import quote, urlencode
import logging
import uuid

from .auth import GdaxAuthenticator, GdaxCredentials
from .models import (
    Account,
    Accounts,
    BookEntry,
    Candle,
    Currency,
    FullBookEntry,
    Hold,
    Holds,
    Ledger,
    LedgerEntry,
    Level,
    OpenOrder,
    OpenOrders,
    Order,
    OrderBook,
    OrderCreated,
    OrderIds,
    Product,
    ServerTime,
    Stats,
    Tick,
    Trade,
)
from .orders import NewOrder, encode_order
from .public import PublicClient
from .request import DEFAULT_TIMEOUT, Requester

Id = Union[uuid.UUID, str]

ORDER_STATUSES = ("open", "pending", "active")


def status_query(open: bool, pending: bool, active: bool) -> str:
    """
    Build the ``status=...`` filter for ``GET /orders``.

    Statuses keep the fixed order open, pending, active. Returns an empty
    string when no flag is set.
    """
    flags = (open, pending, active)
    return "&".join(f"status={status}" for status, flag in zip(ORDER_STATUSES, flags) if flag)


def _id_segment(value: Id) -> str:
    return quote(str(value), safe="")


def _ignore_body(data: Any) -> None:
    return None


def _decode_order_id(data: Any) -> uuid.UUID:
    return OrderCreated.model_validate(data).id


class PrivateClient:
    """
    Client for the private GDAX endpoints.

    Market data calls are forwarded to the ``public`` client it holds.
    """

    def __init__(
        self,
        credentials: GdaxCredentials,
        api_base_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT
    ):
        """
        Args:
            credentials: API key, secret and passphrase
            api_base_url: Override default API base URL (for testing or sandbox)
            timeout: Per-request timeout in seconds
        """
        self.credentials = credentials
        self.public = PublicClient(api_base_url, timeout=timeout)
        self.requester = Requester(api_base_url, authenticator=GdaxAuthenticator(credentials), timeout=timeout)
        logging.info(f"Initialized GDAX private client for key: {credentials.key}")

    @classmethod
    def from_env(
        cls,
        env_var: str = "GDAX_CREDENTIALS",
        api_base_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT
    ) -> "PrivateClient":
        """Create a client with credentials loaded by ``GdaxCredentials.from_env``."""
        return cls(GdaxCredentials.from_env(env_var), api_base_url=api_base_url, timeout=timeout)

    # --- market data (forwarded) -------------------------------------------

    def get_products(self) -> List[Product]:
        return self.public.get_products()

    def get_product_order_book(self, product_id: str, level: Level = Level.BEST) -> OrderBook:
        return self.public.get_product_order_book(product_id, level)

    def get_best_order(self, product_id: str) -> OrderBook[BookEntry]:
        return self.public.get_best_order(product_id)

    def get_top50_orders(self, product_id: str) -> OrderBook[BookEntry]:
        return self.public.get_top50_orders(product_id)

    def get_full_book(self, product_id: str) -> OrderBook[FullBookEntry]:
        return self.public.get_full_book(product_id)

    def get_product_ticker(self, product_id: str) -> Tick:
        return self.public.get_product_ticker(product_id)

    def get_trades(self, product_id: str) -> List[Trade]:
        return self.public.get_trades(product_id)

    def get_historic_rates(self, product_id: str, start: datetime, end: datetime, granularity: int) -> List[Candle]:
        return self.public.get_historic_rates(product_id, start, end, granularity)

    def get_24hr_stats(self, product_id: str) -> Stats:
        return self.public.get_24hr_stats(product_id)

    def get_currencies(self) -> List[Currency]:
        return self.public.get_currencies()

    def get_time(self) -> ServerTime:
        return self.public.get_time()

    # --- accounts ------------------------------------------------------------

    def get_accounts(self) -> List[Account]:
        return self.requester.get("/accounts", Accounts.validate_python)

    def get_account(self, account_id: Id) -> Account:
        return self.requester.get(f"/accounts/{_id_segment(account_id)}", Account.model_validate)

    def get_account_history(self, account_id: Id) -> List[LedgerEntry]:
        """Ledger entries (fees, matches, transfers) for one account."""
        return self.requester.get(
            f"/accounts/{_id_segment(account_id)}/ledger",
            Ledger.validate_python
        )

    def get_account_holds(self, account_id: Id) -> List[Hold]:
        return self.requester.get(
            f"/accounts/{_id_segment(account_id)}/holds",
            Holds.validate_python
        )

    # --- orders --------------------------------------------------------------

    def post_order(self, order: NewOrder) -> uuid.UUID:
        """
        Place an order.

        Args:
            order: LimitOrder, MarketOrder or StopOrder

        Returns:
            Server-assigned order id

        Raises:
            ApiError: If the exchange rejects the order (e.g. insufficient funds)
        """
        body = encode_order(order)
        logging.info(f"Placing {type(order).__name__} {order.side} on {order.product_id}")
        logging.debug(f"Request body: {body}")
        order_id = self.requester.post("/orders", body, _decode_order_id)
        logging.info(f"Order placed: {order_id}")
        return order_id

    def cancel_order(self, order_id: Id) -> None:
        self.requester.delete(f"/order/{_id_segment(order_id)}", _ignore_body)
        logging.info(f"Cancelled order {order_id}")

    def cancel_all_orders(self, product_id: Optional[str] = None) -> List[uuid.UUID]:
        """
        Cancel all open orders, or only those for ``product_id`` when given.

        Returns:
            Ids of the cancelled orders
        """
        path = "/orders"
        if product_id is not None:
            path = f"{path}?{urlencode({'product_id': product_id})}"
        cancelled = self.requester.delete(path, OrderIds.validate_python)
        logging.info(f"Cancelled {len(cancelled)} order(s) for {product_id or 'all products'}")
        return cancelled

    def get_orders_with_status(self, open: bool, pending: bool, active: bool) -> List[OpenOrder]:
        """
        List orders whose status matches any of the set flags.

        With no flag set the status filter is left out of the request.
        """
        query = status_query(open, pending, active)
        path = f"/orders?{query}" if query else "/orders"
        return self.requester.get(path, OpenOrders.validate_python)

    def get_orders(self) -> List[OpenOrder]:
        """List open, pending and active orders."""
        return self.get_orders_with_status(True, True, True)

    def get_order(self, order_id: Id) -> Order:
        return self.requester.get(f"/orders/{_id_segment(order_id)}", Order.model_validate)
