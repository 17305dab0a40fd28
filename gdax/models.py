"""
Wire types for GDAX REST responses.

Every record is a frozen pydantic model. GDAX sends monetary values as JSON
strings on some endpoints and as numbers on others; pydantic coerces both to
``float``. Side, ledger entry type and hold type decode case-insensitively.
Order book rows and candles arrive as JSON arrays and are mapped onto named
fields before validation.
"""
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any, Generic, List, Optional, Sequence, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator, model_validator


EntryT = TypeVar("EntryT")


def _lowercase(value: Any) -> Any:
    if isinstance(value, str):
        return value.lower()
    return value


def _row_to_dict(data: Any, fields: Sequence[str]) -> Any:
    """Map a positional JSON row onto field names."""
    if isinstance(data, (list, tuple)):
        if len(data) != len(fields):
            raise ValueError(f"expected {len(fields)} elements, got {len(data)}")
        return dict(zip(fields, data))
    return data


class Side(str, Enum):
    """Order side. Always encodes lowercase."""
    BUY = "buy"
    SELL = "sell"

    def __str__(self) -> str:
        return self.value


class EntryType(str, Enum):
    """Ledger entry type."""
    FEE = "fee"
    MATCH = "match"
    TRANSFER = "transfer"


class HoldType(str, Enum):
    """What a hold was placed for; selects the meaning of ``Hold.ref``."""
    ORDER = "order"
    TRANSFER = "transfer"


class Level(IntEnum):
    """Order book detail level."""
    BEST = 1
    TOP50 = 2
    FULL = 3


class WireModel(BaseModel):
    """Base for all decoded responses: immutable, finite numbers only."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, allow_inf_nan=False)


# --- public market data ----------------------------------------------------

class Product(WireModel):
    id: str
    base_currency: str
    quote_currency: str
    base_min_size: float
    base_max_size: float
    quote_increment: float


class BookEntry(WireModel):
    """Aggregated price level (book levels 1 and 2), wire form ``[price, size, num_orders]``."""
    price: float
    size: float
    num_orders: int

    @model_validator(mode="before")
    @classmethod
    def from_row(cls, data: Any) -> Any:
        return _row_to_dict(data, ("price", "size", "num_orders"))


class FullBookEntry(WireModel):
    """Single resting order (book level 3), wire form ``[price, size, order_id]``."""
    price: float
    size: float
    order_id: UUID

    @model_validator(mode="before")
    @classmethod
    def from_row(cls, data: Any) -> Any:
        return _row_to_dict(data, ("price", "size", "order_id"))


class OrderBook(WireModel, Generic[EntryT]):
    """Order book snapshot; ``sequence`` increases with every book change."""
    sequence: int
    bids: List[EntryT]
    asks: List[EntryT]


class Tick(WireModel):
    trade_id: int
    price: float
    size: float
    bid: float
    ask: float
    volume: float
    time: datetime


class Trade(WireModel):
    time: datetime
    trade_id: int
    price: float
    size: float
    side: Side

    lowercase_side = field_validator("side", mode="before")(_lowercase)


class Candle(WireModel):
    """One historic rate bucket; ``time`` is the bucket start in epoch seconds."""
    time: int
    low: float
    high: float
    open: float
    close: float
    volume: float

    @model_validator(mode="before")
    @classmethod
    def from_row(cls, data: Any) -> Any:
        # GDAX sends candles as [time, low, high, open, close, volume]
        return _row_to_dict(data, ("time", "low", "high", "open", "close", "volume"))


class Stats(WireModel):
    open: float
    high: float
    low: float
    volume: float


class Currency(WireModel):
    id: str
    name: str
    min_size: float


class ServerTime(WireModel):
    iso: datetime
    epoch: float


# --- private account data --------------------------------------------------

class Account(WireModel):
    """
    Trading account for one currency.

    For well-formed exchange data ``balance == hold + available`` within
    float rounding; this is not checked on decode.
    """
    id: UUID
    balance: float
    hold: float
    available: float
    currency: str


class EntryDetails(WireModel):
    """
    Extra ledger entry information.

    Which fields are set depends on the entry type: ``order_id``,
    ``trade_id`` and ``product_id`` for matches, ``transfer_id`` and
    ``transfer_type`` for transfers.
    """
    order_id: Optional[UUID] = None
    trade_id: Optional[int] = None
    product_id: Optional[str] = None
    transfer_id: Optional[UUID] = None
    transfer_type: Optional[str] = None


class LedgerEntry(WireModel):
    id: int
    created_at: datetime
    amount: float
    balance: float
    entry_type: EntryType = Field(alias="type")
    details: Optional[EntryDetails] = None

    lowercase_entry_type = field_validator("entry_type", mode="before")(_lowercase)


class Hold(WireModel):
    """Funds on hold; ``ref`` is an order id or a transfer id depending on ``hold_type``."""
    id: UUID
    created_at: datetime
    amount: float
    hold_type: HoldType = Field(alias="type")
    ref: UUID
    account_id: Optional[UUID] = None
    updated_at: Optional[datetime] = None

    lowercase_hold_type = field_validator("hold_type", mode="before")(_lowercase)


# --- orders ----------------------------------------------------------------

class OpenOrder(WireModel):
    id: UUID
    size: float
    price: float
    product_id: str
    status: str
    filled_size: float
    executed_value: float
    fill_fees: float
    settled: bool
    side: Side
    created_at: datetime

    lowercase_side = field_validator("side", mode="before")(_lowercase)


class Order(OpenOrder):
    done_reason: Optional[str] = None
    done_at: Optional[datetime] = None


class OrderCreated(WireModel):
    """Body returned by ``POST /orders``."""
    id: UUID


# list decoders for endpoints that return JSON arrays
Products = TypeAdapter(List[Product])
Trades = TypeAdapter(List[Trade])
Candles = TypeAdapter(List[Candle])
Currencies = TypeAdapter(List[Currency])
Accounts = TypeAdapter(List[Account])
Ledger = TypeAdapter(List[LedgerEntry])
Holds = TypeAdapter(List[Hold])
OpenOrders = TypeAdapter(List[OpenOrder])
OrderIds = TypeAdapter(List[UUID])
