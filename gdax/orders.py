"""
New order model and its JSON encoding for ``POST /orders``.

Each order kind has its own required fields, so an inconsistent order (a
limit order without a size, a market order with both size and funds) cannot
be built in the first place. The encoder maps every (kind, size/funds)
combination to exactly one of five JSON shapes.
"""
from dataclasses import dataclass
from typing import Any, Dict, Union
import json
import math

from .models import Side


def _require_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise ValueError(f"{name} must be a finite number, got {value!r}")


@dataclass(frozen=True)
class Size:
    """Quantity in the base currency (e.g. BTC for BTC-USD)."""
    value: float

    def __post_init__(self) -> None:
        _require_finite("size", self.value)


@dataclass(frozen=True)
class Funds:
    """Quantity in the quote currency (e.g. USD for BTC-USD)."""
    value: float

    def __post_init__(self) -> None:
        _require_finite("funds", self.value)


SizeOrFunds = Union[Size, Funds]


@dataclass(frozen=True)
class LimitOrder:
    side: Side
    product_id: str
    price: float
    size: float

    def __post_init__(self) -> None:
        _require_finite("price", self.price)
        _require_finite("size", self.size)


@dataclass(frozen=True)
class MarketOrder:
    side: Side
    product_id: str
    size_or_funds: SizeOrFunds


@dataclass(frozen=True)
class StopOrder:
    side: Side
    product_id: str
    price: float
    size_or_funds: SizeOrFunds

    def __post_init__(self) -> None:
        _require_finite("price", self.price)


NewOrder = Union[LimitOrder, MarketOrder, StopOrder]


def limit(side: Side, product_id: str, size: float, price: float) -> LimitOrder:
    """Build a limit order."""
    return LimitOrder(side=side, product_id=product_id, price=price, size=size)


def market(side: Side, product_id: str, size_or_funds: SizeOrFunds) -> MarketOrder:
    """Build a market order sized by ``Size`` or ``Funds``."""
    return MarketOrder(side=side, product_id=product_id, size_or_funds=size_or_funds)


def stop(side: Side, product_id: str, size_or_funds: SizeOrFunds, price: float) -> StopOrder:
    """Build a stop order sized by ``Size`` or ``Funds``."""
    return StopOrder(side=side, product_id=product_id, price=price, size_or_funds=size_or_funds)


def order_to_dict(order: NewOrder) -> Dict[str, Any]:
    """
    Convert an order to the field set GDAX expects.

    Raises:
        TypeError: If ``order`` is not a known order kind, or its
            ``size_or_funds`` is neither ``Size`` nor ``Funds``
    """
    match order:
        case LimitOrder(side=side, product_id=product_id, price=price, size=size):
            return {"type": "limit", "side": Side(side).value, "product_id": product_id,
                    "price": price, "size": size}
        case MarketOrder(side=side, product_id=product_id, size_or_funds=Size(value=size)):
            return {"type": "market", "side": Side(side).value, "product_id": product_id,
                    "size": size}
        case MarketOrder(side=side, product_id=product_id, size_or_funds=Funds(value=funds)):
            return {"type": "market", "side": Side(side).value, "product_id": product_id,
                    "funds": funds}
        case StopOrder(side=side, product_id=product_id, price=price, size_or_funds=Size(value=size)):
            return {"type": "stop", "side": Side(side).value, "product_id": product_id,
                    "price": price, "size": size}
        case StopOrder(side=side, product_id=product_id, price=price, size_or_funds=Funds(value=funds)):
            return {"type": "stop", "side": Side(side).value, "product_id": product_id,
                    "price": price, "funds": funds}
    raise TypeError(f"Cannot encode order of type {type(order).__name__}: {order!r}")


def encode_order(order: NewOrder) -> str:
    """
    Encode an order to the JSON body sent to ``POST /orders``.

    Raises:
        ValueError: If a price or quantity is NaN or infinite
    """
    return json.dumps(order_to_dict(order), allow_nan=False)
