"""
GDAX REST API client.

Public market data through ``PublicClient``; accounts and orders through
``PrivateClient``, which signs every request with the API key credentials.
"""
__version__ = "0.1.0"

from .errors import ApiError, DecodeError, GdaxError, InvalidCredentialsError, TransportError
from .auth import GdaxAuthenticator, GdaxCredentials, sign
from .models import (
    Account,
    BookEntry,
    Candle,
    Currency,
    EntryDetails,
    EntryType,
    FullBookEntry,
    Hold,
    HoldType,
    LedgerEntry,
    Level,
    OpenOrder,
    Order,
    OrderBook,
    OrderCreated,
    Product,
    ServerTime,
    Side,
    Stats,
    Tick,
    Trade,
)
from .orders import (
    Funds,
    LimitOrder,
    MarketOrder,
    NewOrder,
    Size,
    SizeOrFunds,
    StopOrder,
    encode_order,
    limit,
    market,
    stop,
)
from .public import PublicClient
from .private import PrivateClient

__all__ = [
    'ApiError',
    'DecodeError',
    'GdaxError',
    'InvalidCredentialsError',
    'TransportError',
    'GdaxAuthenticator',
    'GdaxCredentials',
    'sign',
    'Account',
    'BookEntry',
    'Candle',
    'Currency',
    'EntryDetails',
    'EntryType',
    'FullBookEntry',
    'Hold',
    'HoldType',
    'LedgerEntry',
    'Level',
    'OpenOrder',
    'Order',
    'OrderBook',
    'OrderCreated',
    'Product',
    'ServerTime',
    'Side',
    'Stats',
    'Tick',
    'Trade',
    'Funds',
    'LimitOrder',
    'MarketOrder',
    'NewOrder',
    'Size',
    'SizeOrFunds',
    'StopOrder',
    'encode_order',
    'limit',
    'market',
    'stop',
    'PublicClient',
    'PrivateClient',
]
