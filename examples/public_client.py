"""
Print GDAX market data for BTC-USD.

    python examples/public_client.py
"""
from datetime import datetime, timezone
import logging
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from gdax import PublicClient


def main() -> None:
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))
    client = PublicClient()

    print(f"Products:\n{client.get_products()}")
    print(f"Product order book:\n{client.get_best_order('BTC-USD')}\n{client.get_top50_orders('BTC-USD')}")
    print(f"Product ticker: {client.get_product_ticker('BTC-USD')}")
    print(f"Latest trades: {client.get_trades('BTC-USD')}")
    print("Historic rates: {}".format(client.get_historic_rates(
        "BTC-USD",
        datetime(2016, 6, 10, 12, 0, 0, tzinfo=timezone.utc),
        datetime(2016, 6, 11, 0, 0, 0, tzinfo=timezone.utc),
        30 * 60,
    )))
    print(f"24h stats: {client.get_24hr_stats('BTC-USD')}")
    print(f"Currencies: {client.get_currencies()}")
    print(f"Server time: {client.get_time()}")


if __name__ == "__main__":
    main()
