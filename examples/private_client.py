"""
Walk through the private GDAX endpoints.

Credentials are read from GDAX_CREDENTIALS, a JSON object with "key",
"secret" and "passphrase". Point GDAX_API_BASE_URL at the sandbox before
running this: it places real orders.

    python examples/private_client.py
"""
import logging
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from gdax import ApiError, Funds, PrivateClient, Side, Size, limit, market, stop


def main() -> None:
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))
    client = PrivateClient.from_env()

    accounts = client.get_accounts()
    print(f"Accounts: {accounts}")
    if accounts:
        print(f"Account [{accounts[0].id}]: {client.get_account(accounts[0].id)}")

    btc_account = next((account for account in accounts if account.currency == "BTC"), None)
    if btc_account is not None:
        print(f"Account history: {client.get_account_history(btc_account.id)}")
        print(f"Account holds: {client.get_account_holds(btc_account.id)}")

    orders = [
        limit(Side.BUY, "BTC-USD", 0.01, 100.0),
        market(Side.BUY, "BTC-USD", Funds(10.0)),
        market(Side.SELL, "BTC-USD", Size(0.01)),
        stop(Side.SELL, "BTC-USD", Size(0.01), 100.0),
    ]
    for order in orders:
        try:
            print(f"Posted {order}: {client.post_order(order)}")
        except ApiError as e:
            print(f"Rejected {order}: {e}")

    print(f"Open orders: {client.get_orders_with_status(True, False, False)}")
    print(f"Cancelled: {client.cancel_all_orders('BTC-USD')}")


if __name__ == "__main__":
    main()
