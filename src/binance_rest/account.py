"""Signed account and order endpoints.

Every call here goes through one of the client's signed paths, so the
query string carries a `timestamp` and is authenticated with the secret key.
"""

from typing import Any

from loguru import logger

from binance_rest.client import Client
from binance_rest.responses import parse_json
from binance_rest.utils.query import DEFAULT_RECV_WINDOW, build_signed_request

ORDER_ENDPOINT = "/api/v3/order"


class Account:
    """Account state and order management for a single API key."""

    def __init__(self, client: Client, recv_window: int = DEFAULT_RECV_WINDOW) -> None:
        """Initializes the account helper.

        Args:
            client: A client configured with both API key and secret key.
            recv_window: Milliseconds the request stays valid after its
                timestamp. Zero omits the parameter.
        """
        self.client = client
        self.recv_window = recv_window

    def _request(self, **params: Any) -> str:
        return build_signed_request(params, self.recv_window)

    async def get_account(self) -> dict[str, Any]:
        """Returns balances and permissions for the account."""
        payload = await self.client.get_signed("/api/v3/account", self._request())
        return parse_json(payload)

    async def get_open_orders(self, symbol: str) -> list[dict[str, Any]]:
        request = self._request(symbol=symbol)
        return parse_json(await self.client.get_signed("/api/v3/openOrders", request))

    async def get_order(self, symbol: str, order_id: int) -> dict[str, Any]:
        request = self._request(symbol=symbol, orderId=order_id)
        return parse_json(await self.client.get_signed(ORDER_ENDPOINT, request))

    async def _place_order(
        self,
        symbol: str,
        side: str,
        order_type: str,
        qty: float | str,
        price: float | str | None = None,
    ) -> dict[str, Any]:
        params: dict[str, Any] = {
            "symbol": symbol,
            "side": side,
            "type": order_type,
            "quantity": qty,
        }
        if order_type == "LIMIT":
            params["price"] = price
            params["timeInForce"] = "GTC"

        logger.info(f"[binance] Placing {order_type} {side} {qty} {symbol}")
        payload = await self.client.post_signed(ORDER_ENDPOINT, self._request(**params))
        return parse_json(payload)

    async def limit_buy(
        self, symbol: str, qty: float | str, price: float | str
    ) -> dict[str, Any]:
        return await self._place_order(symbol, "BUY", "LIMIT", qty, price)

    async def limit_sell(
        self, symbol: str, qty: float | str, price: float | str
    ) -> dict[str, Any]:
        return await self._place_order(symbol, "SELL", "LIMIT", qty, price)

    async def market_buy(self, symbol: str, qty: float | str) -> dict[str, Any]:
        return await self._place_order(symbol, "BUY", "MARKET", qty)

    async def market_sell(self, symbol: str, qty: float | str) -> dict[str, Any]:
        return await self._place_order(symbol, "SELL", "MARKET", qty)

    async def cancel_order(self, symbol: str, order_id: int) -> dict[str, Any]:
        request = self._request(symbol=symbol, orderId=order_id)
        logger.info(f"[binance] Cancelling order {order_id} on {symbol}")
        return parse_json(await self.client.delete_signed(ORDER_ENDPOINT, request))
