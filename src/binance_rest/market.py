from typing import Any

from binance_rest.client import Client
from binance_rest.responses import parse_json
from binance_rest.utils.query import build_request


class Market:
    """Public market data endpoints. None of these require credentials."""

    def __init__(self, client: Client) -> None:
        self.client = client

    async def ping(self) -> None:
        """Tests connectivity to the REST API."""
        await self.client.get("/api/v3/ping")

    async def get_server_time(self) -> int:
        """Returns the exchange's clock in epoch milliseconds."""
        data = parse_json(await self.client.get("/api/v3/time"))
        return int(data["serverTime"])

    async def get_exchange_info(self) -> dict[str, Any]:
        return parse_json(await self.client.get("/api/v3/exchangeInfo"))

    async def get_price(self, symbol: str) -> str:
        """Returns the latest price for `symbol` as the exchange's decimal string."""
        request = build_request({"symbol": symbol})
        data = parse_json(await self.client.get("/api/v3/ticker/price", request))
        return str(data["price"])

    async def get_depth(self, symbol: str, limit: int | None = None) -> dict[str, Any]:
        """Returns the order book for `symbol`.

        Args:
            symbol: The venue symbol, e.g. "BTCUSDT".
            limit: Number of levels per side. The exchange default applies
                when omitted.
        """
        request = build_request({"symbol": symbol, "limit": limit})
        return parse_json(await self.client.get("/api/v3/depth", request))
