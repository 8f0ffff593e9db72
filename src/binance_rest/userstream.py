from loguru import logger

from binance_rest.client import Client
from binance_rest.errors import DecodingError
from binance_rest.responses import parse_json

USER_DATA_STREAM_ENDPOINT = "/api/v3/userDataStream"


class UserStream:
    """Manages the listen key that keeps a user data stream alive.

    A listen key expires unless it is refreshed with `keep_alive`; the
    caller owns the refresh schedule.
    """

    def __init__(self, client: Client) -> None:
        self.client = client

    async def start(self) -> str:
        """Opens a user data stream and returns its listen key."""
        data = parse_json(await self.client.post(USER_DATA_STREAM_ENDPOINT))
        try:
            listen_key = data["listenKey"]
        except (KeyError, TypeError) as e:
            err_msg = f"Response has no listenKey: {data!r}"
            raise DecodingError(err_msg) from e
        logger.info("[binance] User data stream started.")
        return str(listen_key)

    async def keep_alive(self, listen_key: str) -> None:
        await self.client.put(USER_DATA_STREAM_ENDPOINT, listen_key)
        logger.debug("[binance] User data stream kept alive.")

    async def close(self, listen_key: str) -> None:
        await self.client.delete(USER_DATA_STREAM_ENDPOINT, listen_key)
        logger.info("[binance] User data stream closed.")
