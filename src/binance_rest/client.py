"""The request dispatcher for the Binance REST API.

`Client` owns a read-only credential pair and turns each call into exactly
one HTTP request: it signs the query string where required, attaches the
authentication headers, sends the request through httpx and hands the
response to `binance_rest.responses.handle_response`.

There is no retrying, caching or rate limiting here. Any failure aborts the
single call that produced it and is raised to the caller as a
`BinanceClientError`; httpx exceptions never escape unwrapped.
"""

import dataclasses
from typing import TYPE_CHECKING

import httpx
from loguru import logger

from binance_rest.credentials import Credentials
from binance_rest.errors import DecodingError, TransportError
from binance_rest.headers import build_headers
from binance_rest.responses import handle_response
from binance_rest.signing import sign

if TYPE_CHECKING:
    from binance_rest.config import Settings

API_HOST = "https://www.binance.com"
DEFAULT_TIMEOUT_S = 10.0


def _strip_signature(url: str) -> str:
    """Drops the signature parameter so a URL can be logged."""
    return url.split("&signature=", 1)[0]


class Client:
    """An async client for signed and unsigned Binance REST calls.

    Args:
        api_key: The API key sent in the `X-MBX-APIKEY` header. Defaults to "".
        secret_key: The secret used to sign requests. Defaults to "".
        base_url: The exchange host prefixed to every endpoint.
        http_client: A shared `httpx.AsyncClient`. When omitted, every call
            opens a short-lived client of its own.
        timeout_s: The timeout applied to short-lived clients.
    """

    def __init__(
        self,
        api_key: str | None = None,
        secret_key: str | None = None,
        *,
        base_url: str = API_HOST,
        http_client: httpx.AsyncClient | None = None,
        timeout_s: float = DEFAULT_TIMEOUT_S,
    ) -> None:
        self._credentials = Credentials.from_optional(api_key, secret_key)
        self.base_url = base_url
        self.http_client = http_client
        self.timeout_s = timeout_s

    @classmethod
    def from_settings(
        cls, settings: "Settings", http_client: httpx.AsyncClient | None = None
    ) -> "Client":
        """Builds a client from loaded settings and keyring credentials."""
        from binance_rest.config import get_api_credentials

        api_key, secret_key = get_api_credentials()
        return cls(
            api_key,
            secret_key,
            base_url=settings.api.base_url,
            http_client=http_client,
            timeout_s=settings.api.timeout_s,
        )

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    @property
    def api_key(self) -> str:
        return self._credentials.api_key

    @property
    def secret_key(self) -> str:
        return self._credentials.secret_key

    def clone(self) -> "Client":
        """Returns an independent client with its own copy of the credentials."""
        duplicate = Client(
            base_url=self.base_url,
            http_client=self.http_client,
            timeout_s=self.timeout_s,
        )
        duplicate._credentials = dataclasses.replace(self._credentials)
        return duplicate

    def sign_request(self, endpoint: str, request: str) -> str:
        """Returns the full URL for `endpoint` with `request` and its signature.

        Only `request` is signed. An empty request still produces a
        `?&signature=` query.
        """
        signature = sign(self.secret_key.encode("utf-8"), request.encode("utf-8"))
        return f"{self.base_url}{endpoint}?{request}&signature={signature}"

    async def _send(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        content: str | None = None,
    ) -> str:
        """Issues one request and classifies its response."""
        logger.debug(f"[binance] {method} {_strip_signature(url)}")
        try:
            if self.http_client is not None:
                response = await self.http_client.request(
                    method, url, headers=headers, content=content
                )
                return await handle_response(response)

            async with httpx.AsyncClient(timeout=self.timeout_s) as client:
                response = await client.request(
                    method, url, headers=headers, content=content
                )
                return await handle_response(response)
        except httpx.DecodingError as e:
            logger.warning(
                f"[binance] {method} {_strip_signature(url)} returned an "
                f"undecodable body: {e}"
            )
            err_msg = f"{method} response body could not be decoded: {e}"
            raise DecodingError(err_msg) from e
        except httpx.RequestError as e:
            logger.warning(
                f"[binance] {method} {_strip_signature(url)} failed: "
                f"{type(e).__name__}"
            )
            err_msg = f"{method} request failed: {e}"
            raise TransportError(err_msg) from e

    # --- Signed endpoints ---

    async def get_signed(self, endpoint: str, request: str) -> str:
        url = self.sign_request(endpoint, request)
        headers = build_headers(self._credentials, True)
        return await self._send("GET", url, headers=headers)

    async def post_signed(self, endpoint: str, request: str) -> str:
        url = self.sign_request(endpoint, request)
        headers = build_headers(self._credentials, True)
        return await self._send("POST", url, headers=headers)

    async def delete_signed(self, endpoint: str, request: str) -> str:
        url = self.sign_request(endpoint, request)
        headers = build_headers(self._credentials, True)
        return await self._send("DELETE", url, headers=headers)

    # --- Unsigned endpoints ---

    async def get(self, endpoint: str, request: str = "") -> str:
        """Issues a public GET.

        No custom headers are attached on this path, only the HTTP client's
        defaults.
        """
        url = f"{self.base_url}{endpoint}"
        if request:
            url = f"{url}?{request}"
        return await self._send("GET", url)

    async def post(self, endpoint: str) -> str:
        url = f"{self.base_url}{endpoint}"
        headers = build_headers(self._credentials, False)
        return await self._send("POST", url, headers=headers)

    async def put(self, endpoint: str, listen_key: str) -> str:
        url = f"{self.base_url}{endpoint}"
        return await self._send(
            "PUT",
            url,
            headers=build_headers(self._credentials, False),
            content=f"listenKey={listen_key}",
        )

    async def delete(self, endpoint: str, listen_key: str) -> str:
        url = f"{self.base_url}{endpoint}"
        return await self._send(
            "DELETE",
            url,
            headers=build_headers(self._credentials, False),
            content=f"listenKey={listen_key}",
        )
