"""Exception hierarchy for the Binance REST client.

Every failure on a request path is raised as a subclass of
`BinanceClientError`, so callers can catch the whole family at once or
single out the cases they care about (e.g. `ExchangeError` for rejected
orders). Nothing here is retried by the client itself.
"""


class BinanceClientError(Exception):
    """Base class for all errors raised by the client."""


class HeaderConstructionError(BinanceClientError, ValueError):
    """The API key cannot be sent as an HTTP header value."""


class TransportError(BinanceClientError):
    """The HTTP request never produced a response (DNS, connect, timeout...)."""


class ServerError(BinanceClientError):
    """The exchange answered with a 5xx status."""

    def __init__(self, message: str, status: int) -> None:
        super().__init__(message)
        self.status = status


class AuthError(BinanceClientError):
    """The exchange rejected the request credentials (401)."""


class ExchangeError(BinanceClientError):
    """A structured error envelope returned by the exchange on 400.

    Attributes:
        code: The exchange's numeric error code (e.g. -1121).
        msg: The human-readable message from the envelope.
    """

    def __init__(self, code: int, msg: str) -> None:
        super().__init__(f"{code}: {msg}")
        self.code = code
        self.msg = msg


class DecodingError(BinanceClientError):
    """A response body could not be decoded (malformed JSON or UTF-8)."""


class EncodingError(DecodingError):
    """A successful response body was not valid UTF-8."""


class UnexpectedStatusError(BinanceClientError):
    """The response carried a status code the client does not handle."""

    def __init__(self, status: int) -> None:
        super().__init__(f"Received response: {status}")
        self.status = status
