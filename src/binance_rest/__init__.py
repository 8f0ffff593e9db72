"""binance-rest: an async client for the Binance REST API.

The package signs requests, attaches the exchange's authentication headers,
dispatches them over httpx and classifies each response into either the raw
UTF-8 payload or a typed error.

Key modules:
- `client`: The request dispatcher (`Client`) and URL signing.
- `responses`: Classification of HTTP responses.
- `errors`: The exception hierarchy raised by every request path.
- `market`, `account`, `userstream`: Endpoint helpers built on `Client`.
"""

import importlib.metadata

from binance_rest.client import API_HOST, Client
from binance_rest.credentials import Credentials
from binance_rest.errors import (
    AuthError,
    BinanceClientError,
    DecodingError,
    EncodingError,
    ExchangeError,
    HeaderConstructionError,
    ServerError,
    TransportError,
    UnexpectedStatusError,
)
from binance_rest.headers import build_headers
from binance_rest.responses import handle_response
from binance_rest.signing import sign

try:
    __version__: str = importlib.metadata.version("binance-rest")
except importlib.metadata.PackageNotFoundError:
    # Running from a source checkout that has not been installed.
    __version__ = "0.0.0-dev"

__all__ = [
    "API_HOST",
    "AuthError",
    "BinanceClientError",
    "Client",
    "Credentials",
    "DecodingError",
    "EncodingError",
    "ExchangeError",
    "HeaderConstructionError",
    "ServerError",
    "TransportError",
    "UnexpectedStatusError",
    "build_headers",
    "handle_response",
    "sign",
]
