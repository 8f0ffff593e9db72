"""Helpers for building the canonical query strings sent to the exchange.

The client treats the query string as opaque and signs it byte for byte, so
the order produced here is exactly the order the exchange will verify.
"""

from collections.abc import Mapping
from decimal import Decimal
from typing import Any
from urllib.parse import urlencode

from binance_rest.utils.time import get_current_ms

DEFAULT_RECV_WINDOW = 5000


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        # Avoid scientific notation such as 1e-05 for small quantities.
        return format(Decimal(str(value)), "f")
    return str(value)


def build_request(params: Mapping[str, Any]) -> str:
    """Encodes parameters as `key=value&key2=value2` in insertion order.

    Parameters whose value is None are left out.
    """
    items = [(k, _format_value(v)) for k, v in params.items() if v is not None]
    return urlencode(items)


def build_signed_request(
    params: Mapping[str, Any], recv_window: int = DEFAULT_RECV_WINDOW
) -> str:
    """Encodes parameters for a signed endpoint.

    Appends `recvWindow` (when positive) and the current `timestamp` in
    milliseconds after the caller's parameters.
    """
    signed_params = dict(params)
    if recv_window > 0:
        signed_params["recvWindow"] = recv_window
    signed_params["timestamp"] = get_current_ms()
    return build_request(signed_params)
