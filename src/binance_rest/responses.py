"""Classification of raw HTTP responses from the exchange.

Each response is mapped to exactly one outcome: the UTF-8 body on 200, or a
typed exception from `binance_rest.errors`. The only body the handler
inspects on failure is the JSON error envelope the exchange sends with 400.
"""

import json
from typing import Any

import httpx
from loguru import logger

from binance_rest.errors import (
    AuthError,
    DecodingError,
    EncodingError,
    ExchangeError,
    ServerError,
    UnexpectedStatusError,
)


def _parse_error_envelope(body: bytes) -> ExchangeError:
    """Decodes a `{"code": int, "msg": str}` body into an ExchangeError."""
    try:
        envelope: Any = json.loads(body)
    except ValueError as e:
        err_msg = f"Malformed error envelope: {e}"
        raise DecodingError(err_msg) from e

    if not isinstance(envelope, dict):
        err_msg = f"Error envelope is not a JSON object: {envelope!r}"
        raise DecodingError(err_msg)

    code = envelope.get("code")
    msg = envelope.get("msg")
    # bool is a subclass of int, but never a valid error code.
    if not isinstance(code, int) or isinstance(code, bool) or not isinstance(msg, str):
        err_msg = f"Error envelope has unexpected shape: {envelope!r}"
        raise DecodingError(err_msg)

    return ExchangeError(code, msg)


async def handle_response(response: httpx.Response) -> str:
    """Returns the body of a successful response or raises a typed error.

    Args:
        response: The response returned by the HTTP collaborator.

    Returns:
        The response body decoded as UTF-8.

    Raises:
        EncodingError: A 200 body is not valid UTF-8.
        ServerError: The status is 500 or 503.
        AuthError: The status is 401.
        ExchangeError: The status is 400 with a well-formed error envelope.
        DecodingError: The status is 400 but the envelope is malformed.
        UnexpectedStatusError: Any other status.
    """
    status = response.status_code
    body = await response.aread()

    if status == httpx.codes.OK:
        try:
            return body.decode("utf-8")
        except UnicodeDecodeError as e:
            err_msg = f"Response body is not valid UTF-8: {e}"
            raise EncodingError(err_msg) from e

    if status == httpx.codes.INTERNAL_SERVER_ERROR:
        logger.warning("[binance] Server error: 500 Internal Server Error")
        raise ServerError("Internal Server Error", status)

    if status == httpx.codes.SERVICE_UNAVAILABLE:
        logger.warning("[binance] Server error: 503 Service Unavailable")
        raise ServerError("Service Unavailable", status)

    if status == httpx.codes.UNAUTHORIZED:
        logger.warning("[binance] Request unauthorized (401)")
        raise AuthError("Unauthorized")

    if status == httpx.codes.BAD_REQUEST:
        error = _parse_error_envelope(body)
        logger.warning(
            f"[binance] Request rejected: code={error.code} msg={error.msg!r}"
        )
        raise error

    logger.warning(f"[binance] Unexpected response status: {status}")
    raise UnexpectedStatusError(status)


def parse_json(payload: str) -> Any:
    """Decodes a successful response body, raising DecodingError on bad JSON."""
    try:
        return json.loads(payload)
    except ValueError as e:
        err_msg = f"Response body is not valid JSON: {e}"
        raise DecodingError(err_msg) from e
