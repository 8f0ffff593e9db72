from binance_rest.credentials import Credentials
from binance_rest.errors import HeaderConstructionError

USER_AGENT = "binance-rest"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
API_KEY_HEADER = "X-MBX-APIKEY"


def _is_valid_header_value(value: str) -> bool:
    # Visible ASCII, space and tab. httpx encodes header values as ASCII.
    return all(ch == "\t" or 32 <= ord(ch) < 127 for ch in value)


def build_headers(credentials: Credentials, needs_content_type: bool) -> dict[str, str]:
    """Builds the header set attached to authenticated requests.

    Args:
        credentials: The client's credentials; the API key is sent verbatim.
        needs_content_type: Whether to declare a form-urlencoded content type.
            Signed requests set this; listen-key requests do not.

    Returns:
        A fresh mapping of header names to values.

    Raises:
        HeaderConstructionError: If the API key contains characters that are
            not allowed in an HTTP header value.
    """
    headers = {"User-Agent": USER_AGENT}
    if needs_content_type:
        headers["Content-Type"] = FORM_CONTENT_TYPE

    if not _is_valid_header_value(credentials.api_key):
        err_msg = f"API key is not a valid value for the {API_KEY_HEADER} header."
        raise HeaderConstructionError(err_msg)
    headers[API_KEY_HEADER] = credentials.api_key

    return headers
