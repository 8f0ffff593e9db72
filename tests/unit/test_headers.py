import pytest

from binance_rest.credentials import Credentials
from binance_rest.errors import HeaderConstructionError
from binance_rest.headers import (
    API_KEY_HEADER,
    FORM_CONTENT_TYPE,
    USER_AGENT,
    build_headers,
)


@pytest.fixture()
def credentials() -> Credentials:
    return Credentials(
        api_key="vmPUZE6mv9SD5VNHk4HlWFsOr6aKE2zvsw0MuIgwCIPy6utIco14y7Ju91duEh8A",
        secret_key="s3cret",
    )


def test_headers_with_content_type(credentials: Credentials) -> None:
    headers = build_headers(credentials, needs_content_type=True)
    assert headers == {
        "User-Agent": USER_AGENT,
        "Content-Type": FORM_CONTENT_TYPE,
        API_KEY_HEADER: credentials.api_key,
    }


def test_headers_without_content_type(credentials: Credentials) -> None:
    headers = build_headers(credentials, needs_content_type=False)
    assert "Content-Type" not in headers
    assert headers["User-Agent"] == USER_AGENT
    assert headers[API_KEY_HEADER] == credentials.api_key


def test_empty_api_key_is_still_sent() -> None:
    headers = build_headers(Credentials(), needs_content_type=False)
    assert headers[API_KEY_HEADER] == ""


def test_each_call_returns_a_fresh_mapping(credentials: Credentials) -> None:
    first = build_headers(credentials, True)
    first["X-Extra"] = "1"
    assert "X-Extra" not in build_headers(credentials, True)


@pytest.mark.parametrize(
    "bad_key", ["key\nwith-newline", "key\r\n", "nul\x00", "del\x7f", "ключ"]
)
def test_invalid_api_key_raises(bad_key: str) -> None:
    with pytest.raises(HeaderConstructionError):
        build_headers(Credentials(api_key=bad_key), needs_content_type=True)


def test_tab_is_allowed_in_api_key() -> None:
    headers = build_headers(Credentials(api_key="a\tb"), needs_content_type=False)
    assert headers[API_KEY_HEADER] == "a\tb"


def test_secret_key_is_not_in_repr(credentials: Credentials) -> None:
    assert "s3cret" not in repr(credentials)
