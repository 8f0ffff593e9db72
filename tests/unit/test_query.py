from pytest_mock import MockerFixture

from binance_rest.utils.query import (
    DEFAULT_RECV_WINDOW,
    build_request,
    build_signed_request,
)
from binance_rest.utils.time import get_current_ms, ms_to_datetime


def test_build_request_keeps_insertion_order() -> None:
    request = build_request({"symbol": "BTCUSDT", "side": "BUY", "quantity": 1})
    assert request == "symbol=BTCUSDT&side=BUY&quantity=1"


def test_build_request_drops_none_and_formats_values() -> None:
    request = build_request(
        {"symbol": "ETHBTC", "limit": None, "isIsolated": True, "quantity": 0.00001}
    )
    assert request == "symbol=ETHBTC&isIsolated=true&quantity=0.00001"


def test_build_request_url_encodes_values() -> None:
    assert build_request({"symbols": '["BTCUSDT"]'}) == "symbols=%5B%22BTCUSDT%22%5D"


def test_build_request_empty() -> None:
    assert build_request({}) == ""


def test_build_signed_request_appends_window_and_timestamp(
    mocker: MockerFixture,
) -> None:
    mocker.patch(
        "binance_rest.utils.query.get_current_ms", return_value=1499827319559
    )
    request = build_signed_request({"symbol": "LTCBTC"})
    assert request == (
        f"symbol=LTCBTC&recvWindow={DEFAULT_RECV_WINDOW}&timestamp=1499827319559"
    )


def test_build_signed_request_without_recv_window(mocker: MockerFixture) -> None:
    mocker.patch("binance_rest.utils.query.get_current_ms", return_value=42)
    assert build_signed_request({}, recv_window=0) == "timestamp=42"


def test_get_current_ms_uses_time_ns(mocker: MockerFixture) -> None:
    mocker.patch("time.time_ns", return_value=1_700_000_000_123_456_789)
    assert get_current_ms() == 1_700_000_000_123


def test_ms_to_datetime_is_utc() -> None:
    dt = ms_to_datetime(1499827319559)
    assert dt.isoformat() == "2017-07-12T02:41:59.559000+00:00"
