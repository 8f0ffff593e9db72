from collections.abc import Callable

import httpx
import pytest

MOCK_HOST = "https://mock.binance.test"


class RecordingTransport(httpx.MockTransport):
    """A MockTransport that remembers every request it served."""

    def __init__(self, respond: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return respond(request)

        super().__init__(handler)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture()
def make_transport() -> Callable[..., RecordingTransport]:
    """Builds a RecordingTransport that answers with a fixed status and body."""

    def factory(status: int = 200, content: bytes = b"{}") -> RecordingTransport:
        return RecordingTransport(lambda _: httpx.Response(status, content=content))

    return factory
