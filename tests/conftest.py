"""
Shared fixtures. Upstream HTTP is replaced by httpx.MockTransport so no live
Open-Meteo or wttr.in connection is needed.
"""
from typing import Callable, List

import httpx
import pytest


class RecordingTransport(httpx.MockTransport):
    """MockTransport that also remembers every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture()
def transport_for():
    """Build a RecordingTransport from a handler function."""
    return RecordingTransport


@pytest.fixture()
def json_transport():
    """Transport answering every request with the same status and JSON body."""

    def _make(payload, status_code: int = 200) -> RecordingTransport:
        return RecordingTransport(lambda request: httpx.Response(status_code, json=payload))

    return _make
