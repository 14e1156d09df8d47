"""Shared pytest fixtures for the radio-browser test suite."""

from __future__ import annotations

import json
from typing import Any

import pytest

from radio_browser.interfaces.http_transport import HttpResponse, IHttpTransport
from radio_browser.models.station import RadioStation
from radio_browser.utils.errors import TransportError


class FakeTransport(IHttpTransport):
    """Transport that replays canned responses and records every URL.

    ``max_calls`` turns an unexpected extra request into a test failure,
    which is how cache hits are proven not to touch the network.
    """

    def __init__(
        self,
        responses: list[HttpResponse | Exception] | None = None,
        max_calls: int | None = None,
    ) -> None:
        self._responses = list(responses or [])
        self._max_calls = max_calls
        self.urls: list[str] = []
        self.closed = False

    @property
    def call_count(self) -> int:
        return len(self.urls)

    async def get(self, url: str) -> HttpResponse:
        self.urls.append(url)
        if self._max_calls is not None and len(self.urls) > self._max_calls:
            pytest.fail(f"transport called {len(self.urls)} times (max {self._max_calls}): {url}")
        if not self._responses:
            raise TransportError(message=f"no canned response for {url}")
        # The last canned response is reused once the queue runs down to it.
        outcome = self._responses.pop(0) if len(self._responses) > 1 else self._responses[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    async def aclose(self) -> None:
        self.closed = True


def json_response(payload: Any, status_code: int = 200) -> HttpResponse:
    return HttpResponse(status_code=status_code, body=json.dumps(payload).encode("utf-8"))


# ---------------------------------------------------------------------------
# Station fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def test_station_payload() -> dict[str, Any]:
    """Single station as the directory would return it, minimal fields."""
    return {"name": "Test Station", "url": "http://test.com", "votes": 100}


@pytest.fixture
def jazz_payload() -> list[dict[str, Any]]:
    """Three jazz stations, including extra fields the client ignores."""
    return [
        {
            "stationuuid": "9617a958-0601-11e8-ae97-52543be04c81",
            "name": "Jazz24",
            "url": "http://live.wostreaming.net/direct/ppm-jazz24aac-ibc1",
            "tags": "jazz,smooth jazz",
            "country": "The United States Of America",
            "votes": 12045,
            "codec": "AAC",
            "bitrate": 128,
        },
        {
            "name": "TSF Jazz",
            "url": "http://tsfjazz.ice.infomaniak.ch/tsfjazz-high.mp3",
            "tags": "jazz",
            "country": "France",
            "votes": 8310,
        },
        {
            "name": "Downvoted Jazz",
            "url": "http://example.org/jazz",
            "tags": "",
            "country": None,
            "votes": -3,
        },
    ]


@pytest.fixture
def sample_stations() -> list[RadioStation]:
    return [
        RadioStation(name="Radio One", url="http://one.example/stream", tags="rock", votes=5),
        RadioStation(name="Radio Two", url="http://two.example/stream", country="Germany"),
    ]
