"""Abstract base class for the HTTP transport used by the lookup client.

The client only ever needs one capability from the network: issue a GET
for a fully-formed URL and hand back the status code and raw body.  Keeping
that behind an interface lets tests count or forbid network calls and lets
callers bring their own client (proxies, custom TLS, timeouts).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class HttpResponse:
    """Status code and undecoded body of a completed HTTP exchange."""

    status_code: int
    body: bytes

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class IHttpTransport(ABC):
    """Contract for HTTP GET transports."""

    @abstractmethod
    async def get(self, url: str) -> HttpResponse:
        """Perform a GET request for *url*.

        Any completed exchange is returned as an :class:`HttpResponse`,
        whatever its status code.  When no response could be obtained
        (connection refused, DNS or TLS failure, timeout, malformed URL)
        implementations raise
        :class:`~radio_browser.utils.errors.TransportError` chained to the
        underlying exception.
        """

    async def aclose(self) -> None:
        """Release any pooled connections.  Default is a no-op."""
