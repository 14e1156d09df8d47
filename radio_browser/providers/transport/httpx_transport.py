"""httpx-backed implementation of IHttpTransport."""

from __future__ import annotations

import httpx
import structlog

from radio_browser.interfaces.http_transport import HttpResponse, IHttpTransport
from radio_browser.utils.errors import TransportError

logger = structlog.get_logger(logger_name=__name__)

_DEFAULT_USER_AGENT = "radio-browser/0.1.0"
_DEFAULT_TIMEOUT = 10.0


class HttpxTransport(IHttpTransport):
    """Perform GET requests through an ``httpx.AsyncClient``.

    The directory service asks clients to identify themselves, so every
    request carries a ``User-Agent`` header.  When no client is passed in,
    one is created and owned by the transport and closed by :meth:`aclose`;
    a caller-supplied client is left open.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        user_agent: str = _DEFAULT_USER_AGENT,
        timeout: float = _DEFAULT_TIMEOUT,
    ) -> None:
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=timeout)
        self._headers = {
            "User-Agent": user_agent,
            "Accept": "application/json",
        }
        self._logger = logger

    async def get(self, url: str) -> HttpResponse:
        try:
            response = await self._http.get(url, headers=self._headers, follow_redirects=True)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            self._logger.debug("http_request_failed", url=url, error=str(exc))
            raise TransportError(
                message=f"GET {url} failed: {str(exc) or type(exc).__name__}",
                provider_name="httpx",
            ) from exc

        self._logger.debug("http_response", url=url, status=response.status_code)
        return HttpResponse(status_code=response.status_code, body=response.content)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()
