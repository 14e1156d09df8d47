"""Exception family for the radio-browser client.

All library exceptions inherit from :class:`RadioBrowserError`, which
carries an optional ``provider_name`` so log handlers can tell which
collaborator (e.g. "httpx", "radio-browser") produced the failure.

A station lookup can fail in exactly two ways, and each one is a final
class with a matching :class:`ErrorKind` tag:

    RadioBrowserError   (base -- catch-all for any lookup failure)
    +-- TransportError  (the HTTP exchange itself failed)
    +-- ApiError        (the service answered, but not with a station list)

    ConfigurationError  (invalid settings at construction time; raised
                         before any lookup runs, so it is not a lookup kind)

Callers that want exhaustive handling can ``match exc.kind`` instead of
chaining ``isinstance`` checks.
"""

from __future__ import annotations

from enum import Enum
from typing import final


class ErrorKind(str, Enum):  # noqa: UP042
    """Closed set of lookup failure kinds."""

    TRANSPORT = "TRANSPORT"
    API = "API"


class RadioBrowserError(Exception):
    """Base exception for all station lookup errors.

    The ``__str__`` method prefixes the provider name in brackets for
    structured log output, e.g. ``[httpx] Connection refused``.
    """

    kind: ErrorKind

    def __init__(
        self,
        message: str = "Station lookup failed",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


@final
class TransportError(RadioBrowserError):
    """Raised when the HTTP exchange fails before a response is received.

    Covers unreachable hosts, DNS and TLS failures, transport-level
    timeouts and URLs that cannot be turned into a request.  The original
    transport exception is chained as ``__cause__``.
    """

    kind = ErrorKind.TRANSPORT

    def __init__(
        self,
        message: str = "HTTP request failed",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


@final
class ApiError(RadioBrowserError):
    """Raised when the directory service answers with something unusable.

    Either the status code was not 2xx (``message`` is the raw response
    body) or a 2xx body did not decode into a list of stations
    (``status_code`` is then the successful status and ``message``
    describes the decode failure).
    """

    kind = ErrorKind.API

    def __init__(
        self,
        message: str = "API error",
        provider_name: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
        self._status_code = status_code

    @property
    def status_code(self) -> int | None:
        return self._status_code


class ConfigurationError(Exception):
    """Raised when settings cannot be turned into a working client."""

    def __init__(self, message: str = "Invalid or missing configuration") -> None:
        self.message = message
        super().__init__(message)
