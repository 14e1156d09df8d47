"""Abstract base class for station-list cache providers.

Defines the contract the lookup client uses to avoid repeat requests to
the directory service.  Implementations may keep entries in process
memory, drop them entirely, or forward them to a shared store; the client
never depends on a concrete backend.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from radio_browser.models.station import RadioStation


class ICacheProvider(ABC):
    """Contract for key-value caches of station lists.

    Operations are async so network-backed stores can be plugged in
    without blocking the event loop.  Both must be safe to call from many
    concurrent lookups.  Neither raises: a missing key is reported as
    ``None``, not as an error.
    """

    @abstractmethod
    async def get(self, key: str) -> list[RadioStation] | None:
        """Retrieve the station list stored under *key*.

        Parameters
        ----------
        key:
            The cache key to look up.

        Returns
        -------
        list[RadioStation] or None
            The cached list (possibly empty) if present; ``None`` otherwise.
            Stores with a recency policy treat a hit as an access.
        """

    @abstractmethod
    async def set(self, key: str, value: list[RadioStation]) -> None:
        """Store *value* under *key*, replacing any previous entry.

        Parameters
        ----------
        key:
            The cache key.
        value:
            The ordered station list.  Stores must keep the order as given.
        """
