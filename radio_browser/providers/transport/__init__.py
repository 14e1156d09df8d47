"""HTTP transport providers.

HttpxTransport is the default network adapter used by RadioBrowserClient.
"""

from radio_browser.providers.transport.httpx_transport import HttpxTransport

__all__ = ["HttpxTransport"]
