"""HTTP client factory combining the TLS policy into one reusable transport."""

import httpx

from tlsrequests.settings import TLSSettings
from tlsrequests.tls import build_ssl_context
from tlsrequests.version import __version__

DEFAULT_USER_AGENT = f"tlsrequests/{__version__}"


def create_http_client(settings: TLSSettings) -> httpx.Client:
    """
    Build a Client configured with the TLS policy from ``settings``.

    Connection pooling and redirects stay at httpx defaults.
    """
    return httpx.Client(
        verify=build_ssl_context(settings),
        timeout=settings.timeout,
        headers={"User-Agent": DEFAULT_USER_AGENT},
    )
