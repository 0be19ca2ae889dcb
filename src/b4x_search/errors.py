from __future__ import annotations


class FetchError(Exception):
    """Base class for failures raised while fetching a URL."""


class TransportError(FetchError):
    """Connection-level failure (DNS, refused connection, TLS, reset)."""


class FetchTimeoutError(FetchError):
    """No response arrived within the request timeout."""


class RedirectLimitError(FetchError):
    """The redirect chain exceeded the configured maximum."""
