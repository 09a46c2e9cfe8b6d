"""Error taxonomy for the content client.

Only a non-2xx response from WordPress is classified.  Transport failures
(``httpx.TransportError``) and decode failures (``ValueError`` from JSON,
``pydantic.ValidationError``) reach the caller untouched.
"""

from __future__ import annotations


class PortfolioContentError(RuntimeError):
    """Base class for errors raised by this package."""


class RemoteRequestError(PortfolioContentError):
    """Raised when the WordPress REST API answers with a non-success status."""

    def __init__(self, status_code: int, endpoint: str) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(f"WP API Error {status_code}: {endpoint}")


class UnknownLocaleError(PortfolioContentError, LookupError):
    """Raised when no i18n catalog exists for the requested locale."""

    def __init__(self, locale: str) -> None:
        self.locale = locale
        super().__init__(f"no i18n catalog for locale {locale!r}")
