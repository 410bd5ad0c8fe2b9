"""
Custom Exceptions

This module defines custom exceptions for the redirect resolver.

Each exception corresponds to one failure class of a redirect lookup:
- StoreError: the key-value store could not answer (upstream failure)
- InvalidTargetURLError: the stored value is not an absolute URL (bad data)

Both are surfaced to clients as an opaque 500 page and logged server-side.
"""


class RedirectResolverException(Exception):
    """Base exception for the redirect resolver."""
    pass


class StoreError(RedirectResolverException):
    """Raised when the redirect store fails to answer a lookup."""

    def __init__(self, key: str, original_error: Exception = None):
        self.key = key
        self.original_error = original_error
        message = f"Lookup of '{key}' failed"
        if original_error is not None:
            message = f"{message}: {original_error}"
        super().__init__(message)


class InvalidTargetURLError(RedirectResolverException):
    """Raised when a stored redirect target is not a valid absolute URL."""

    def __init__(self, url: str, reason: str = "Invalid URL format"):
        self.url = url
        self.reason = reason
        super().__init__(f"{reason}: {url!r}")
