"""
Redirect Service

This service turns one inbound request (method + path) into one Resolution:
either a redirect to a target URL or an error status.

Checks run in order and stop at the first failure:
1. Method must be GET (405 otherwise)
2. Path is looked up in the store (500 on store failure, 404 when missing)
3. Stored value must be an absolute URL (500 otherwise)
4. Redirect to the canonical target URL with the configured status code

The service is framework-independent: the API layer renders the Resolution
into an HTTP response. It keeps no state between calls.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import status

from redirector.core.exceptions import InvalidTargetURLError
from redirector.core.validators import parse_target_url
from redirector.services.redirect_store import LookupOutcome, RedirectStore

logger = logging.getLogger("redirector")


@dataclass(frozen=True)
class Resolution:
    """
    Outcome of resolving a request.

    location is set only for redirects; error resolutions carry just the
    status code.
    """
    status_code: int
    location: Optional[str] = None

    @property
    def is_redirect(self) -> bool:
        return self.location is not None

    @classmethod
    def error(cls, status_code: int) -> "Resolution":
        return cls(status_code=status_code)


class RedirectService:
    """
    Service for resolving request paths to redirects.
    """

    def __init__(self, store: RedirectStore, redirect_status_code: int):
        """
        Initialize the redirect service.

        Args:
            store: Key-value store holding path -> target URL mappings
            redirect_status_code: Status code used for successful redirects
        """
        self.store = store
        self.redirect_status_code = redirect_status_code

    async def resolve(self, method: str, path: str) -> Resolution:
        """
        Resolve a request to a redirect or an error status.

        Args:
            method: HTTP request method
            path: Request path, used verbatim as the lookup key

        Returns:
            Resolution for the request
        """
        if method != "GET":
            return Resolution.error(status.HTTP_405_METHOD_NOT_ALLOWED)

        result = await self.store.lookup(path)

        if result.outcome is LookupOutcome.FAILED:
            logger.error(
                f'Retrieving path "{path}" from the redirect store returned an error: {result.error}'
            )
            return Resolution.error(status.HTTP_500_INTERNAL_SERVER_ERROR)

        if result.outcome is LookupOutcome.MISSING:
            return Resolution.error(status.HTTP_404_NOT_FOUND)

        try:
            target_url = parse_target_url(result.value)
        except InvalidTargetURLError as e:
            logger.error(f'Target URL for path "{path}" is not a valid URL: {e}')
            return Resolution.error(status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Resolution(status_code=self.redirect_status_code, location=target_url)
