"""
Input Validators

This module provides the two parsing steps of a redirect lookup:
- Extracting the lookup key (request path) from an incoming request
- Validating a stored redirect target as an absolute URL

Lookup keys are exact-match: beyond what URL parsing itself does, the path
gets no trailing-slash stripping, case-folding or percent-decoding.
"""

from typing import Any, Mapping

from pydantic import AnyUrl, TypeAdapter, ValidationError

from redirector.core.exceptions import InvalidTargetURLError

# AnyUrl accepts any scheme and requires an absolute URL (no relative refs)
_url_adapter = TypeAdapter(AnyUrl)

# Placeholder origin so a bare request path can be parsed as a URL
_PATH_BASE_URL = "http://localhost"


def extract_request_path(scope: Mapping[str, Any]) -> str:
    """
    Extract the path component of the request URL.

    Prefers the ASGI ``raw_path`` (the bytes sent on the wire) and falls back
    to the decoded ``path`` when the server does not provide it. The path is
    then run through the URL parser, which percent-encodes non-ASCII
    characters and resolves "." and ".." segments. Existing percent-encoded
    sequences, case and trailing slashes are kept as-is.

    Args:
        scope: ASGI connection scope

    Returns:
        The request path without query string or fragment
    """
    raw_path = scope.get("raw_path")
    if raw_path:
        # Some servers include the query string in raw_path
        path = raw_path.split(b"?", 1)[0].decode("utf-8", "replace")
    else:
        path = scope.get("path") or "/"

    if not path.startswith("/"):
        path = "/" + path

    try:
        url = _url_adapter.validate_python(_PATH_BASE_URL + path)
    except ValidationError:
        return path
    return url.path or "/"


def parse_target_url(value: str) -> str:
    """
    Parse a stored redirect target and return its canonical form.

    Args:
        value: The stored target URL string

    Returns:
        The re-serialized absolute URL (e.g. "https://example.com" -> "https://example.com/")

    Raises:
        InvalidTargetURLError: If the value is not an absolute URL
    """
    try:
        url = _url_adapter.validate_python(value)
    except ValidationError as e:
        errors = e.errors()
        reason = errors[0]["msg"] if errors else "Invalid URL format"
        raise InvalidTargetURLError(value, reason) from e

    return str(url)
