"""
HTML Error Pages

Every error this service returns is a small, fixed HTML document whose title
and heading are "<code> <reason phrase>". Only the codes the resolver can
produce have a reason phrase; any other code renders the bare number.
"""

from fastapi import status
from fastapi.responses import HTMLResponse

REASON_PHRASES = {
    status.HTTP_404_NOT_FOUND: "Not Found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "Method Not Allowed",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "Internal Server Error",
}

ERROR_PAGE_TEMPLATE = """\
<!doctype html>
<html lang="en">
  <head><title>{title}</title></head>
  <body><h1>{title}</h1></body>
</html>
"""


def render_error_body(status_code: int) -> str:
    """
    Render the HTML document for an error status code.

    Args:
        status_code: HTTP status code

    Returns:
        HTML document, e.g. with title and heading "404 Not Found"
    """
    reason = REASON_PHRASES.get(status_code, "")
    title = f"{status_code} {reason}".rstrip()
    return ERROR_PAGE_TEMPLATE.format(title=title)


def render_error_response(status_code: int) -> HTMLResponse:
    """Build an HTML error response (Content-Type: text/html) for a status code."""
    return HTMLResponse(
        content=render_error_body(status_code),
        status_code=status_code,
        media_type="text/html",
    )
