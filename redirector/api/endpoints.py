"""
FastAPI Endpoints for the Redirect Resolver

This module defines the single catch-all route. Every path is a potential
lookup key, so the service exposes no other routes (no docs, no health).

The endpoint only:
- Extracts the raw request path
- Delegates resolution to RedirectService
- Renders the Resolution as a redirect or an HTML error page
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse, Response

from redirector.api.dependencies import get_redirect_service
from redirector.api.errors import render_error_response
from redirector.core.validators import extract_request_path
from redirector.services.redirect_service import RedirectService

router = APIRouter()

# Methods routed to the resolver; non-GET ones are answered with 405 there.
# Anything else is rejected by the router and rendered by the app's
# HTTPException handler.
ROUTED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route(
    "/{path:path}",
    methods=ROUTED_METHODS,
    include_in_schema=False,
)
async def resolve_redirect(
    request: Request,
    redirect_service: RedirectService = Depends(get_redirect_service),
) -> Response:
    """
    Redirect to the target URL stored for the request path.

    Returns:
        RedirectResponse with the configured status code (302 by default)
        or an HTML error page (404, 405 or 500)
    """
    request_path = extract_request_path(request.scope)

    resolution = await redirect_service.resolve(request.method, request_path)

    if not resolution.is_redirect:
        return render_error_response(resolution.status_code)

    return RedirectResponse(
        url=resolution.location,
        status_code=resolution.status_code
    )
