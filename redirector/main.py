"""
FastAPI Application Entry Point

This module initializes the FastAPI application and configures:
- The catch-all redirect route
- Middleware (request logging)
- Exception handlers rendering HTML error pages

Design Decisions:
- Docs, OpenAPI and health routes are disabled: every path is a lookup key
- Framework errors and unexpected exceptions use the same HTML error page as
  resolver errors, so clients never see JSON error bodies or tracebacks

Run with:
    uvicorn redirector.main:app
"""

import logging

from fastapi import FastAPI, Request, status
from starlette.exceptions import HTTPException as StarletteHTTPException

from redirector.api import endpoints
from redirector.api.errors import render_error_response
from redirector.core.setting import effective_redirect_status_code, settings
from redirector.db.session import dispose_engine
from redirector.middleware.logging import add_logging_middleware, configure_logging

logger = logging.getLogger("redirector")

configure_logging(settings.LOG_LEVEL)

app = FastAPI(
    title="HTTP Redirect Resolver",
    description="Redirects request paths to target URLs stored in a key-value mapping",
    version="1.0.0",
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

add_logging_middleware(app)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render router-level errors (e.g. unsupported methods) as HTML error pages."""
    return render_error_response(exc.status_code)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error while processing {request.method} {request.url.path}")
    return render_error_response(status.HTTP_500_INTERNAL_SERVER_ERROR)


app.include_router(endpoints.router)


@app.on_event("startup")
async def startup_event():
    """Log the effective configuration on startup."""
    logger.info(
        f"Redirect resolver started (store={settings.REDIRECT_STORE.value}, "
        f"redirect status code={effective_redirect_status_code(settings.REDIRECT_STATUS_CODE)})"
    )


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown."""
    await dispose_engine()
