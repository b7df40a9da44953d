"""FastAPI application factory."""

from fastapi import FastAPI

from mega import __version__


def create_app() -> FastAPI:
    """Build the ASGI application.

    No routes are mounted; the OpenAPI and docs endpoints are disabled too.
    """
    return FastAPI(
        title="mega",
        version=__version__,
        openapi_url=None,
        docs_url=None,
        redoc_url=None,
    )
