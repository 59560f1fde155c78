"""
Main entrypoint for the Voting API.

This module assembles the FastAPI application: it sets up logging,
creates the composition root holding the in‑memory stores, registers
the error handlers and includes the versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn voting_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.container import Container
from .core.errors import ValidationError, VotingError, collect_field_errors
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, container: Optional[Container] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use; defaults to the ones read from the environment.
    container : Optional[Container]
        Stores and services to serve; a fresh, empty container is
        created when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings)

    # API documentation is only published in debug mode.
    docs_kwargs = {} if settings.debug else {"docs_url": None, "redoc_url": None, "openapi_url": None}
    app = FastAPI(title=settings.project_name, version=settings.api_version, **docs_kwargs)
    app.state.settings = settings
    app.state.container = container or Container()

    @app.exception_handler(VotingError)
    async def voting_error_handler(request: Request, exc: VotingError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        error = ValidationError(collect_field_errors(exc.errors()))
        logger.info("Rejected %s %s: %s", request.method, request.url.path, error.errors)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error.to_dict())

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        container: Container = app.state.container
        return {
            "status": "ok",
            "candidates": len(container.candidates.get_all()),
            "votes": len(container.votes.get_all()),
        }

    app.include_router(v1_router, prefix=settings.api_prefix)
    logger.debug("Routes mounted under %s", settings.api_prefix)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
