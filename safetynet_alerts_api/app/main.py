"""
Main entrypoint for the SafetyNet Alerts API.

This module assembles the FastAPI application, sets up logging,
registers the exception handlers and includes the routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn safetynet_alerts_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

from fastapi import FastAPI

from .api.router import router
from .core.config import settings
from .core.exceptions import register_exception_handlers
from .core.logging_config import setup_logging
from .core.store import init_store


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that startup
    # messages are emitted with the configured format.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    register_exception_handlers(app)
    app.include_router(router)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Fail fast on a missing or malformed data document.
        init_store()

    return app


app = create_app()
