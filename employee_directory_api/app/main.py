"""
Main entrypoint for the Employee Directory API.

This module assembles the FastAPI application: it sets up logging,
builds the upstream client and directory service, registers the
failure translators and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn employee_directory_api.app.main:app --reload
"""

from typing import Dict, Optional

from fastapi import FastAPI

from .core.config import Settings, UpstreamConfig, settings as default_settings
from .core.exception_handlers import register_exception_handlers
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .services.employee_service import EmployeeService
from .services.upstream_client import EmployeeUpstreamClient


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to build the app from.  Defaults to the settings read
        from the environment at import time.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings

    # Initialise logging before anything else so that the modules below
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    client = EmployeeUpstreamClient(UpstreamConfig.from_settings(settings))
    app.state.employee_service = EmployeeService(client)

    register_exception_handlers(app)
    app.include_router(v1_router, prefix="/api/v1")

    @app.get("/health", tags=["health"])
    def health() -> Dict[str, str]:
        return {"status": "ok"}

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
