"""FastAPI application factory for the ETS CSV export service.

Creates the app with the export router mounted and the merged
configuration stored on app.state.
"""

import logging

from fastapi import FastAPI

from .models import HealthResponse
from .routes_export import router as export_router

logger = logging.getLogger("etscsv.api")

VERSION = "1.0.0"


def create_app(config: dict | None = None) -> FastAPI:
    """Create the FastAPI application with all routes.

    Args:
        config: Configuration as returned by etscsv.load_config; missing
            keys fall back to the defaults.
    """
    from etscsv import merge_config

    app = FastAPI(
        title="ETS CSV Export",
        description="Exports KNX group address overviews as ETS-importable CSV",
        version=VERSION,
    )

    app.state.config = merge_config(config)

    app.include_router(export_router)

    # Set app reference on routers (needed for app.state access)
    export_router.app = app

    @app.get("/api/v1/health", tags=["system"], response_model=HealthResponse)
    def health():
        """Health check."""
        return HealthResponse(status="ok", version=VERSION)

    logger.info("FastAPI app created")
    return app
