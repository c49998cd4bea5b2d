"""
Main entrypoint for the Civic Pulse API.

This module assembles the FastAPI application, sets up logging, builds
the record store and includes versioned routers.  The ``create_app``
function builds and configures the app, which is then instantiated at
module import time as ``app``.  Run it with uvicorn, e.g.::

    uvicorn civic_pulse_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .services.seed import seed_storage
from .services.storage import MemStorage, Storage

logger = logging.getLogger(__name__)


def create_app(storage: Optional[Storage] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    storage : Optional[Storage]
        Store to serve.  When omitted, a new ``MemStorage`` is created
        and, if ``settings.seed_data`` is enabled, loaded with the demo
        dataset before the application is returned.  A failed seed
        raises ``SeedError`` and no application is created.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the seed step
    # below can log.
    setup_logging(settings.log_level, settings.log_file)

    if storage is None:
        storage = MemStorage()
        if settings.seed_data:
            seed_storage(storage)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.storage = storage

    app.include_router(v1_router, prefix="/api/v1")

    logger.info("%s %s ready", settings.project_name, settings.api_version)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
