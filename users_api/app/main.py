"""
Main entrypoint for the Users API.

This module assembles the FastAPI application, sets up logging, builds
the user store and includes versioned routers.  The ``create_app``
function builds and configures the app, which is then instantiated at
module import time as ``app``, e.g.::

    uvicorn users_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

from typing import Optional

from fastapi import FastAPI

from .api.error_handlers import register_error_handlers
from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .stores import UserStore, build_user_store


def create_app(store: Optional[UserStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[UserStore]
        Store to serve users from.  When omitted, the store named by
        ``settings.user_store`` is built (and seeded if configured).

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that store construction below can log.
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.user_store = store if store is not None else build_user_store(settings)

    register_error_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
