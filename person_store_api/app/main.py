"""
Main entrypoint for the PersonStore API.

This module assembles the FastAPI application, sets up logging,
creates the in‑memory repository and includes the API router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn,
e.g.::

    uvicorn person_store_api.app.main:app --port 3000

or via ``run.py`` at the repository root, which honours ``PORT``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.exceptions import PersonStoreError
from .core.logging_config import setup_logging
from .core.repository import PersonRepository, sample_person
from .services.person_service import PersonService

logger = logging.getLogger(__name__)


async def person_store_error_handler(request: Request, exc: PersonStoreError) -> PlainTextResponse:
    """Translate a service error into its status code and plain‑text message."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return PlainTextResponse(exc.message, status_code=exc.status_code)


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[PersonRepository] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module level settings
        read from the environment.
    repository : Optional[PersonRepository]
        Store to serve.  A fresh one is created when omitted, seeded
        with a sample person if ``settings.seed_sample_person`` is set.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    if repository is None:
        repository = PersonRepository([sample_person()] if settings.seed_sample_person else None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.person_service = PersonService(repository)

    app.add_exception_handler(PersonStoreError, person_store_error_handler)
    app.include_router(router)

    logger.info("PersonStore ready with %d stored people", len(repository))
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
