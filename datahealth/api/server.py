"""FastAPI server exposing the data health report."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from datahealth.api.routes import data_health_router
from datahealth.checks import CheckRegistry
from datahealth.config import Settings, settings
from datahealth.results import ResultStore

logger = logging.getLogger(__name__)


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Create the API application.

    The result store is built in the lifespan; a results folder that cannot
    be created aborts startup.
    """
    cfg = app_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.result_store = ResultStore(cfg.results_dir())

        registry = CheckRegistry(path=cfg.checks_file())
        registry.load()
        logger.info("Check registry loaded: %d checks", len(registry.checks))
        app.state.registry = registry

        yield

    app = FastAPI(
        title="Data Health Check Results",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(data_health_router, prefix="/api")
    return app
