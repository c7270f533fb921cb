"""API routes for the consolidated data health report.

Endpoints:
  GET    /api/data-health/latest                     — latest consolidated report
  GET    /api/data-health/checks                     — known checks
  DELETE /api/data-health/checks/{check_id}/results  — clear a check's last run
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Request

from datahealth.results import (
    ConsolidatedResult,
    CorruptResultsError,
    ResultsDeletionError,
    ResultsNotFoundError,
    clear_check_results,
)

logger = logging.getLogger(__name__)

data_health_router = APIRouter()


@data_health_router.get("/data-health/latest")
def latest_report(request: Request) -> dict[str, Any]:
    """Consolidated results of the most recent run."""
    store = request.app.state.result_store
    registry = request.app.state.registry

    try:
        consolidated = ConsolidatedResult.load_latest(store, registry.check_ids())
    except CorruptResultsError as e:
        logger.error("Cannot build latest report: %s", e)
        raise HTTPException(status_code=500, detail=str(e)) from e

    if consolidated is None:
        raise HTTPException(status_code=404, detail="No data health check results found")
    return consolidated.to_dict()


@data_health_router.get("/data-health/checks")
def list_checks(request: Request) -> dict[str, Any]:
    """Known checks and whether each has results on disk."""
    store = request.app.state.result_store
    registry = request.app.state.registry

    checks = registry.to_dict()
    for c in checks:
        c["has_results"] = store.exists(c["id"])
    return {"checks": checks}


@data_health_router.delete("/data-health/checks/{check_id}/results")
def clear_results(check_id: str, request: Request) -> dict[str, Any]:
    """Delete the stored results of one check."""
    store = request.app.state.result_store
    try:
        clear_check_results(store, check_id)
    except ResultsNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except ResultsDeletionError as e:
        logger.error("Clear failed for %s: %s", check_id, e)
        raise HTTPException(status_code=500, detail=str(e)) from e
    return {"check_id": check_id, "cleared": True}
