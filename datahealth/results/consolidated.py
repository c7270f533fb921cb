"""Consolidated results of all data checks for all vehicles.

Only failures are reported in detail. Each check's results are persisted to
its own file by ``ResultStore`` so the latest run survives a restart and can
be rebuilt with ``ConsolidatedResult.load_latest``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from .errors import InvalidCheckIdError
from .models import DataCheckResult
from .store import ResultStore

logger = logging.getLogger(__name__)


class ConsolidatedResult:
    """Results of every check in one run, keyed by check id.

    ``overall_success`` and ``run_end_time`` are snapshots. They are filled in
    by ``load_latest`` or by the caller (see ``compute_overall_success``) and
    are not updated when entries are added.
    """

    def __init__(self) -> None:
        self.checks: dict[str, DataCheckResult] = {}
        self.overall_success: bool = False
        self.run_end_time: int = 0

    def store_check_results(self, check_id: str, result: DataCheckResult) -> None:
        """Record (or replace) the results for ``check_id``."""
        self.checks[check_id] = result

    def compute_overall_success(self) -> bool:
        """Derive ``overall_success`` from the current entries and cache it."""
        self.overall_success = all(r.success for r in self.checks.values())
        return self.overall_success

    def failure_message(self) -> str:
        """Failure messages of every failed check, joined with ``;``.

        Empty if no check failed. Order follows the mapping's iteration order.
        Empty messages add no separator.
        """
        return ";".join(
            r.failure_message for r in self.checks.values()
            if not r.success and r.failure_message
        )

    def persist(self, store: ResultStore) -> list[str]:
        """Save each check's results to its own file.

        A failed save is logged and skipped. Returns the ids that failed.
        """
        failed = []
        for check_id, result in self.checks.items():
            try:
                store.save(result)
            except (OSError, InvalidCheckIdError):
                logger.exception("Error while persisting results for check: %s", result.check_id)
                failed.append(check_id)
        return failed

    @classmethod
    def load_latest(
        cls, store: ResultStore, check_ids: Iterable[str],
    ) -> ConsolidatedResult | None:
        """Rebuild the latest run from the files of the known checks.

        Checks without a file are left out. Returns ``None`` when no known
        check has a file. A corrupt file raises ``CorruptResultsError``.
        """
        consolidated = cls()
        any_found = False
        overall_success = True
        max_end_time = 0

        for check_id in check_ids:
            result = store.load_if_present(store.path_for(check_id))
            if result is None:
                continue
            any_found = True
            consolidated.store_check_results(check_id, result)
            overall_success = overall_success and result.success
            if result.end_time > max_end_time:
                max_end_time = result.end_time

        if not any_found:
            return None

        consolidated.overall_success = overall_success
        consolidated.run_end_time = max_end_time
        logger.debug(
            "Loaded latest results for %d checks (success=%s)",
            len(consolidated.checks), overall_success,
        )
        return consolidated

    def to_dict(self) -> dict[str, Any]:
        """Serialize the report for the API and CLI."""
        return {
            "overall_success": self.overall_success,
            "run_end_time": self.run_end_time,
            "failure_message": self.failure_message(),
            "checks": {
                check_id: r.model_dump(exclude={"schema_version"})
                for check_id, r in sorted(self.checks.items())
            },
        }


def clear_check_results(store: ResultStore, check_id: str) -> None:
    """Remove the last run's results for ``check_id`` entirely.

    Raises ``ResultsNotFoundError`` or ``ResultsDeletionError``.
    """
    store.delete(check_id)
    logger.info("Cleared results for data check %s", check_id)
