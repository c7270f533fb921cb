"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from datahealth.results import DataCheckResult, ResultStore


@pytest.fixture
def store(tmp_path: Path) -> ResultStore:
    """ResultStore backed by an isolated temp folder."""
    return ResultStore(tmp_path / "results")


@pytest.fixture
def make_result() -> Callable[..., DataCheckResult]:
    def _make(
        check_id: str, success: bool = True, end_time: int = 100, failure_message: str = "",
    ) -> DataCheckResult:
        return DataCheckResult(
            check_id=check_id, end_time=end_time, success=success,
            failure_message=failure_message,
        )
    return _make
