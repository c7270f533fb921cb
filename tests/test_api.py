"""Tests for the FastAPI routes."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml
from fastapi.testclient import TestClient

from datahealth.api.server import create_app
from datahealth.config import Settings
from datahealth.results import DataCheckResult, ResultsFolderError, ResultStore


@pytest.fixture
def app_settings(tmp_path: Path) -> Settings:
    checks_file = tmp_path / "checks.yaml"
    checks_file.write_text(
        yaml.dump({"checks": [{"id": "vin_format"}, {"id": "duplicate_vin"}]}),
        encoding="utf-8",
    )
    return Settings(
        data_healthcheck_results_folder=str(tmp_path / "results"),
        data_healthcheck_checks_file=str(checks_file),
    )


@pytest.fixture
def client(app_settings: Settings) -> Generator[TestClient, None, None]:
    with TestClient(create_app(app_settings)) as c:
        yield c


@pytest.fixture
def results_store(app_settings: Settings) -> ResultStore:
    return ResultStore(app_settings.results_dir())


class TestLatest:
    def test_no_results(self, client: TestClient) -> None:
        resp = client.get("/api/data-health/latest")
        assert resp.status_code == 404

    def test_report(self, client: TestClient, results_store: ResultStore) -> None:
        results_store.save(DataCheckResult(check_id="vin_format", end_time=100, success=True))
        results_store.save(DataCheckResult(
            check_id="duplicate_vin", end_time=200, success=False,
            failure_message="3 duplicates found",
        ))
        resp = client.get("/api/data-health/latest")
        assert resp.status_code == 200
        data = resp.json()
        assert data["overall_success"] is False
        assert data["run_end_time"] == 200
        assert data["failure_message"] == "3 duplicates found"
        assert set(data["checks"]) == {"vin_format", "duplicate_vin"}

    def test_corrupt(self, client: TestClient, results_store: ResultStore) -> None:
        results_store.path_for("vin_format").write_text("nope", encoding="utf-8")
        resp = client.get("/api/data-health/latest")
        assert resp.status_code == 500


class TestChecks:
    def test_list(self, client: TestClient, results_store: ResultStore) -> None:
        results_store.save(DataCheckResult(check_id="vin_format", end_time=1, success=True))
        resp = client.get("/api/data-health/checks")
        assert resp.status_code == 200
        checks = {c["id"]: c for c in resp.json()["checks"]}
        assert checks["vin_format"]["has_results"] is True
        assert checks["duplicate_vin"]["has_results"] is False


class TestClear:
    def test_clear(self, client: TestClient, results_store: ResultStore) -> None:
        results_store.save(DataCheckResult(check_id="vin_format", end_time=1, success=True))
        resp = client.delete("/api/data-health/checks/vin_format/results")
        assert resp.status_code == 200
        assert resp.json() == {"check_id": "vin_format", "cleared": True}
        assert not results_store.exists("vin_format")

    def test_clear_missing(self, client: TestClient) -> None:
        resp = client.delete("/api/data-health/checks/vin_format/results")
        assert resp.status_code == 404

    def test_clear_fails(self, client: TestClient, results_store: ResultStore) -> None:
        results_store.save(DataCheckResult(check_id="vin_format", end_time=1, success=True))
        with patch.object(Path, "unlink", side_effect=PermissionError("read-only")):
            resp = client.delete("/api/data-health/checks/vin_format/results")
        assert resp.status_code == 500


class TestStartup:
    def test_bad_results_folder_aborts(self, tmp_path: Path) -> None:
        blocker = tmp_path / "file"
        blocker.write_text("x")
        cfg = Settings(data_healthcheck_results_folder=str(blocker / "results"))
        with pytest.raises(ResultsFolderError):
            with TestClient(create_app(cfg)):
                pass
