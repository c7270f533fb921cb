from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Central configuration loaded from environment / .env file."""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    # Folder holding one {check_id}_Results.ser file per check
    data_healthcheck_results_folder: str = "."

    # Known checks (absolute or relative to CWD)
    data_healthcheck_checks_file: str = "checks.yaml"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Logging
    log_level: str = "INFO"

    def results_dir(self) -> Path:
        return Path(self.data_healthcheck_results_folder)

    def checks_file(self) -> Path:
        return Path(self.data_healthcheck_checks_file)


settings = Settings()
