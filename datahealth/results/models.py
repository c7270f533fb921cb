"""Pydantic model for the outcome of one data check across all vehicles."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

SCHEMA_VERSION = 1


class DataCheckResult(BaseModel):
    """Result of a single check run over every vehicle.

    Only the aggregate outcome is kept. ``failure_message`` is empty when
    ``success`` is true.
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: Literal[1] = SCHEMA_VERSION
    check_id: str
    end_time: int  # epoch millis
    success: bool
    failure_message: str = ""
