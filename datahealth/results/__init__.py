"""Data health results — per-check records, file store, consolidated report."""

from .consolidated import ConsolidatedResult, clear_check_results
from .errors import (
    CorruptResultsError,
    InvalidCheckIdError,
    ResultsDeletionError,
    ResultsError,
    ResultsFolderError,
    ResultsNotFoundError,
)
from .models import DataCheckResult
from .store import ResultStore
