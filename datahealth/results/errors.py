"""Exceptions raised by the data health results store."""

from __future__ import annotations


class ResultsError(Exception):
    """Base class for result persistence failures."""


class ResultsFolderError(ResultsError):
    """The results folder could not be created. The store is unusable."""


class CorruptResultsError(ResultsError):
    """A results file exists but does not hold a valid record."""


class ResultsNotFoundError(ResultsError, ValueError):
    """No results file exists for the requested check."""


class ResultsDeletionError(ResultsError, RuntimeError):
    """A results file exists but could not be removed."""


class InvalidCheckIdError(ResultsError, ValueError):
    """The check id cannot be mapped to a file inside the results folder."""
