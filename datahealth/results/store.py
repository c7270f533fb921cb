"""File-backed storage for data check results.

One JSON file per check, named ``{check_id}_Results.ser`` inside the
configured results folder. Writes go through a temp file and ``os.replace``
so a reader never sees a half-written record.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from .errors import (
    CorruptResultsError,
    InvalidCheckIdError,
    ResultsDeletionError,
    ResultsFolderError,
    ResultsNotFoundError,
)
from .models import DataCheckResult

logger = logging.getLogger(__name__)

RESULTS_SUFFIX = "_Results.ser"


class ResultStore:
    """Persists one ``DataCheckResult`` per check id."""

    def __init__(self, results_dir: Path | str = ".") -> None:
        self._dir = Path(results_dir)
        try:
            self._dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("Error occurred while trying to create the folder: %s", self._dir)
            raise ResultsFolderError(
                f"Unable to create folder {self._dir} for storing data health check results"
            ) from e
        # mkstemp creates 0600 files; saved results follow the umask instead
        umask = os.umask(0)
        os.umask(umask)
        self._file_mode = 0o666 & ~umask
        logger.info("Using folder %s for storing data health check results", self._dir)

    @property
    def results_dir(self) -> Path:
        return self._dir

    def path_for(self, check_id: str) -> Path:
        """Where the results of ``check_id`` live on disk.

        Raises ``InvalidCheckIdError`` for ids that are empty or contain a
        path separator.
        """
        if not check_id or "/" in check_id or os.sep in check_id or (
            os.altsep and os.altsep in check_id
        ):
            raise InvalidCheckIdError(f"Invalid data check id: {check_id!r}")
        return self._dir / f"{check_id}{RESULTS_SUFFIX}"

    def exists(self, check_id: str) -> bool:
        return self.path_for(check_id).is_file()

    # ── Read / write ─────────────────────────────────────────────────────

    def save(self, result: DataCheckResult) -> Path:
        """Write ``result`` atomically, replacing any earlier file.

        Raises ``OSError`` on I/O failure; the temp file is cleaned up.
        """
        path = self.path_for(result.check_id)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{result.check_id}.", suffix=".tmp", dir=self._dir,
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                os.fchmod(fh.fileno(), self._file_mode)
                fh.write(result.model_dump_json())
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, path)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
            raise
        logger.debug("Saved results for %s to %s", result.check_id, path)
        return path

    def load_if_present(self, path: Path | str) -> DataCheckResult | None:
        """Load the record at ``path``, or ``None`` if there is no file.

        A file that exists but cannot be parsed raises ``CorruptResultsError``.
        """
        path = Path(path)
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Could not read results file %s: %s", path, e)
            raise CorruptResultsError(f"Unreadable results file: {path}") from e

        try:
            return DataCheckResult.model_validate_json(raw)
        except ValidationError as e:
            logger.error("Corrupt results file %s", path)
            raise CorruptResultsError(f"Corrupt results file: {path}") from e

    def load(self, check_id: str) -> DataCheckResult | None:
        return self.load_if_present(self.path_for(check_id))

    def delete(self, check_id: str) -> None:
        """Remove the results file for ``check_id``.

        Raises ``ResultsNotFoundError`` if there is nothing to delete and
        ``ResultsDeletionError`` if the file could not be removed.
        """
        path = self.path_for(check_id)
        if not path.is_file():
            raise ResultsNotFoundError(f"No results found for data check with id: {check_id}")
        try:
            path.unlink()
        except FileNotFoundError as e:
            raise ResultsNotFoundError(
                f"No results found for data check with id: {check_id}"
            ) from e
        except OSError as e:
            raise ResultsDeletionError(
                f"Unable to delete results file for data check with id: {check_id}"
            ) from e
