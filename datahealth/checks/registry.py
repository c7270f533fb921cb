"""Check registry — loads checks.yaml and provides typed check definitions.

The results loader asks this registry which check ids exist so it knows
which result files to look for.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

REGISTRY_PATH = Path("checks.yaml")


@dataclass
class CheckDef:
    """Definition of a single data check run against every vehicle."""

    id: str
    name: str = ""
    description: str = ""
    enabled: bool = True

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class CheckRegistry:
    """Loads and caches check definitions from checks.yaml."""

    def __init__(self, path: Path | str | None = None) -> None:
        self._path = Path(path) if path else REGISTRY_PATH
        self._checks: list[CheckDef] = []
        self._loaded = False

    def load(self, force: bool = False) -> list[CheckDef]:
        """Parse the registry file and return the check list."""
        if self._loaded and not force:
            return self._checks

        self._checks = []
        self._loaded = True
        if not self._path.exists():
            logger.warning("Check registry file not found: %s", self._path)
            return self._checks

        try:
            raw = yaml.safe_load(self._path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            logger.error("Failed to parse %s: %s", self._path, e)
            return self._checks

        seen: set[str] = set()
        for entry in raw.get("checks") or []:
            try:
                check = _parse_check(entry)
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("Skipping malformed check entry: %s", e)
                continue
            if check.id in seen:
                logger.warning("Skipping duplicate check id: %s", check.id)
                continue
            seen.add(check.id)
            self._checks.append(check)

        logger.info("Loaded %d checks from registry", len(self._checks))
        return self._checks

    def reload(self) -> list[CheckDef]:
        """Force reload from disk."""
        return self.load(force=True)

    @property
    def checks(self) -> list[CheckDef]:
        return self.load()

    def get(self, check_id: str) -> CheckDef | None:
        return next((c for c in self.checks if c.id == check_id), None)

    def check_ids(self) -> list[str]:
        """Ids of every known check, enabled or not."""
        return [c.id for c in self.checks]

    def register(self, check: CheckDef) -> CheckDef:
        """Add a check definition in memory. Raises ``ValueError`` on duplicates."""
        if not check.id:
            raise ValueError("Check 'id' is required")
        if self.get(check.id):
            raise ValueError(f"Check '{check.id}' already registered")
        self._checks.append(check)
        return check

    def to_dict(self) -> list[dict[str, Any]]:
        return [c.to_dict() for c in self.checks]


def _parse_check(raw: dict[str, Any]) -> CheckDef:
    check_id = str(raw["id"]).strip()
    if not check_id:
        raise ValueError("empty check id")
    if "/" in check_id or "\\" in check_id:
        raise ValueError(f"path separator in check id: {check_id}")
    return CheckDef(
        id=check_id,
        name=raw.get("name", check_id),
        description=raw.get("description", ""),
        enabled=bool(raw.get("enabled", True)),
    )
