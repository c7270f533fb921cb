"""Check registry — the set of known data check ids."""

from .registry import CheckDef, CheckRegistry
