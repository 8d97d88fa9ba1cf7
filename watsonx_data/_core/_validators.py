"""Validation helpers used by the client methods."""

from __future__ import annotations

from typing import Any, Mapping, Sequence


def require_non_empty(mapping: Mapping[str, Any], keys: Sequence[str]) -> None:
    """Raise ``ValueError`` if any of *keys* are missing or empty in *mapping*."""
    missing = [k for k in keys if mapping.get(k) is None or mapping.get(k) == ""]
    if missing:
        raise ValueError(f"Missing required parameters: {', '.join(missing)}")
