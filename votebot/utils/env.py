"""Environment parsing helpers for consistent boolean/list handling."""
from __future__ import annotations

import os
from typing import List


def get_bool(name: str, default: bool = False) -> bool:
    """Parse a boolean env var with common truthy values."""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def get_list(name: str, default: List[str]) -> List[str]:
    """Parse a comma-separated env var, dropping empty entries."""
    raw = os.getenv(name)
    if raw is None:
        return list(default)
    items = [item.strip() for item in raw.split(",")]
    return [item for item in items if item] or list(default)
