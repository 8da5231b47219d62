from __future__ import annotations

"""Helpers for reading YAML scalars as text."""

from typing import Any


def scalar_to_str(value: Any) -> Any:
    # YAML 1.1 reads names such as "1984" as numbers and "Yes"/"Off" as booleans
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, (int, float)):
        return str(value)
    return value


__all__ = ["scalar_to_str"]
