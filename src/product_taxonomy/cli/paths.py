from __future__ import annotations

"""Utilities for resolving taxonomy data paths."""

from pathlib import Path


def data_path(path: str | None) -> str:
    return path or str(Path.cwd() / "data")


__all__ = ["data_path"]
