from __future__ import annotations

"""Shared loader error utilities."""

import os

from pydantic import ValidationError

from product_taxonomy.core.errors import TaxonomyValidationError, summarize_validation_errors


class LoaderError(RuntimeError):
    """Wraps loader failures with file path context."""

    def __init__(self, file_path: str, message: str, *, cause: Exception | None = None):
        self.file_path = file_path
        self.message = message
        self.cause = cause
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        path = self._relative_path(self.file_path)
        base = f"{self.message} ({path})"
        if isinstance(self.cause, ValidationError):
            return f"{base}: {summarize_validation_errors(self.cause.errors())}"
        if isinstance(self.cause, TaxonomyValidationError):
            return f"{base}: {self._format_taxonomy_errors(self.cause)}"
        if self.cause:
            return f"{base}: {self.cause}"
        return base

    @staticmethod
    def _relative_path(path: str) -> str:
        try:
            return os.path.relpath(path)
        except ValueError:  # pragma: no cover - different drive on Windows
            return path

    @staticmethod
    def _format_taxonomy_errors(error: TaxonomyValidationError, limit: int = 3) -> str:
        snippets = []
        for model in error.failures[:limit]:
            snippets.append(f"{model.label()}: {', '.join(model.errors.full_messages())}")
        remaining = len(error.failures) - len(snippets)
        if remaining > 0:
            snippets.append(f"... ({remaining} more)")
        return "; ".join(snippets)

    def __str__(self) -> str:
        return self._build_message()
