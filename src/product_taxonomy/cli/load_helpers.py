from __future__ import annotations

"""Shared helpers for loading taxonomy data with CLI-friendly errors."""

from pathlib import Path
from typing import Any, Callable, TypeVar

import typer
from rich.console import Console

from product_taxonomy.core.errors import TaxonomyValidationError
from product_taxonomy.io.loaders import LoaderError

T = TypeVar("T")


def _print_field_errors(console: Console, error: TaxonomyValidationError) -> None:
    for model in error.failures:
        console.print(f"  [bold]{model.label()}[/bold]")
        for field_error in model.errors:
            console.print(f"    - {field_error.field}: {field_error.error.value} ({field_error.message()})")


def load_or_exit(
    loader_fn: Callable[..., T],
    *args: Any,
    console: Console,
    verbose_errors: bool = False,
    **kwargs: Any,
) -> T:
    if args:
        first = args[0]
        if isinstance(first, str) and not Path(first).exists():
            console.print(f"[red]Path not found:[/red] {first}")
            raise typer.Exit(code=1)
    try:
        return loader_fn(*args, **kwargs)
    except LoaderError as err:
        if verbose_errors and isinstance(err.cause, TaxonomyValidationError):
            console.print(f"[red]Failed to load data:[/red] {err.message} ({err.file_path})")
            _print_field_errors(console, err.cause)
        elif verbose_errors and err.cause:
            console.print(f"[red]Failed to load data:[/red] {err.message}\n{err.cause}")
        else:
            console.print(f"[red]Failed to load data:[/red] {err}")
        raise typer.Exit(code=1)


__all__ = ["load_or_exit"]
