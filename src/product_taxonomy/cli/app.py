"""
Taxonomy CLI: validate taxonomy source data and inspect attributes.
"""

from __future__ import annotations

import typer
from rich.console import Console

from product_taxonomy.cli.formatters import build_summary_table, build_values_table
from product_taxonomy.cli.load_helpers import load_or_exit
from product_taxonomy.cli.paths import data_path
from product_taxonomy.core import localizations
from product_taxonomy.core.localizations import DEFAULT_LOCALE
from product_taxonomy.core.taxonomy import Taxonomy
from product_taxonomy.io.loaders.yaml_loader import load_taxonomy
from product_taxonomy.utils.logging import configure_logging

app = typer.Typer(help="Taxonomy CLI: validate taxonomy source data and inspect attributes.")
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose)


def _load(path: str | None, *, verbose_load: bool = False) -> Taxonomy:
    return load_or_exit(load_taxonomy, data_path(path), console=console, verbose_errors=verbose_load)


@app.command()
def validate(
    path: str | None = typer.Option(None, "--data-path", help="Path to the taxonomy data folder"),
    summary: bool = typer.Option(False, "--summary", help="List every loaded attribute"),
    verbose: bool = typer.Option(False, "--verbose-load", help="Display every invalid record on loader errors"),
) -> None:
    """Validate values and attributes."""
    taxonomy = _load(path, verbose_load=verbose)

    extended = sum(1 for attribute in taxonomy.attributes if attribute.is_extended)
    console.print(f"[green]OK[/green] Loaded {len(taxonomy.values)} value(s)")
    console.print(
        f"[green]OK[/green] Loaded {len(taxonomy.attributes)} attribute(s) "
        f"({len(taxonomy.attributes) - extended} base, {extended} extended)"
    )
    if summary:
        console.print(build_summary_table(taxonomy))
    console.print("[green]All validations passed[/green]")


@app.command("show")
def show_attribute(
    friendly_id: str = typer.Argument(..., help="Attribute friendly ID"),
    locale: str = typer.Option(DEFAULT_LOCALE, "--locale", "-l", help="Locale for names and descriptions"),
    path: str | None = typer.Option(None, "--data-path", help="Path to the taxonomy data folder"),
    verbose: bool = typer.Option(False, "--verbose-load", help="Display every invalid record on loader errors"),
) -> None:
    """Show an attribute with its values."""
    taxonomy = _load(path, verbose_load=verbose)

    try:
        attribute = taxonomy.attribute(friendly_id)
    except KeyError:
        console.print(f"[red]Attribute not found[/red]: {friendly_id}")
        raise typer.Exit(code=2)

    if locale != DEFAULT_LOCALE and locale not in localizations.catalog().locales("attributes"):
        console.print(f"[yellow]No {locale} localization; falling back to {DEFAULT_LOCALE}[/yellow]")

    kind = "Extended attribute" if attribute.is_extended else "Attribute"
    console.print(f"[bold]{attribute.name(locale)}[/bold] ({kind}, {attribute.gid})")
    console.print(f"Handle: {attribute.handle}")
    if attribute.description(locale):
        console.print(f"Description: {attribute.description(locale)}")
    if attribute.is_extended:
        console.print(f"Values from: {attribute.values_from}")
    elif attribute.extended_attributes:
        names = ", ".join(ext.friendly_id for ext in attribute.extended_attributes)
        console.print(f"Extended by: {names}")
    console.print(build_values_table(attribute, locale))


if __name__ == "__main__":  # pragma: no cover
    app()
