from __future__ import annotations

"""Rich renderables for taxonomy entities."""

from rich.table import Table

from product_taxonomy.core.attributes import AnyAttribute
from product_taxonomy.core.taxonomy import Taxonomy


def build_summary_table(taxonomy: Taxonomy) -> Table:
    table = Table(title="Attributes")
    table.add_column("Friendly ID")
    table.add_column("Kind")
    table.add_column("Values", justify="right")
    table.add_column("Values from")
    for attribute in taxonomy.attributes:
        table.add_row(
            attribute.friendly_id,
            attribute.kind,
            str(len(attribute.values)),
            getattr(attribute, "values_from", None) or "-",
        )
    return table


def build_values_table(attribute: AnyAttribute, locale: str) -> Table:
    table = Table(title=f"Values of {attribute.friendly_id}")
    table.add_column("ID", justify="right")
    table.add_column("Friendly ID")
    table.add_column("Name")
    for value in attribute.values:
        table.add_row(str(value.id), value.friendly_id, value.name(locale) or "")
    return table


__all__ = ["build_summary_table", "build_values_table"]
