from __future__ import annotations

import logging
from itertools import chain
from typing import Any, Mapping, Union

from pydantic import ValidationError

from product_taxonomy.core.attributes.attribute import AnyAttribute, Attribute
from product_taxonomy.core.attributes.file_spec import AttributesFileSpec
from product_taxonomy.core.errors import SourceSchemaError, TaxonomyError
from product_taxonomy.core.model_index import ModelIndex
from product_taxonomy.core.validation import ValidationContext, validate_batch
from product_taxonomy.core.values.value import Value
from product_taxonomy.utils.logging import log_calls

logger = logging.getLogger(__name__)


@log_calls(expected=(TaxonomyError,))
def load_attributes(
    source_data: Any,
    values: Union[Mapping[str, Value], ModelIndex[Value]],
) -> ModelIndex[AnyAttribute]:
    """Build and validate base and extended attributes.

    Expected format::

        base_attributes:
          - id: 1
            name: Pattern
            description: Describes the design or motif of a product
            friendly_id: pattern
            handle: pattern
            values: [pattern__abstract]
        extended_attributes:
          - id: 4
            name: Clothing Pattern
            description: Describes the design or motif of a product
            friendly_id: clothing_pattern
            handle: clothing_pattern
            values_from: pattern

    ``values`` maps value friendly ids to loaded values (a values ModelIndex
    is accepted too). Extended attributes may only borrow values from base
    attributes. The result holds base attributes first, then extended ones,
    each in source order.

    Raises:
        SourceSchemaError: if ``source_data`` lacks either attribute list
        TaxonomyValidationError: if any attribute is invalid; ``error.model``
            is the first invalid attribute
    """
    try:
        spec = AttributesFileSpec.model_validate(source_data)
    except ValidationError as exc:
        raise SourceSchemaError.from_validation_error(
            "Attributes source data must contain base_attributes and extended_attributes lists", exc
        ) from exc

    if isinstance(values, ModelIndex):
        values = values.hashed_by("friendly_id")

    base_index: ModelIndex[Attribute] = ModelIndex()
    for entry in spec.base_attributes:
        base_index.add(entry.build(values))
    extended = [entry.build() for entry in spec.extended_attributes]

    base_by_friendly_id = base_index.hashed_by("friendly_id")
    for attribute in extended:
        base_attribute = base_by_friendly_id.get(attribute.values_from)
        if base_attribute is not None:
            attribute.borrow_values_from(base_attribute)

    index: ModelIndex[AnyAttribute] = ModelIndex()
    for attribute in chain(base_index, extended):
        index.add(attribute)

    validate_batch(index.models, ValidationContext(index=index))
    logger.debug("Loaded %d base and %d extended attribute(s)", len(base_index), len(extended))
    return index


__all__ = ["load_attributes"]
