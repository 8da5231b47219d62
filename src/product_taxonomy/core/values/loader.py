from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from product_taxonomy.core.errors import SourceSchemaError, TaxonomyError
from product_taxonomy.core.model_index import ModelIndex
from product_taxonomy.core.validation import ValidationContext, validate_batch
from product_taxonomy.core.values.file_spec import ValuesFileSpec
from product_taxonomy.core.values.value import Value
from product_taxonomy.utils.logging import log_calls

logger = logging.getLogger(__name__)


@log_calls(expected=(TaxonomyError,))
def load_values(source_data: Any) -> ModelIndex[Value]:
    """Build and validate values from deserialized source data.

    Expected format (a list of records)::

        - id: 1
          name: Black
          friendly_id: color__black
          handle: color__black

    Raises:
        SourceSchemaError: if ``source_data`` is not a list of value records
        TaxonomyValidationError: if any value is invalid; ``error.model`` is
            the first invalid value
    """
    try:
        spec = ValuesFileSpec.model_validate(source_data)
    except ValidationError as exc:
        raise SourceSchemaError.from_validation_error("Values source data must be a list of value records", exc) from exc

    index: ModelIndex[Value] = ModelIndex()
    for entry in spec.root:
        index.add(entry.build())

    validate_batch(index.models, ValidationContext(index=index))
    logger.debug("Loaded %d value(s)", len(index))
    return index


__all__ = ["load_values"]
