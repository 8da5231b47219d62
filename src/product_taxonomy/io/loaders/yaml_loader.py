from __future__ import annotations

import logging
import os
from typing import Any, Mapping

import yaml

from product_taxonomy.core import localizations
from product_taxonomy.core.attributes import load_attributes
from product_taxonomy.core.errors import SourceSchemaError, TaxonomyValidationError
from product_taxonomy.core.model_index import ModelIndex
from product_taxonomy.core.taxonomy import Taxonomy
from product_taxonomy.core.values import Value, load_values
from product_taxonomy.io.loaders.errors import LoaderError

logger = logging.getLogger(__name__)

VALUES_FILE = "values.yml"
ATTRIBUTES_FILE = "attributes.yml"


def _read_yaml_file(path: str) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except OSError as exc:
        raise LoaderError(path, "Unable to read file", cause=exc) from exc
    except yaml.YAMLError as exc:
        raise LoaderError(path, "Invalid YAML", cause=exc) from exc


def load_values_file(path: str) -> ModelIndex[Value]:
    data = _read_yaml_file(path)
    try:
        return load_values(data)
    except SourceSchemaError as exc:
        raise LoaderError(path, "Invalid values file", cause=exc) from exc
    except TaxonomyValidationError as exc:
        raise LoaderError(path, "Invalid value definitions", cause=exc) from exc


def load_attributes_file(path: str, values: Mapping[str, Value] | ModelIndex[Value]) -> ModelIndex:
    data = _read_yaml_file(path)
    try:
        return load_attributes(data, values)
    except SourceSchemaError as exc:
        raise LoaderError(path, "Invalid attributes file", cause=exc) from exc
    except TaxonomyValidationError as exc:
        raise LoaderError(path, "Invalid attribute definitions", cause=exc) from exc


def load_taxonomy(data_path: str, *, configure_localizations: bool = True) -> Taxonomy:
    """Load values and attributes from a data directory.

    Expected layout::

        <data_path>/values.yml
        <data_path>/attributes.yml
        <data_path>/localizations/<attributes|values>/<locale>.yml

    When ``configure_localizations`` is set, localized names are read from
    the same directory.
    """
    values = load_values_file(os.path.join(data_path, VALUES_FILE))
    attributes = load_attributes_file(os.path.join(data_path, ATTRIBUTES_FILE), values)
    if configure_localizations:
        localizations.configure(data_path)
    logger.info("Loaded %d value(s) and %d attribute(s) from %s", len(values), len(attributes), data_path)
    return Taxonomy(values=values, attributes=attributes)
