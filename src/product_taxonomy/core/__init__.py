from .attributes import AnyAttribute, Attribute, ExtendedAttribute, load_attributes
from .errors import ErrorKind, FieldError, SourceSchemaError, TaxonomyError, TaxonomyValidationError
from .model_index import ModelIndex
from .taxonomy import Taxonomy
from .values import Value, load_values

__all__ = [
    "AnyAttribute",
    "Attribute",
    "ErrorKind",
    "ExtendedAttribute",
    "FieldError",
    "ModelIndex",
    "SourceSchemaError",
    "Taxonomy",
    "TaxonomyError",
    "TaxonomyValidationError",
    "Value",
    "load_attributes",
    "load_values",
]
