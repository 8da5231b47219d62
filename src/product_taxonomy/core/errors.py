from __future__ import annotations

"""Error taxonomy shared by every taxonomy loader."""

from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Iterable, Iterator, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, ValidationError

if TYPE_CHECKING:
    from product_taxonomy.core.validation import ValidatedModel


class ErrorKind(str, Enum):
    BLANK = "blank"
    NOT_FOUND = "not_found"
    TAKEN = "taken"
    NOT_A_NUMBER = "not_a_number"
    NOT_AN_INTEGER = "not_an_integer"
    GREATER_THAN_OR_EQUAL_TO = "greater_than_or_equal_to"


_MESSAGES = {
    ErrorKind.BLANK: "can't be blank",
    ErrorKind.NOT_FOUND: "not found",
    ErrorKind.TAKEN: "has already been taken",
    ErrorKind.NOT_A_NUMBER: "is not a number",
    ErrorKind.NOT_AN_INTEGER: "must be an integer",
    ErrorKind.GREATER_THAN_OR_EQUAL_TO: "must be greater than or equal to {count}",
}


class FieldError(BaseModel):
    """A single problem with one field of one entity."""

    field: str
    error: ErrorKind
    options: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @property
    def value(self) -> Any:
        return self.options.get("value")

    def detail(self) -> Dict[str, Any]:
        return {"error": self.error.value, **self.options}

    def message(self) -> str:
        return _MESSAGES[self.error].format(**self.options)

    def full_message(self) -> str:
        label = self.field.replace("_", " ").capitalize()
        return f"{label} {self.message()}"


class Errors:
    """Ordered collection of field errors for one entity."""

    def __init__(self) -> None:
        self._by_field: Dict[str, List[FieldError]] = {}

    def add(self, field: str, kind: ErrorKind, **options: Any) -> FieldError:
        error = FieldError(field=field, error=kind, options=options)
        self._by_field.setdefault(field, []).append(error)
        return error

    def clear(self) -> None:
        self._by_field.clear()

    def on(self, field: str) -> List[FieldError]:
        return list(self._by_field.get(field, []))

    @property
    def fields(self) -> List[str]:
        return list(self._by_field.keys())

    @property
    def details(self) -> Dict[str, List[Dict[str, Any]]]:
        """Field errors keyed by field name, e.g. ``{"values": [{"error": "blank"}]}``."""
        return {field: [err.detail() for err in errs] for field, errs in self._by_field.items()}

    def full_messages(self) -> List[str]:
        return [err.full_message() for err in self]

    def __iter__(self) -> Iterator[FieldError]:
        for errs in self._by_field.values():
            yield from errs

    def __len__(self) -> int:
        return sum(len(errs) for errs in self._by_field.values())

    def __bool__(self) -> bool:
        return bool(self._by_field)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Errors):
            return NotImplemented
        return self.details == other.details

    def __repr__(self) -> str:
        return f"Errors({self.details!r})"


def summarize_validation_errors(errors: Iterable[dict], limit: int = 3) -> str:
    """One-line summary of pydantic error dicts: ``loc: msg; ...``."""
    error_list = list(errors)
    snippets = []
    for err in error_list:
        loc = ".".join(str(entry) for entry in err.get("loc", [])) or "<root>"
        msg = err.get("msg") or err.get("type") or "validation error"
        snippets.append(f"{loc}: {msg}")
        if len(snippets) >= limit:
            break
    remaining = len(error_list) - len(snippets)
    if remaining > 0:
        snippets.append(f"... ({remaining} more)")
    return "; ".join(snippets)


class TaxonomyError(Exception):
    """Base class for taxonomy loading failures."""


class SourceSchemaError(TaxonomyError, ValueError):
    """Raised when source data does not have the expected shape."""

    @classmethod
    def from_validation_error(cls, message: str, exc: ValidationError) -> "SourceSchemaError":
        return cls(f"{message}: {summarize_validation_errors(exc.errors())}")


class TaxonomyValidationError(TaxonomyError):
    """Raised when loaded entities fail field validation.

    ``model`` is the first entity (in load order) that failed; its
    ``errors.details`` hold every field problem found on it. ``failures``
    lists every failing entity of the batch.
    """

    def __init__(self, model: "ValidatedModel", failures: Optional[Sequence["ValidatedModel"]] = None):
        self.model = model
        self.failures = list(failures) if failures else [model]
        super().__init__(self._build_message())

    @property
    def details(self) -> Dict[str, List[Dict[str, Any]]]:
        return self.model.errors.details

    def _build_message(self) -> str:
        messages = ", ".join(self.model.errors.full_messages())
        base = f"Validation failed for {self.model.label()}: {messages}"
        others = len(self.failures) - 1
        if others > 0:
            base += f" (and {others} more invalid record(s))"
        return base


__all__ = [
    "ErrorKind",
    "Errors",
    "FieldError",
    "SourceSchemaError",
    "TaxonomyError",
    "TaxonomyValidationError",
    "summarize_validation_errors",
]
