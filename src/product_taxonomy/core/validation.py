"""Rule-based validation for taxonomy entities.

Every entity class lists its rules in ``validations``. Running them fills the
entity's ``errors`` with one :class:`FieldError` per problem; all rules always
run, so a record missing three fields reports all three.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterable, Optional, Tuple

from pydantic import BaseModel, PrivateAttr

from product_taxonomy.core.errors import ErrorKind, Errors, TaxonomyValidationError
from product_taxonomy.core.model_index import ModelIndex

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"^[+-]?\d+$")


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) == 0
    return False


@dataclass
class ValidationContext:
    """State shared by all entities validated in one load."""

    index: ModelIndex = field(default_factory=ModelIndex)


class Rule(ABC):
    """Base class for validation rules."""

    @abstractmethod
    def check(self, model: Any, errors: Errors, context: ValidationContext) -> None:
        raise NotImplementedError


@dataclass(frozen=True)
class Presence(Rule):
    fields: Tuple[str, ...]

    def check(self, model: Any, errors: Errors, context: ValidationContext) -> None:
        for name in self.fields:
            if is_blank(model.read_field(name)):
                errors.add(name, ErrorKind.BLANK)


@dataclass(frozen=True)
class IntegerId(Rule):
    """The field must be an integer (or an integer string) >= ``minimum``."""

    field: str = "id"
    minimum: int = 0

    def check(self, model: Any, errors: Errors, context: ValidationContext) -> None:
        raw = model.read_field(self.field)
        number = self._coerce(raw, errors)
        if number is not None and number < self.minimum:
            errors.add(self.field, ErrorKind.GREATER_THAN_OR_EQUAL_TO, value=raw, count=self.minimum)

    def _coerce(self, raw: Any, errors: Errors) -> Optional[int]:
        # bool is an int subclass; YAML "yes"/"true" must not pass as an id
        if isinstance(raw, bool) or raw is None:
            errors.add(self.field, ErrorKind.NOT_A_NUMBER, value=raw)
            return None
        if isinstance(raw, int):
            return raw
        if isinstance(raw, float):
            if raw.is_integer():
                return int(raw)
            errors.add(self.field, ErrorKind.NOT_AN_INTEGER, value=raw)
            return None
        if isinstance(raw, str):
            text = raw.strip()
            if _INTEGER_RE.match(text):
                return int(text)
            try:
                float(text)
            except ValueError:
                errors.add(self.field, ErrorKind.NOT_A_NUMBER, value=raw)
            else:
                errors.add(self.field, ErrorKind.NOT_AN_INTEGER, value=raw)
            return None
        errors.add(self.field, ErrorKind.NOT_A_NUMBER, value=raw)
        return None


@dataclass(frozen=True)
class Uniqueness(Rule):
    """The first entity in the batch to claim a value owns it; later ones are ``taken``."""

    field: str

    def check(self, model: Any, errors: Errors, context: ValidationContext) -> None:
        value = model.read_field(self.field)
        if is_blank(value):
            return
        owner = context.index.first_with(self.field, value)
        if owner is not None and owner is not model:
            errors.add(self.field, ErrorKind.TAKEN)


class ValidatedModel(BaseModel):
    """Mixin giving an entity an ``errors`` collection and rule execution."""

    validations: ClassVar[Tuple[Rule, ...]] = ()

    _errors: Errors = PrivateAttr(default_factory=Errors)

    @property
    def errors(self) -> Errors:
        return self._errors

    def read_field(self, name: str) -> Any:
        """Raw value of a field by its source name (aliases included)."""
        for field_name, info in type(self).model_fields.items():
            if info.alias == name:
                return getattr(self, field_name)
        return getattr(self, name, None)

    def run_validations(self, context: Optional[ValidationContext] = None) -> Errors:
        context = context or ValidationContext()
        self._errors.clear()
        for rule in self.validations:
            rule.check(self, self._errors, context)
        return self._errors

    def is_valid(self, context: Optional[ValidationContext] = None) -> bool:
        return not self.run_validations(context)

    def __eq__(self, other: object) -> bool:
        # fields only: errors and cross-entity links stay out of equality
        if not isinstance(other, BaseModel):
            return NotImplemented
        return type(self) is type(other) and self.__dict__ == other.__dict__

    def label(self) -> str:
        friendly_id = getattr(self, "friendly_id", None)
        return f"{type(self).__name__} '{friendly_id}'" if friendly_id else type(self).__name__


def validate_batch(models: Iterable[ValidatedModel], context: ValidationContext) -> None:
    """Validate every model, then raise for the first failure if there is one."""
    failures = [model for model in models if not model.is_valid(context)]
    if failures:
        logger.warning("%d invalid record(s); first: %s", len(failures), failures[0].label())
        raise TaxonomyValidationError(failures[0], failures)


__all__ = [
    "IntegerId",
    "Presence",
    "Rule",
    "Uniqueness",
    "ValidatedModel",
    "ValidationContext",
    "is_blank",
    "validate_batch",
]
