from __future__ import annotations

from typing import Annotated, Any, ClassVar, List, Literal, Optional, Tuple, Union

from pydantic import ConfigDict, Field, PrivateAttr

from product_taxonomy.core.errors import ErrorKind, Errors
from product_taxonomy.core.localizations import DEFAULT_LOCALE, Localized
from product_taxonomy.core.validation import (
    IntegerId,
    Presence,
    Rule,
    Uniqueness,
    ValidatedModel,
    ValidationContext,
)
from product_taxonomy.core.values.value import Value


class ValuesResolved(Rule):
    """Base attributes must list at least one value, and every value must exist."""

    def check(self, model: Any, errors: Errors, context: ValidationContext) -> None:
        if not model.value_friendly_ids and not model.values:
            errors.add("values", ErrorKind.BLANK)
        elif model.unresolved_value_ids:
            errors.add("values", ErrorKind.NOT_FOUND)


class ValuesFromResolved(Rule):
    """Extended attributes must borrow from a base attribute of the same load."""

    def check(self, model: Any, errors: Errors, context: ValidationContext) -> None:
        if model.base_attribute is None:
            errors.add("values_from", ErrorKind.NOT_FOUND)


class AttributeText(Localized):
    """Localized name/description accessors shared by both attribute variants."""

    localization_kind: ClassVar[str] = "attributes"

    def name(self, locale: str = DEFAULT_LOCALE) -> Optional[str]:
        return self.localized("name", self.raw_name, locale)  # type: ignore[attr-defined]

    def description(self, locale: str = DEFAULT_LOCALE) -> Optional[str]:
        return self.localized("description", self.raw_description, locale)  # type: ignore[attr-defined]

    @property
    def gid(self) -> str:
        return f"gid://shopify/TaxonomyAttribute/{self.id}"  # type: ignore[attr-defined]


class Attribute(AttributeText, ValidatedModel):
    """An attribute that owns its list of values."""

    validations: ClassVar[Tuple[Rule, ...]] = (
        IntegerId("id"),
        Presence(("friendly_id", "handle", "description")),
        ValuesResolved(),
        Uniqueness("friendly_id"),
    )

    kind: Literal["base"] = "base"
    id: Any = None
    raw_name: Optional[str] = Field(default=None, alias="name")
    raw_description: Optional[str] = Field(default=None, alias="description")
    friendly_id: Optional[str] = None
    handle: Optional[str] = None
    values: List[Value] = Field(default_factory=list)
    # friendly ids as written in the source, including unresolvable ones
    value_friendly_ids: List[str] = Field(default_factory=list)

    _extended_attributes: List["ExtendedAttribute"] = PrivateAttr(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)

    @property
    def unresolved_value_ids(self) -> List[str]:
        known = {value.friendly_id for value in self.values}
        return [fid for fid in self.value_friendly_ids if fid not in known]

    @property
    def extended_attributes(self) -> List["ExtendedAttribute"]:
        return list(self._extended_attributes)

    @property
    def is_extended(self) -> bool:
        return False


class ExtendedAttribute(AttributeText, ValidatedModel):
    """An attribute that borrows the value list of the base attribute named by ``values_from``."""

    validations: ClassVar[Tuple[Rule, ...]] = (
        IntegerId("id"),
        Presence(("friendly_id", "handle")),
        ValuesFromResolved(),
        Uniqueness("friendly_id"),
    )

    kind: Literal["extended"] = "extended"
    id: Any = None
    raw_name: Optional[str] = Field(default=None, alias="name")
    raw_description: Optional[str] = Field(default=None, alias="description")
    friendly_id: Optional[str] = None
    handle: Optional[str] = None
    values_from: Optional[str] = None

    _base_attribute: Optional[Attribute] = PrivateAttr(default=None)

    model_config = ConfigDict(populate_by_name=True)

    @property
    def base_attribute(self) -> Optional[Attribute]:
        return self._base_attribute

    @property
    def values(self) -> List[Value]:
        """The base attribute's value list itself (not a copy)."""
        if self._base_attribute is None:
            return []
        return self._base_attribute.values

    @property
    def is_extended(self) -> bool:
        return True

    def borrow_values_from(self, base_attribute: Attribute) -> None:
        self._base_attribute = base_attribute
        base_attribute._extended_attributes.append(self)


Attribute.model_rebuild()

AnyAttribute = Annotated[Union[Attribute, ExtendedAttribute], Field(discriminator="kind")]


__all__ = [
    "AnyAttribute",
    "Attribute",
    "AttributeText",
    "ExtendedAttribute",
    "ValuesFromResolved",
    "ValuesResolved",
]
