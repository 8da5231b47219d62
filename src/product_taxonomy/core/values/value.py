from __future__ import annotations

from typing import Any, ClassVar, Optional, Tuple

from pydantic import ConfigDict, Field

from product_taxonomy.core.localizations import DEFAULT_LOCALE, Localized
from product_taxonomy.core.validation import IntegerId, Presence, Rule, Uniqueness, ValidatedModel


class Value(Localized, ValidatedModel):
    """A controlled-vocabulary value such as ``color__black``.

    ``friendly_id`` is the key attributes use to reference the value.
    """

    localization_kind: ClassVar[str] = "values"
    validations: ClassVar[Tuple[Rule, ...]] = (
        IntegerId("id"),
        Presence(("name", "friendly_id", "handle")),
        Uniqueness("friendly_id"),
    )

    id: Any = None
    raw_name: Optional[str] = Field(default=None, alias="name")
    friendly_id: Optional[str] = None
    handle: Optional[str] = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def name(self, locale: str = DEFAULT_LOCALE) -> Optional[str]:
        return self.localized("name", self.raw_name, locale)

    @property
    def gid(self) -> str:
        return f"gid://shopify/TaxonomyValue/{self.id}"
