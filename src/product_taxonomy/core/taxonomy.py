from __future__ import annotations

from pydantic import BaseModel, Field

from product_taxonomy.core.attributes.attribute import AnyAttribute
from product_taxonomy.core.model_index import ModelIndex
from product_taxonomy.core.values.value import Value


class Taxonomy(BaseModel):
    """Values and attributes loaded from one data directory."""

    values: ModelIndex = Field(default_factory=ModelIndex)
    attributes: ModelIndex = Field(default_factory=ModelIndex)

    model_config = {"arbitrary_types_allowed": True}

    def value(self, friendly_id: str) -> Value:
        return self.values.get("friendly_id", friendly_id)

    def attribute(self, friendly_id: str) -> AnyAttribute:
        return self.attributes.get("friendly_id", friendly_id)
