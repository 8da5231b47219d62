from __future__ import annotations

from typing import Any, Dict, Generic, Iterator, List, Optional, TypeVar

from pydantic import BaseModel, Field, PrivateAttr

T = TypeVar("T")


class ModelIndex(BaseModel, Generic[T]):
    """Ordered collection of entities from one load, with lookups by field.

    The index is also the scope for uniqueness checks: the first entity that
    claims a field value owns it.
    """

    models: List[T] = Field(default_factory=list)

    _hashes: Dict[str, Dict[Any, T]] = PrivateAttr(default_factory=dict)

    def add(self, model: T) -> None:
        self.models.append(model)
        self._hashes.clear()

    def hashed_by(self, field: str) -> Dict[Any, T]:
        if field not in self._hashes:
            hashed: Dict[Any, T] = {}
            for model in self.models:
                key = getattr(model, field, None)
                if key is None:
                    continue
                hashed.setdefault(key, model)
            self._hashes[field] = hashed
        return self._hashes[field]

    def first_with(self, field: str, value: Any) -> Optional[T]:
        return self.hashed_by(field).get(value)

    def get(self, field: str, value: Any) -> T:
        model = self.first_with(field, value)
        if model is None:
            available = ", ".join(sorted(str(k) for k in self.hashed_by(field).keys()))
            raise KeyError(f"Unknown {field}: {value}. Available: {available}")
        return model

    def __len__(self) -> int:
        return len(self.models)

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        return iter(self.models)

    def __getitem__(self, position: int) -> T:
        return self.models[position]
