"""Localized names and descriptions for taxonomy entities.

Localization files live under ``<data_path>/localizations/<entity_kind>/*.yml``
and look like::

    fr:
      attributes:
        color:
          name: Couleur
          description: ...

The catalog for an entity kind is read on first use and kept for the life of
the process. Lookups never fail: a missing locale falls back to the default
locale, then to the raw value from the source data.
"""

from __future__ import annotations

import glob
import logging
import os
import threading
from pathlib import Path
from types import MappingProxyType
from typing import Any, ClassVar, Dict, Mapping, Optional

import yaml

from product_taxonomy.utils.text import scalar_to_str

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"

# locale -> friendly_id -> field -> text
KindLocalizations = Mapping[str, Mapping[str, Mapping[str, str]]]


def _read_yaml(path: str) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


class LocalizationCatalog:
    def __init__(
        self,
        data_path: str | Path | None = None,
        *,
        mapping: Optional[Mapping[str, Any]] = None,
        default_locale: str = DEFAULT_LOCALE,
    ):
        self.data_path = str(data_path) if data_path is not None else str(Path.cwd() / "data")
        self.default_locale = default_locale
        self._mapping = mapping
        self._kinds: Dict[str, KindLocalizations] = {}
        self._lock = threading.Lock()

    def for_kind(self, entity_kind: str) -> KindLocalizations:
        kind = self._kinds.get(entity_kind)
        if kind is not None:
            return kind
        with self._lock:
            if entity_kind not in self._kinds:
                self._kinds[entity_kind] = MappingProxyType(self._build(entity_kind))
            return self._kinds[entity_kind]

    def resolve(
        self,
        entity_kind: str,
        friendly_id: Optional[str],
        field: str,
        locale: str,
        raw_value: Optional[str],
    ) -> Optional[str]:
        by_locale = self.for_kind(entity_kind)
        for candidate in (locale, self.default_locale):
            text = by_locale.get(candidate, {}).get(friendly_id, {}).get(field)
            if text:
                return text
        return raw_value

    def locales(self, entity_kind: str) -> list[str]:
        return sorted(self.for_kind(entity_kind).keys())

    def _build(self, entity_kind: str) -> Dict[str, Dict[str, Dict[str, str]]]:
        if self._mapping is not None:
            documents = [self._mapping]
        else:
            pattern = os.path.join(self.data_path, "localizations", entity_kind, "*.yml")
            files = sorted(glob.glob(pattern))
            logger.debug("Reading %d %s localization file(s) from %s", len(files), entity_kind, pattern)
            documents = [_read_yaml(fp) for fp in files]

        built: Dict[str, Dict[str, Dict[str, str]]] = {}
        for document in documents:
            if not isinstance(document, Mapping):
                logger.warning("Skipping %s localization document that is not a mapping", entity_kind)
                continue
            for locale, kinds in document.items():
                if not isinstance(kinds, Mapping):
                    continue
                entries = kinds.get(entity_kind)
                if not isinstance(entries, Mapping):
                    continue
                target = built.setdefault(str(locale), {})
                for friendly_id, fields in entries.items():
                    if not isinstance(fields, Mapping):
                        continue
                    texts = {str(k): scalar_to_str(v) for k, v in fields.items()}
                    target.setdefault(str(friendly_id), {}).update(
                        {k: v for k, v in texts.items() if isinstance(v, str)}
                    )
        return built


_catalog: Optional[LocalizationCatalog] = None
_catalog_lock = threading.Lock()


def catalog() -> LocalizationCatalog:
    global _catalog
    if _catalog is None:
        with _catalog_lock:
            if _catalog is None:
                _catalog = LocalizationCatalog()
    return _catalog


def configure(
    data_path: str | Path | None = None,
    *,
    mapping: Optional[Mapping[str, Any]] = None,
    default_locale: str = DEFAULT_LOCALE,
) -> LocalizationCatalog:
    """Replace the process-wide catalog."""
    global _catalog
    with _catalog_lock:
        _catalog = LocalizationCatalog(data_path, mapping=mapping, default_locale=default_locale)
    return _catalog


def reset() -> None:
    global _catalog
    with _catalog_lock:
        _catalog = None


def resolve(
    entity_kind: str,
    friendly_id: Optional[str],
    field: str,
    locale: str,
    raw_value: Optional[str],
) -> Optional[str]:
    return catalog().resolve(entity_kind, friendly_id, field, locale, raw_value)


class Localized:
    """Read accessors for fields that have per-locale overrides."""

    localization_kind: ClassVar[str]

    def localized(self, field: str, raw_value: Optional[str], locale: str = DEFAULT_LOCALE) -> Optional[str]:
        return resolve(self.localization_kind, getattr(self, "friendly_id", None), field, locale, raw_value)


__all__ = [
    "DEFAULT_LOCALE",
    "LocalizationCatalog",
    "Localized",
    "catalog",
    "configure",
    "reset",
    "resolve",
]
