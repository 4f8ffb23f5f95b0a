# -*- coding: utf-8 -*-
"""
Immutable catalog data model.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterator, Optional

if TYPE_CHECKING:
    from launcher.i18n.catalog_store import CatalogStore


TRANSLATION_TYPES = ('unfinished', 'obsolete', 'vanished')
RETIRED_TYPES = ('obsolete', 'vanished')

UnitKey = tuple[str, str, Optional[str]]


def make_key(context: str, source: str, disambiguation: str | None = None) -> UnitKey:
    return (context, source, disambiguation or None)


@dataclass(frozen=True)
class Location:
    filename: str
    line: str | None = None


@dataclass(frozen=True)
class TranslationUnit:
    context: str
    source: str
    translation: str = ''
    comment: str | None = None
    extra_comment: str | None = None
    translator_comment: str | None = None
    translation_type: str | None = None
    numerus: bool = False
    numerus_forms: tuple[str, ...] = ()
    locations: tuple[Location, ...] = ()

    @property
    def disambiguation(self) -> str | None:
        # <comment> is the Qt disambiguation; <extracomment> stands in when it is absent
        if self.comment:
            return self.comment
        return self.extra_comment or None

    @property
    def key(self) -> UnitKey:
        return make_key(self.context, self.source, self.disambiguation)

    @property
    def is_retired(self) -> bool:
        return self.translation_type in RETIRED_TYPES

    @property
    def is_translated(self) -> bool:
        if self.is_retired:
            return False
        if self.numerus:
            return any(self.numerus_forms)
        return bool(self.translation)


@dataclass(frozen=True)
class Catalog:
    locale: str
    version: str
    units: tuple[TranslationUnit, ...] = ()
    source_language: str | None = None

    def contexts(self) -> list[str]:
        seen: dict[str, None] = {}
        for unit in self.units:
            seen.setdefault(unit.context, None)
        return list(seen)

    @property
    def unit_count(self) -> int:
        return len(self.units)

    @property
    def translated_count(self) -> int:
        return sum(1 for unit in self.units if unit.is_translated)

    @property
    def coverage(self) -> float:
        return self.translated_count / self.unit_count if self.units else 1.0


class RegistryState(Enum):
    UNINITIALIZED = 'uninitialized'
    LOADING = 'loading'
    ACTIVE = 'active'


@dataclass(frozen=True)
class Snapshot:
    """Catalog, store and fallback stores published together by the registry."""

    locale: str
    catalog: Catalog
    store: CatalogStore
    fallbacks: tuple[tuple[str, CatalogStore], ...] = ()
    epoch: int = 0

    @property
    def fallback_locales(self) -> list[str]:
        return [locale for locale, _ in self.fallbacks]

    def stores(self) -> Iterator[CatalogStore]:
        yield self.store
        for _, store in self.fallbacks:
            yield store
