# -*- coding: utf-8 -*-
"""
Immutable lookup index over one catalog.
"""

from __future__ import annotations

import logging
from types import MappingProxyType

from launcher.i18n.models import Catalog, TranslationUnit, UnitKey, make_key
from launcher.i18n.plurals import plural_index

logger = logging.getLogger(__name__)


class CatalogStore:
    """Maps (context, source, disambiguation) to the unit carrying it.

    Keys match exactly: a disambiguated request never falls back to another
    disambiguation and an undisambiguated request only sees units without one.
    """

    def __init__(self, catalog: Catalog):
        index: dict[UnitKey, TranslationUnit] = {}
        for unit in catalog.units:
            if unit.key in index:
                logger.warning('Duplicate key %r in %s catalog; last entry wins', unit.key, catalog.locale)
            index[unit.key] = unit
        self.locale = catalog.locale
        self._index = MappingProxyType(index)

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def lookup(self, context: str, source: str, disambiguation: str | None = None) -> TranslationUnit | None:
        return self._index.get(make_key(context, source, disambiguation))

    def translate(
        self,
        context: str,
        source: str,
        disambiguation: str | None = None,
        n: int = -1,
    ) -> str | None:
        unit = self.lookup(context, source, disambiguation)
        if unit is None or unit.is_retired:
            return None
        if unit.numerus:
            if not unit.numerus_forms:
                return None
            index = min(plural_index(self.locale, n), len(unit.numerus_forms) - 1)
            text = unit.numerus_forms[index]
        else:
            text = unit.translation
        # empty translations are placeholders, not output
        return text or None
