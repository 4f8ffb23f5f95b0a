# -*- coding: utf-8 -*-
"""
Translation lookup across the active locale and its fallback chain.
"""

from __future__ import annotations

import logging

from launcher.i18n.registry import LocaleRegistry

logger = logging.getLogger(__name__)


class LookupResolver:
    def __init__(self, registry: LocaleRegistry):
        self._registry = registry

    def find(
        self,
        context: str,
        source: str,
        disambiguation: str | None = None,
        n: int = -1,
    ) -> str | None:
        """Translated text from the first store that has one, else ``None``."""
        snapshot = self._registry.current()
        if snapshot is None:
            return None
        for store in snapshot.stores():
            text = store.translate(context, source, disambiguation, n)
            if text is not None:
                return text
        return None

    def resolve(
        self,
        context: str,
        source: str,
        disambiguation: str | None = None,
        n: int = -1,
    ) -> str:
        try:
            text = self.find(context, source, disambiguation, n)
        except Exception:
            logger.exception('Lookup failed for %r in context %r', source, context)
            text = None
        if text is None:
            text = source
        if n >= 0:
            text = text.replace('%n', str(n))
        return text
