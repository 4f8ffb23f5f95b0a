# -*- coding: utf-8 -*-
"""
Locale switch/reload coordination.

A new snapshot is built entirely off to the side and published with one
reference assignment; lookups never wait on the switch lock.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from launcher.i18n.catalog_loader import candidate_locales, load_catalog, normalize_locale
from launcher.i18n.catalog_store import CatalogStore
from launcher.i18n.errors import ActivationError, CatalogError, LoadError
from launcher.i18n.models import Catalog, RegistryState, Snapshot

if TYPE_CHECKING:
    from launcher.i18n.registry import LocaleRegistry

logger = logging.getLogger(__name__)


class SwitchCoordinator:
    def __init__(self, registry: LocaleRegistry):
        self._registry = registry
        self._lock = threading.RLock()
        self._epoch = 0

    def resolve(self, locale: str) -> str:
        """Map a requested identifier onto an available catalog locale."""
        available = self._registry.list_locales()
        for candidate in candidate_locales(locale):
            if candidate in available:
                return candidate
        if not normalize_locale(locale):
            raise LoadError(str(locale), 'invalid locale identifier')
        raise LoadError(locale, 'no catalog available', str(self._registry.source.root))

    def preload(self, locale: str) -> Catalog:
        resolved = self.resolve(locale)
        catalog = load_catalog(self._registry.source, resolved)
        self._registry._remember({resolved: catalog})
        return catalog

    def switch_to(self, locale: str, *, reload: bool = False) -> Snapshot:
        # listeners run under the lock so notifications follow publish order
        with self._lock:
            previous_state = self._registry.state
            self._registry._state = RegistryState.LOADING
            published = False
            try:
                snapshot, loaded = self._build(locale, reload)
                self._registry._publish(snapshot, loaded)
                published = True
            except CatalogError as exc:
                logger.warning('Locale switch to %s failed: %s', locale, exc)
                raise ActivationError(locale, exc) from exc
            finally:
                if not published:
                    self._registry._state = previous_state
            self._registry._notify(snapshot.locale)
        return snapshot

    def reload(self) -> Snapshot:
        current = self._registry.current()
        if current is None:
            raise ActivationError('', LoadError('', 'no active locale to reload'))
        return self.switch_to(current.locale, reload=True)

    def _catalog(self, locale: str, reload: bool, loaded: dict[str, Catalog]) -> Catalog:
        if locale in loaded:
            return loaded[locale]
        cached = None if reload else self._registry._cached(locale)
        if cached is not None:
            return cached
        catalog = load_catalog(self._registry.source, locale)
        loaded[locale] = catalog
        return catalog

    def _fallback_candidates(self, resolved: str) -> list[str]:
        candidates = candidate_locales(resolved)[1:]
        for locale in self._registry.fallback_chain:
            try:
                candidates.append(self.resolve(locale))
            except LoadError:
                logger.debug('Fallback locale %s has no catalog', locale)
        return candidates

    def _build(self, locale: str, reload: bool) -> tuple[Snapshot, dict[str, Catalog]]:
        # catalogs parsed here only reach the registry cache on publish
        loaded: dict[str, Catalog] = {}
        resolved = self.resolve(locale)
        catalog = self._catalog(resolved, reload, loaded)
        store = CatalogStore(catalog)

        fallbacks = []
        seen = {resolved}
        for fallback in self._fallback_candidates(resolved):
            if fallback in seen or fallback not in self._registry.list_locales():
                continue
            seen.add(fallback)
            try:
                fallback_catalog = self._catalog(fallback, reload, loaded)
            except CatalogError as exc:
                logger.warning('Skipping fallback locale %s: %s', fallback, exc)
                continue
            fallbacks.append((fallback, CatalogStore(fallback_catalog)))

        self._epoch += 1
        snapshot = Snapshot(
            locale=resolved,
            catalog=catalog,
            store=store,
            fallbacks=tuple(fallbacks),
            epoch=self._epoch,
        )
        return snapshot, loaded
