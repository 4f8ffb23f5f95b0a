# -*- coding: utf-8 -*-
"""
Locale registry: available locales, the active snapshot and change listeners.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from launcher.config import FALLBACK_LOCALES
from launcher.i18n.catalog_loader import CatalogDirectory, normalize_locale
from launcher.i18n.coordinator import SwitchCoordinator
from launcher.i18n.models import Catalog, RegistryState, Snapshot

logger = logging.getLogger(__name__)


LocaleChangedCallback = Callable[[str], None]


class LocaleRegistry:
    """Owns the active snapshot.

    Instances are independent; hosts create one and pass it to whatever
    needs translations.
    """

    def __init__(self, source: CatalogDirectory, fallback_chain: Iterable[str] = FALLBACK_LOCALES):
        self.source = source
        self._fallback_chain = self._normalize_chain(fallback_chain)
        self._available: tuple[str, ...] = tuple(source.discover())
        self._snapshot: Snapshot | None = None
        self._catalogs: dict[str, Catalog] = {}
        self._state = RegistryState.UNINITIALIZED
        self._callbacks: list[LocaleChangedCallback] = []
        self._coordinator = SwitchCoordinator(self)

    @staticmethod
    def _normalize_chain(locales: Iterable[str]) -> tuple[str, ...]:
        chain: list[str] = []
        for locale in locales:
            normalized = normalize_locale(locale)
            if normalized and normalized not in chain:
                chain.append(normalized)
        return tuple(chain)

    @property
    def state(self) -> RegistryState:
        return self._state

    @property
    def fallback_chain(self) -> tuple[str, ...]:
        return self._fallback_chain

    def set_fallback_chain(self, locales: Iterable[str]) -> None:
        """Takes effect on the next activate/reload."""
        self._fallback_chain = self._normalize_chain(locales)

    @property
    def coordinator(self) -> SwitchCoordinator:
        return self._coordinator

    def list_locales(self) -> list[str]:
        return list(self._available)

    def refresh(self) -> list[str]:
        self._available = tuple(self.source.discover())
        return self.list_locales()

    def current(self) -> Snapshot | None:
        return self._snapshot

    @property
    def current_locale(self) -> str | None:
        snapshot = self._snapshot
        return snapshot.locale if snapshot is not None else None

    def activate(self, locale: str) -> bool:
        """Switch to ``locale``; raises ActivationError and keeps the old snapshot on failure."""
        self._coordinator.switch_to(locale)
        return True

    def reload(self) -> bool:
        self._coordinator.reload()
        return True

    def preload(self, locale: str) -> Catalog:
        return self._coordinator.preload(locale)

    def subscribe(self, callback: LocaleChangedCallback) -> None:
        if callback not in self._callbacks:
            self._callbacks.append(callback)

    def unsubscribe(self, callback: LocaleChangedCallback) -> None:
        self._callbacks = [cb for cb in self._callbacks if cb != callback]

    def _cached(self, locale: str) -> Catalog | None:
        return self._catalogs.get(locale)

    def _remember(self, catalogs: dict[str, Catalog]) -> None:
        if catalogs:
            self._catalogs = {**self._catalogs, **catalogs}

    def _publish(self, snapshot: Snapshot, catalogs: dict[str, Catalog]) -> None:
        self._remember(catalogs)
        self._snapshot = snapshot
        self._state = RegistryState.ACTIVE
        logger.info(
            'Locale %s active (%d units, fallbacks: %s)',
            snapshot.locale,
            snapshot.catalog.unit_count,
            ', '.join(snapshot.fallback_locales) or 'none',
        )

    def _notify(self, locale: str) -> None:
        for callback in list(self._callbacks):
            try:
                callback(locale)
            except Exception:
                logger.exception('Locale change listener %r failed', callback)
