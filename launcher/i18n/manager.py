# -*- coding: utf-8 -*-
"""
Launcher i18n manager with auto-detection and runtime language switch.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from PySide6.QtCore import QLocale, QSettings

from launcher.config import (
    CATALOG_DOMAIN,
    DEFAULT_LOCALE,
    FALLBACK_LOCALES,
    SETTINGS_APPLICATION,
    SETTINGS_LANGUAGE_KEY,
    SETTINGS_ORGANIZATION,
)
from launcher.i18n.catalog_loader import CatalogDirectory, candidate_locales, normalize_locale, to_display_locale
from launcher.i18n.errors import ActivationError
from launcher.i18n.models import Catalog
from launcher.i18n.registry import LocaleChangedCallback, LocaleRegistry
from launcher.i18n.resolver import LookupResolver

logger = logging.getLogger(__name__)


class I18NManager:
    def __init__(
        self,
        catalog_dir: str | Path | None = None,
        domain: str = CATALOG_DOMAIN,
        fallback_locales: Iterable[str] = FALLBACK_LOCALES,
        default_locale: str = DEFAULT_LOCALE,
        settings: QSettings | None = None,
    ):
        self.domain = domain
        self.default_locale = normalize_locale(default_locale) or DEFAULT_LOCALE
        self._settings = settings
        self._preference = 'auto'
        self.registry = LocaleRegistry(CatalogDirectory(catalog_dir, domain), fallback_locales)
        self.resolver = LookupResolver(self.registry)

    @property
    def settings(self) -> QSettings:
        if self._settings is None:
            self._settings = QSettings(SETTINGS_ORGANIZATION, SETTINGS_APPLICATION)
        return self._settings

    @property
    def preference(self) -> str:
        return self._preference

    @property
    def current_locale(self) -> str | None:
        return self.registry.current_locale

    @property
    def display_locale(self) -> str:
        snapshot = self.registry.current()
        if snapshot is None:
            return to_display_locale(self.default_locale)
        return to_display_locale(snapshot.catalog.locale)

    def available_locales(self) -> list[str]:
        return self.registry.list_locales()

    def initialize(self) -> None:
        pref = self._normalize_preference(self.settings.value(SETTINGS_LANGUAGE_KEY, 'auto'))
        if self.set_preference(pref, persist=False):
            return
        try:
            self.activate(self.default_locale)
        except ActivationError as exc:
            logger.error('No usable catalog, serving source text: %s', exc)

    def detect_system_locale(self) -> str:
        available = self.available_locales()

        def _from_hint(value: str | None) -> str:
            raw = (value or '').strip()
            if not raw:
                return ''
            for token in raw.replace(';', ':').replace(',', ':').split(':'):
                for candidate in candidate_locales(token):
                    if candidate in available:
                        return candidate
            return ''

        try:
            system_locale = QLocale.system()
            # UI language order is more reliable than the format locale
            for lang in system_locale.uiLanguages() or []:
                detected = _from_hint(lang)
                if detected:
                    return detected
            detected = _from_hint(system_locale.name())
            if detected:
                return detected
        except Exception:
            logger.debug('QLocale detection failed', exc_info=True)

        for key in ('LC_ALL', 'LANG', 'LANGUAGE'):
            detected = _from_hint(os.environ.get(key))
            if detected:
                return detected

        return self.default_locale

    def set_preference(self, preference: str, *, persist: bool = True) -> bool:
        pref = self._normalize_preference(preference)
        target = self.detect_system_locale() if pref == 'auto' else pref
        try:
            self.activate(target)
        except ActivationError as exc:
            logger.warning('Language preference %s not applied: %s', preference, exc)
            return False
        self._preference = pref
        if persist:
            self.settings.setValue(SETTINGS_LANGUAGE_KEY, self._preference)
            self.settings.sync()
        return True

    def load_locale(self, locale: str) -> Catalog:
        """Parse and cache a locale without activating it; raises LoadError/ParseError."""
        return self.registry.preload(locale)

    def activate(self, locale: str) -> None:
        self.registry.activate(locale)

    def reload(self) -> None:
        self.registry.reload()

    def on_locale_changed(self, callback: LocaleChangedCallback) -> None:
        self.registry.subscribe(callback)

    subscribe = on_locale_changed

    def unsubscribe(self, callback: LocaleChangedCallback) -> None:
        self.registry.unsubscribe(callback)

    def translate(
        self,
        context: str,
        source: str,
        disambiguation: str | None = None,
        n: int = -1,
    ) -> str:
        return self.resolver.resolve(context, source, disambiguation, n)

    def _normalize_preference(self, preference: object) -> str:
        raw = str(preference or 'auto').strip()
        if raw.lower() in ('auto', 'system'):
            return 'auto'
        available = self.available_locales()
        for candidate in candidate_locales(raw):
            if candidate in available:
                return candidate
        return 'auto'
