# -*- coding: utf-8 -*-
"""
QTranslator backed by the catalog engine, so widget ``tr()`` calls resolve
through the active snapshot.
"""

from __future__ import annotations

from PySide6.QtCore import QCoreApplication, QTranslator

from launcher.i18n.manager import I18NManager


def _text(value) -> str | None:
    if value is None:
        return None
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode('utf-8')
    return str(value)


class EngineTranslator(QTranslator):
    def __init__(self, manager: I18NManager, parent=None):
        super().__init__(parent)
        self._manager = manager

    def translate(self, context, sourceText, disambiguation=None, n=-1):
        # a null result lets Qt fall through to the next translator or the source text
        return self._manager.resolver.find(
            _text(context) or '',
            _text(sourceText) or '',
            _text(disambiguation) or None,
            n,
        )

    def isEmpty(self) -> bool:
        return self._manager.registry.current() is None

    def language(self) -> str:
        snapshot = self._manager.registry.current()
        return snapshot.catalog.locale.replace('_', '-') if snapshot is not None else ''


def install_translator(app: QCoreApplication, manager: I18NManager) -> EngineTranslator:
    """Install on ``app``; re-installing on every switch posts a LanguageChange event."""
    translator = EngineTranslator(manager, parent=app)
    app.installTranslator(translator)

    def _reinstall(_locale: str) -> None:
        app.removeTranslator(translator)
        app.installTranslator(translator)

    manager.on_locale_changed(_reinstall)
    return translator
