# -*- coding: utf-8 -*-

from __future__ import annotations

from launcher.i18n.catalog_store import CatalogStore
from launcher.i18n.models import Catalog, TranslationUnit
from launcher.i18n.plurals import plural_index


def _store(*units, locale='de_DE'):
    return CatalogStore(Catalog(locale=locale, version='2.1', units=tuple(units)))


def test_exact_key_lookup():
    store = _store(
        TranslationUnit('ConfigWidget', 'Debug mode', 'Debug-Modus'),
        TranslationUnit('Window', 'Debug mode', 'Debugmodus'),
    )
    assert len(store) == 2
    assert store.translate('ConfigWidget', 'Debug mode') == 'Debug-Modus'
    assert store.translate('Window', 'Debug mode') == 'Debugmodus'
    assert store.translate('ResultsList', 'Debug mode') is None


def test_disambiguation_never_crosses_over():
    store = _store(
        TranslationUnit('Window', 'style', 'stil', extra_comment='The trigger'),
        TranslationUnit('Window', 'style', 'Stil', comment='Label'),
    )
    assert store.translate('Window', 'style', 'The trigger') == 'stil'
    assert store.translate('Window', 'style', 'Label') == 'Stil'
    assert store.translate('Window', 'style', 'Other') is None
    assert store.translate('Window', 'style') is None


def test_undisambiguated_lookup_only_matches_plain_units():
    store = _store(TranslationUnit('Window', 'Open', 'Öffnen'))
    assert store.translate('Window', 'Open') == 'Öffnen'
    assert store.translate('Window', 'Open', 'menu') is None
    assert store.lookup('Window', 'Open', '') is store.lookup('Window', 'Open')


def test_empty_and_retired_translations_are_misses():
    store = _store(
        TranslationUnit('Window', 'Settings', ''),
        TranslationUnit('Window', 'Old', 'Alt', translation_type='obsolete'),
        TranslationUnit('Window', 'Gone', 'Weg', translation_type='vanished'),
        TranslationUnit('Window', 'Draft', 'Entwurf', translation_type='unfinished'),
    )
    assert store.lookup('Window', 'Settings') is not None
    assert store.translate('Window', 'Settings') is None
    assert store.translate('Window', 'Old') is None
    assert store.translate('Window', 'Gone') is None
    assert store.translate('Window', 'Draft') == 'Entwurf'


def test_numerus_forms_follow_plural_rules():
    unit = TranslationUnit('Window', '%n item(s)', numerus=True, numerus_forms=('%n Element', '%n Elemente'))
    store = _store(unit)
    assert store.translate('Window', '%n item(s)', n=1) == '%n Element'
    assert store.translate('Window', '%n item(s)', n=5) == '%n Elemente'
    assert store.translate('Window', '%n item(s)') == '%n Element'

    empty = _store(TranslationUnit('Window', '%n file(s)', numerus=True, numerus_forms=('', '')))
    assert empty.translate('Window', '%n file(s)', n=2) is None


def test_store_logs_duplicate_keys(caplog):
    store = _store(
        TranslationUnit('Window', 'Open', 'Offen'),
        TranslationUnit('Window', 'Open', 'Öffnen'),
    )
    assert len(store) == 1
    assert store.translate('Window', 'Open') == 'Öffnen'
    assert 'last entry wins' in caplog.text


def test_plural_index_tables():
    assert plural_index('de_DE', 1) == 0
    assert plural_index('de_DE', 0) == 1
    assert plural_index('fr', 0) == 0
    assert plural_index('fr_FR', 2) == 1
    assert plural_index('ja', 7) == 0
    assert [plural_index('ru', n) for n in (1, 3, 5, 11, 21, 22)] == [0, 1, 2, 2, 0, 1]
    assert [plural_index('pl', n) for n in (1, 2, 5, 22, 25)] == [0, 1, 2, 1, 2]
    assert [plural_index('cs', n) for n in (1, 3, 5)] == [0, 1, 2]
    assert plural_index('de', -1) == 0
