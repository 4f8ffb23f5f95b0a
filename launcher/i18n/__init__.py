# -*- coding: utf-8 -*-
"""
Public i18n API for the launcher widget layer.

There is no module-level manager: the host creates an ``I18NManager`` and
hands it to the components that need translations.
"""

from __future__ import annotations

from launcher.i18n.catalog_parser import parse_catalog, serialize_catalog
from launcher.i18n.catalog_store import CatalogStore
from launcher.i18n.errors import ActivationError, CatalogError, LoadError, ParseError
from launcher.i18n.manager import I18NManager
from launcher.i18n.models import Catalog, Location, RegistryState, Snapshot, TranslationUnit
from launcher.i18n.registry import LocaleRegistry
from launcher.i18n.resolver import LookupResolver


__all__ = [
    'ActivationError',
    'Catalog',
    'CatalogError',
    'CatalogStore',
    'I18NManager',
    'LoadError',
    'LocaleRegistry',
    'Location',
    'LookupResolver',
    'ParseError',
    'RegistryState',
    'Snapshot',
    'TranslationUnit',
    'parse_catalog',
    'serialize_catalog',
]
