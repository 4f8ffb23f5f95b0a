# -*- coding: utf-8 -*-
"""
Catalog loader for launcher i18n resources.

Catalogs live in one directory as ``<domain>_<locale>.ts`` files, the naming
QTranslator uses.
"""

from __future__ import annotations

import logging
from pathlib import Path

from launcher.config import CATALOG_DOMAIN, CATALOG_SUFFIX, I18N_DIR
from launcher.i18n.catalog_parser import parse_catalog
from launcher.i18n.errors import LoadError
from launcher.i18n.models import Catalog

logger = logging.getLogger(__name__)


def normalize_locale(value: str | None) -> str:
    """Canonical ``ll[_Ssss][_RR]`` form, or ``''`` when nothing usable is given.

    Accepts ``-`` separators and POSIX suffixes (``de_DE.UTF-8``, ``sr@latin``).
    """
    raw = (value or '').strip().replace('-', '_')
    raw = raw.split('.', 1)[0].split('@', 1)[0]
    parts = [part for part in raw.split('_') if part]
    if not parts or not parts[0].isalpha():
        return ''
    normalized = [parts[0].lower()]
    for part in parts[1:]:
        if len(part) == 4 and part.isalpha():
            normalized.append(part.title())
        else:
            normalized.append(part.upper())
    return '_'.join(normalized)


def candidate_locales(value: str | None) -> list[str]:
    """Most to least specific: ``de_Latn_AT`` -> ``de_Latn_AT``, ``de_Latn``, ``de``."""
    normalized = normalize_locale(value)
    if not normalized:
        return []
    parts = normalized.split('_')
    return ['_'.join(parts[:i]) for i in range(len(parts), 0, -1)]


def to_display_locale(value: str) -> str:
    return normalize_locale(value).replace('_', '-')


class CatalogDirectory:
    """Filesystem collaborator: discovers and reads catalog documents."""

    def __init__(self, root: str | Path | None = None, domain: str = CATALOG_DOMAIN, suffix: str = CATALOG_SUFFIX):
        self.root = Path(root or I18N_DIR)
        self.domain = domain
        self.suffix = suffix
        self._paths: dict[str, Path] = {}

    def discover(self) -> list[str]:
        paths: dict[str, Path] = {}
        if self.root.is_dir():
            prefix = f'{self.domain}_'
            for path in sorted(self.root.glob(f'{prefix}*{self.suffix}')):
                locale = normalize_locale(path.stem[len(prefix):])
                if not locale:
                    logger.debug('Ignoring catalog with unusable name: %s', path.name)
                    continue
                paths[locale] = path
        else:
            logger.warning('Catalog directory does not exist: %s', self.root)
        self._paths = paths
        return sorted(paths)

    def path_for(self, locale: str) -> Path:
        return self._paths.get(locale) or self.root / f'{self.domain}_{locale}{self.suffix}'

    def read(self, locale: str) -> bytes:
        path = self.path_for(locale)
        try:
            return path.read_bytes()
        except FileNotFoundError as exc:
            raise LoadError(locale, 'catalog file not found', str(path)) from exc
        except OSError as exc:
            raise LoadError(locale, exc.strerror or str(exc), str(path)) from exc


def load_catalog(source: CatalogDirectory, locale: str) -> Catalog:
    """Read and parse one locale; raises LoadError or ParseError."""
    catalog = parse_catalog(source.read(locale))
    declared = candidate_locales(catalog.locale)
    requested = candidate_locales(locale)
    if declared and requested and declared[-1] != requested[-1]:
        logger.warning(
            'Catalog %s declares language %s',
            source.path_for(locale).name,
            catalog.locale,
        )
    logger.debug('Parsed %s: %d units, %.0f%% translated', locale, catalog.unit_count, catalog.coverage * 100)
    return catalog
