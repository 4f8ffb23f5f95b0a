# -*- coding: utf-8 -*-
"""
Catalog engine command line: list locales, look up strings, check catalogs.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from launcher.config import CATALOG_DOMAIN, DEFAULT_LOCALE, FALLBACK_LOCALES, I18N_DIR
from launcher.i18n.catalog_parser import parse_catalog, serialize_catalog
from launcher.i18n.errors import ActivationError, CatalogError, ParseError
from launcher.i18n.manager import I18NManager

logger = logging.getLogger(__name__)


def _setup_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()],
    )


def _cmd_list(manager: I18NManager, args: argparse.Namespace) -> int:
    for locale in manager.available_locales():
        try:
            catalog = manager.load_locale(locale)
        except CatalogError as exc:
            print(f'{locale}\tERROR\t{exc}')
            continue
        print(
            f'{locale}\t{catalog.locale}\t{catalog.unit_count} units\t'
            f'{catalog.coverage:.0%} translated'
        )
    return 0


def _cmd_tr(manager: I18NManager, args: argparse.Namespace) -> int:
    try:
        manager.activate(args.lang)
    except ActivationError as exc:
        logger.error('%s', exc)
        return 1
    print(manager.translate(args.context, args.source, args.disambiguation, args.n))
    return 0


def _cmd_check(manager: I18NManager, args: argparse.Namespace) -> int:
    path = Path(args.file)
    try:
        data = path.read_bytes()
    except OSError as exc:
        logger.error('Cannot read %s: %s', path, exc)
        return 1
    try:
        catalog = parse_catalog(data)
    except ParseError as exc:
        logger.error('%s: %s', path, exc)
        return 1

    print(f'{path.name}: language {catalog.locale}, format {catalog.version}')
    for context in catalog.contexts():
        units = [unit for unit in catalog.units if unit.context == context]
        translated = sum(1 for unit in units if unit.is_translated)
        print(f'  {context}: {translated}/{len(units)} translated')
    print(f'  coverage: {catalog.coverage:.0%}')

    if parse_catalog(serialize_catalog(catalog)) != catalog:
        logger.error('%s does not survive a serialize/parse cycle', path)
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Launcher localization catalogs')
    parser.add_argument('--catalog-dir', default=I18N_DIR, help='Directory holding <domain>_<locale>.ts files')
    parser.add_argument('--domain', default=CATALOG_DOMAIN, help='Catalog file prefix')
    parser.add_argument('--lang', default=DEFAULT_LOCALE, help='Locale to activate')
    parser.add_argument(
        '--fallback',
        action='append',
        default=None,
        help='Fallback locale, repeatable (default: %s)' % ','.join(FALLBACK_LOCALES),
    )
    parser.add_argument('--debug', action='store_true', help='Verbose logging')

    sub = parser.add_subparsers(dest='command', required=True)
    sub.add_parser('list', help='List available locales').set_defaults(func=_cmd_list)

    tr = sub.add_parser('tr', help='Translate one source string')
    tr.add_argument('context')
    tr.add_argument('source')
    tr.add_argument('--disambiguation', '-d', default=None)
    tr.add_argument('-n', type=int, default=-1, help='Count for plural messages')
    tr.set_defaults(func=_cmd_tr)

    check = sub.add_parser('check', help='Validate a catalog file')
    check.add_argument('file')
    check.set_defaults(func=_cmd_check)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _setup_logging(args.debug)
    manager = I18NManager(
        catalog_dir=args.catalog_dir,
        domain=args.domain,
        fallback_locales=args.fallback if args.fallback is not None else FALLBACK_LOCALES,
    )
    return args.func(manager, args)


if __name__ == '__main__':
    raise SystemExit(main())
