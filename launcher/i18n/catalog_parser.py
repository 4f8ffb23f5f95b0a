# -*- coding: utf-8 -*-
"""
Qt Linguist TS catalog reader/writer.

The writer follows the lupdate layout so that catalogs edited by hand or by
Linguist survive a parse/serialize cycle without spurious diffs.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from xml.sax.saxutils import escape

from launcher.config import SUPPORTED_FORMAT_VERSIONS
from launcher.i18n.errors import ParseError
from launcher.i18n.models import TRANSLATION_TYPES, Catalog, Location, TranslationUnit

logger = logging.getLogger(__name__)

LOCALE_PATTERN = re.compile(
    r'^[a-z]{2,3}([_-][a-z]{4})?([_-]([a-z]{2}|[0-9]{3}))?$',
    re.IGNORECASE,
)

_TEXT_ENTITIES = {'"': '&quot;', "'": '&apos;', '\r': '&#xd;'}
# parsers normalize raw whitespace in attribute values
_ATTR_ENTITIES = {**_TEXT_ENTITIES, '\n': '&#xa;', '\t': '&#x9;'}
_MESSAGE_CHILDREN = {
    'source', 'translation', 'comment', 'extracomment', 'translatorcomment', 'location',
}


def is_valid_locale(value: str | None) -> bool:
    return bool(value) and LOCALE_PATTERN.match(value) is not None


def _optional_text(element: ET.Element | None) -> str | None:
    if element is None:
        return None
    return element.text or ''


def _parse_message(message: ET.Element, context: str, path: str) -> TranslationUnit:
    source_el = message.find('source')
    if source_el is None or not source_el.text:
        raise ParseError('message without source text', path)

    translation_el = message.find('translation')
    if translation_el is None:
        raise ParseError('message without translation element', path)

    translation_type = translation_el.get('type')
    if translation_type is not None and translation_type not in TRANSLATION_TYPES:
        raise ParseError(f'unknown translation type {translation_type!r}', f'{path}/translation')

    numerus = message.get('numerus') == 'yes'
    if numerus:
        forms = tuple(form.text or '' for form in translation_el.findall('numerusform'))
        translation = ''
    else:
        forms = ()
        translation = translation_el.text or ''

    locations = tuple(
        Location(filename=loc.get('filename', ''), line=loc.get('line'))
        for loc in message.findall('location')
    )

    for child in message:
        if child.tag not in _MESSAGE_CHILDREN:
            logger.debug('Ignoring <%s> in %s', child.tag, path)

    return TranslationUnit(
        context=context,
        source=source_el.text,
        translation=translation,
        comment=_optional_text(message.find('comment')),
        extra_comment=_optional_text(message.find('extracomment')),
        translator_comment=_optional_text(message.find('translatorcomment')),
        translation_type=translation_type,
        numerus=numerus,
        numerus_forms=forms,
        locations=locations,
    )


def _parse_context(element: ET.Element, path: str) -> list[TranslationUnit]:
    name_el = element.find('name')
    if name_el is None or not (name_el.text or '').strip():
        raise ParseError('context block without a name', path)
    name = name_el.text

    units = []
    message_index = 0
    for child in element:
        if child.tag == 'message':
            message_index += 1
            units.append(_parse_message(child, name, f'{path}/message[{message_index}]'))
        elif child.tag == 'context':
            raise ParseError('nested context block', path)
    return units


def _dedupe(units: list[TranslationUnit], locale: str) -> tuple[TranslationUnit, ...]:
    by_key: dict = {}
    for unit in units:
        if unit.key in by_key:
            logger.warning(
                'Duplicate catalog entry %r in %s; keeping the last one',
                unit.key,
                locale,
            )
            del by_key[unit.key]
        by_key[unit.key] = unit
    return tuple(by_key.values())


def parse_catalog(data: bytes) -> Catalog:
    """Parse TS document bytes into a :class:`Catalog`.

    Raises :class:`ParseError` for malformed XML, a missing or unsupported
    format version, a missing or malformed ``language`` declaration, and
    messages lacking a source or translation element.
    """
    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise ParseError(f'malformed catalog document: {exc}', getattr(exc, 'position', None)) from exc
    except (LookupError, ValueError) as exc:
        # unknown encoding declarations and undecodable bytes
        raise ParseError(f'unreadable catalog document: {exc}') from exc

    if root.tag != 'TS':
        raise ParseError(f'unexpected root element <{root.tag}>', root.tag)

    version = root.get('version')
    if not version:
        raise ParseError('missing format version', 'TS')
    if version not in SUPPORTED_FORMAT_VERSIONS:
        raise ParseError(f'unsupported format version {version!r}', 'TS')

    language = root.get('language')
    if not language:
        raise ParseError('missing locale declaration', 'TS')
    if not is_valid_locale(language):
        raise ParseError(f'unknown locale declaration {language!r}', 'TS')

    units: list[TranslationUnit] = []
    context_index = 0
    for child in root:
        if child.tag == 'context':
            context_index += 1
            units.extend(_parse_context(child, f'TS/context[{context_index}]'))
        elif child.tag == 'message':
            raise ParseError('message outside of a context block', 'TS')
        else:
            logger.debug('Ignoring <%s> at document root', child.tag)

    return Catalog(
        locale=language,
        version=version,
        units=_dedupe(units, language),
        source_language=root.get('sourcelanguage'),
    )


def _escape(value: str) -> str:
    return escape(value, _TEXT_ENTITIES)


def _escape_attr(value: str) -> str:
    return escape(value, _ATTR_ENTITIES)


def _message_lines(unit: TranslationUnit) -> list[str]:
    opening = '    <message numerus="yes">' if unit.numerus else '    <message>'
    lines = [opening]
    for location in unit.locations:
        attrs = f'filename="{_escape_attr(location.filename)}"'
        if location.line is not None:
            attrs += f' line="{_escape_attr(location.line)}"'
        lines.append(f'        <location {attrs}/>')
    lines.append(f'        <source>{_escape(unit.source)}</source>')
    if unit.comment is not None:
        lines.append(f'        <comment>{_escape(unit.comment)}</comment>')
    if unit.extra_comment is not None:
        lines.append(f'        <extracomment>{_escape(unit.extra_comment)}</extracomment>')
    if unit.translator_comment is not None:
        lines.append(f'        <translatorcomment>{_escape(unit.translator_comment)}</translatorcomment>')

    type_attr = f' type="{unit.translation_type}"' if unit.translation_type else ''
    if unit.numerus:
        lines.append(f'        <translation{type_attr}>')
        for form in unit.numerus_forms:
            lines.append(f'            <numerusform>{_escape(form)}</numerusform>')
        lines.append('        </translation>')
    else:
        lines.append(f'        <translation{type_attr}>{_escape(unit.translation)}</translation>')
    lines.append('    </message>')
    return lines


def serialize_catalog(catalog: Catalog) -> bytes:
    lines = [
        '<?xml version="1.0" encoding="utf-8"?>',
        '<!DOCTYPE TS>',
    ]
    attrs = f'version="{_escape_attr(catalog.version)}" language="{_escape_attr(catalog.locale)}"'
    if catalog.source_language:
        attrs += f' sourcelanguage="{_escape_attr(catalog.source_language)}"'
    lines.append(f'<TS {attrs}>')

    current_context = None
    for unit in catalog.units:
        if unit.context != current_context:
            if current_context is not None:
                lines.append('</context>')
            lines.append('<context>')
            lines.append(f'    <name>{_escape(unit.context)}</name>')
            current_context = unit.context
        lines.extend(_message_lines(unit))
    if current_context is not None:
        lines.append('</context>')

    lines.append('</TS>')
    return ('\n'.join(lines) + '\n').encode('utf-8')
