# -*- coding: utf-8 -*-

from __future__ import annotations

import pytest

from launcher.i18n.catalog_parser import is_valid_locale, parse_catalog, serialize_catalog
from launcher.i18n.errors import ParseError
from launcher.i18n.models import Location, TranslationUnit


def test_parse_shipped_german_catalog(catalog_dir):
    catalog = parse_catalog((catalog_dir / 'widgetsboxmodel_de.ts').read_bytes())

    assert catalog.locale == 'de_DE'
    assert catalog.version == '2.1'
    assert catalog.contexts() == ['ConfigWidget', 'Window']
    assert catalog.unit_count == 39
    assert catalog.coverage == 1.0

    style = [unit for unit in catalog.units if unit.source == 'style'][0]
    assert style.context == 'Window'
    assert style.comment is None
    assert style.extra_comment == 'The trigger'
    assert style.disambiguation == 'The trigger'
    assert style.translation == 'stil'


def test_parse_decodes_quotes(catalog_dir):
    catalog = parse_catalog((catalog_dir / 'widgetsboxmodel_de.ts').read_bytes())
    sources = [unit.source for unit in catalog.units]
    assert 'Position the window centered on the screen. See also "Center on active screen".' in sources


def test_english_catalog_has_only_placeholders(catalog_dir):
    catalog = parse_catalog((catalog_dir / 'widgetsboxmodel_en.ts').read_bytes())
    assert catalog.locale == 'en_US'
    assert catalog.unit_count == 39
    assert catalog.translated_count == 0
    assert all(unit.translation == '' for unit in catalog.units)


@pytest.mark.parametrize('name', ['widgetsboxmodel_de.ts', 'widgetsboxmodel_en.ts'])
def test_shipped_catalogs_serialize_byte_identical(catalog_dir, name):
    data = (catalog_dir / name).read_bytes()
    assert serialize_catalog(parse_catalog(data)) == data


def test_round_trip_preserves_optional_fields(make_ts):
    body = (
        '<context>\n'
        '    <name>Window</name>\n'
        '    <message numerus="yes">\n'
        '        <location filename="../src/window.cpp" line="+12"/>\n'
        '        <source>%n item(s) &amp; &lt;more&gt;</source>\n'
        '        <comment>count</comment>\n'
        '        <extracomment>shown in the footer</extracomment>\n'
        '        <translatorcomment>check length</translatorcomment>\n'
        '        <translation type="unfinished">\n'
        '            <numerusform>%n Element</numerusform>\n'
        '            <numerusform>%n Elemente</numerusform>\n'
        '        </translation>\n'
        '    </message>\n'
        '    <message>\n'
        '        <source>It\'s "quoted"</source>\n'
        '        <comment></comment>\n'
        '        <translation type="obsolete">Alt</translation>\n'
        '    </message>\n'
        '</context>\n'
    )
    catalog = parse_catalog(make_ts('de_DE', body))
    plural, quoted = catalog.units

    assert plural.numerus is True
    assert plural.numerus_forms == ('%n Element', '%n Elemente')
    assert plural.source == '%n item(s) & <more>'
    assert plural.locations == (Location('../src/window.cpp', '+12'),)
    assert plural.disambiguation == 'count'
    assert plural.translator_comment == 'check length'
    assert plural.translation_type == 'unfinished'
    assert quoted.comment == ''
    assert quoted.disambiguation is None
    assert quoted.is_retired

    serialized = serialize_catalog(catalog)
    assert b'It&apos;s &quot;quoted&quot;' in serialized
    assert parse_catalog(serialized) == catalog


def test_round_trip_preserves_control_whitespace(make_ts):
    body = (
        '<context>\n'
        '    <name>Window</name>\n'
        '    <message>\n'
        '        <location filename="a&#10;b&#9;c.cpp" line="7"/>\n'
        '        <source>a&#13;b</source>\n'
        '        <translation>x&#13;&#10;y</translation>\n'
        '    </message>\n'
        '</context>\n'
    )
    catalog = parse_catalog(make_ts('de_DE', body))
    (unit,) = catalog.units
    assert unit.source == 'a\rb'
    assert unit.translation == 'x\r\ny'
    assert unit.locations == (Location('a\nb\tc.cpp', '7'),)

    serialized = serialize_catalog(catalog)
    assert b'filename="a&#xa;b&#x9;c.cpp"' in serialized
    assert parse_catalog(serialized) == catalog


def test_context_block_reopened_keeps_unit_order(make_ts):
    body = (
        '<context><name>A</name><message><source>one</source><translation>1</translation></message></context>\n'
        '<context><name>B</name><message><source>two</source><translation>2</translation></message></context>\n'
        '<context><name>A</name><message><source>three</source><translation>3</translation></message></context>\n'
    )
    catalog = parse_catalog(make_ts('de', body))
    assert [unit.source for unit in catalog.units] == ['one', 'two', 'three']
    assert parse_catalog(serialize_catalog(catalog)) == catalog


def test_duplicate_key_last_wins(make_ts, caplog):
    body = (
        '<context>\n'
        '    <name>Window</name>\n'
        '    <message><source>Open</source><translation>Offen</translation></message>\n'
        '    <message><source>Close</source><translation>Schliessen</translation></message>\n'
        '    <message><source>Open</source><translation>Öffnen</translation></message>\n'
        '</context>\n'
    )
    catalog = parse_catalog(make_ts('de_DE', body))

    assert [(unit.source, unit.translation) for unit in catalog.units] == [
        ('Close', 'Schliessen'),
        ('Open', 'Öffnen'),
    ]
    assert 'Duplicate catalog entry' in caplog.text


def test_same_source_with_distinct_disambiguation_is_kept(make_ts):
    body = (
        '<context>\n'
        '    <name>Window</name>\n'
        '    <message><source>style</source><translation>Stil</translation></message>\n'
        '    <message><source>style</source><comment>The trigger</comment><translation>stil</translation></message>\n'
        '</context>\n'
    )
    catalog = parse_catalog(make_ts('de_DE', body))
    assert catalog.unit_count == 2


def test_malformed_xml_reports_line_and_column():
    with pytest.raises(ParseError) as excinfo:
        parse_catalog(b'<TS version="2.1" language="de">\n<context>\n<name>X</name>\n</TS>\n')
    assert isinstance(excinfo.value.position, tuple)
    assert excinfo.value.position[0] == 4
    assert 'line 4' in str(excinfo.value)


def test_unknown_document_encoding_is_a_parse_error():
    with pytest.raises(ParseError) as excinfo:
        parse_catalog(b'<?xml version="1.0" encoding="bogus"?>\n<TS version="2.1" language="de"></TS>\n')
    assert excinfo.value.__cause__ is not None


@pytest.mark.parametrize(
    'document, message',
    [
        (b'<TS language="de"></TS>', 'missing format version'),
        (b'<TS version="9.0" language="de"></TS>', 'unsupported format version'),
        (b'<TS version="2.1"></TS>', 'missing locale declaration'),
        (b'<TS version="2.1" language="not a locale"></TS>', 'unknown locale declaration'),
        (b'<catalog version="2.1" language="de"></catalog>', 'unexpected root element'),
    ],
)
def test_root_declaration_errors(document, message):
    with pytest.raises(ParseError) as excinfo:
        parse_catalog(document)
    assert message in str(excinfo.value)


def test_missing_source_reports_element_path(make_ts):
    body = (
        '<context><name>A</name>'
        '<message><source>ok</source><translation/></message>'
        '<message><translation>x</translation></message>'
        '</context>'
    )
    with pytest.raises(ParseError) as excinfo:
        parse_catalog(make_ts('de', body))
    assert excinfo.value.position == 'TS/context[1]/message[2]'


def test_missing_translation_element_is_rejected(make_ts):
    body = '<context><name>A</name><message><source>ok</source></message></context>'
    with pytest.raises(ParseError, match='without translation element'):
        parse_catalog(make_ts('de', body))


def test_message_outside_context_is_rejected(make_ts):
    body = '<message><source>ok</source><translation/></message>'
    with pytest.raises(ParseError, match='outside of a context block'):
        parse_catalog(make_ts('de', body))


def test_context_without_name_is_rejected(make_ts):
    body = '<context><message><source>ok</source><translation/></message></context>'
    with pytest.raises(ParseError) as excinfo:
        parse_catalog(make_ts('de', body))
    assert excinfo.value.position == 'TS/context[1]'


def test_unknown_translation_type_is_rejected(make_ts):
    body = '<context><name>A</name><message><source>ok</source><translation type="draft"/></message></context>'
    with pytest.raises(ParseError, match='unknown translation type'):
        parse_catalog(make_ts('de', body))


def test_valid_locale_identifiers():
    assert is_valid_locale('de')
    assert is_valid_locale('de_DE')
    assert is_valid_locale('en-US')
    assert is_valid_locale('sr_Latn_RS')
    assert is_valid_locale('es_419')
    assert not is_valid_locale('')
    assert not is_valid_locale('german')
    assert not is_valid_locale(None)


def test_translation_unit_key_treats_empty_disambiguation_as_absent():
    unit = TranslationUnit(context='Window', source='style', comment='', extra_comment='')
    assert unit.key == ('Window', 'style', None)
