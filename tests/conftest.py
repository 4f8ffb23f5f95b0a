import os
import shutil
import sys
from pathlib import Path

import pytest

# Add project root to sys.path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

SHIPPED_I18N_DIR = Path(__file__).resolve().parents[1] / 'i18n'


class DummySettings:
    def __init__(self, data=None):
        self.data = dict(data or {})
        self.synced = 0

    def value(self, key, default=None, **kwargs):
        return self.data.get(key, default)

    def setValue(self, key, value):
        self.data[key] = value

    def sync(self):
        self.synced += 1


def ts_document(language, body, version='2.1'):
    return (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        '<!DOCTYPE TS>\n'
        f'<TS version="{version}" language="{language}">\n'
        f'{body}'
        '</TS>\n'
    ).encode('utf-8')


@pytest.fixture
def catalog_dir(tmp_path):
    # copy of the shipped catalogs
    target = tmp_path / 'i18n'
    target.mkdir()
    for path in SHIPPED_I18N_DIR.glob('*.ts'):
        shutil.copy(path, target / path.name)
    return target


@pytest.fixture
def make_ts():
    return ts_document


@pytest.fixture
def settings():
    return DummySettings()


@pytest.fixture
def manager(catalog_dir, settings):
    from launcher.i18n.manager import I18NManager

    return I18NManager(catalog_dir=catalog_dir, fallback_locales=('en',), settings=settings)
