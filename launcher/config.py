# -*- coding: utf-8 -*-
"""
Launcher localization settings.
"""

from __future__ import annotations

import os
import sys


# PyInstaller packaging keeps catalogs next to the executable
if getattr(sys, 'frozen', False):
    BASE_DIR = os.path.dirname(sys.executable)
else:
    BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

I18N_DIR = os.environ.get('LAUNCHER_I18N_DIR') or os.path.join(BASE_DIR, 'i18n')
CATALOG_DOMAIN = 'widgetsboxmodel'
CATALOG_SUFFIX = '.ts'

DEFAULT_LOCALE = 'en'
FALLBACK_LOCALES = tuple(
    part.strip()
    for part in os.environ.get('LAUNCHER_FALLBACK_LOCALES', 'en').split(',')
    if part.strip()
)

SUPPORTED_FORMAT_VERSIONS = ('2.0', '2.1')

# QSettings storage
SETTINGS_ORGANIZATION = 'WidgetsBox'
SETTINGS_APPLICATION = 'Launcher'
SETTINGS_LANGUAGE_KEY = 'ui/language'
