# -*- coding: utf-8 -*-
"""
Error taxonomy for catalog loading and locale activation.

Lookups never raise; these only surface from load/activate/reload.
"""

from __future__ import annotations

from typing import Union


Position = Union[tuple[int, int], str]


class CatalogError(Exception):
    pass


class ParseError(CatalogError):
    """Malformed catalog document.

    ``position`` is a ``(line, column)`` pair for XML syntax errors or an
    element path such as ``TS/context[2]/message[3]`` for structural ones.
    """

    def __init__(self, message: str, position: Position | None = None):
        self.message = message
        self.position = position
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.position is None:
            return self.message
        if isinstance(self.position, tuple):
            line, column = self.position
            return f'{self.message} (line {line}, column {column})'
        return f'{self.message} (at {self.position})'


class LoadError(CatalogError):
    def __init__(self, locale: str, message: str, path: str | None = None):
        self.locale = locale
        self.path = path
        self.message = message
        where = f' [{path}]' if path else ''
        super().__init__(f'cannot load catalog for {locale!r}: {message}{where}')


class ActivationError(CatalogError):
    def __init__(self, locale: str, cause: CatalogError):
        self.locale = locale
        self.cause = cause
        super().__init__(f'cannot activate locale {locale!r}: {cause}')
