# -*- coding: utf-8 -*-
"""
Numerus form selection for plural messages.
"""

from __future__ import annotations

from typing import Callable


PluralRule = Callable[[int], int]


def _single(n: int) -> int:
    return 0


def _one_other(n: int) -> int:
    return 0 if n == 1 else 1


def _zero_one_other(n: int) -> int:
    # French style: 0 and 1 share the singular form
    return 0 if n <= 1 else 1


def _slavic(n: int) -> int:
    if n % 10 == 1 and n % 100 != 11:
        return 0
    if 2 <= n % 10 <= 4 and not 12 <= n % 100 <= 14:
        return 1
    return 2


def _polish(n: int) -> int:
    if n == 1:
        return 0
    if 2 <= n % 10 <= 4 and not 12 <= n % 100 <= 14:
        return 1
    return 2


def _czech(n: int) -> int:
    if n == 1:
        return 0
    if 2 <= n <= 4:
        return 1
    return 2


PLURAL_RULES: dict[str, PluralRule] = {
    **{lang: _single for lang in ('ja', 'ko', 'zh', 'vi', 'th', 'id', 'ms')},
    **{lang: _zero_one_other for lang in ('fr', 'pt_BR')},
    **{lang: _slavic for lang in ('ru', 'uk', 'be', 'sr', 'hr', 'bs')},
    'pl': _polish,
    'cs': _czech,
    'sk': _czech,
}


def plural_rule(locale: str) -> PluralRule:
    normalized = (locale or '').replace('-', '_')
    if normalized in PLURAL_RULES:
        return PLURAL_RULES[normalized]
    language = normalized.split('_', 1)[0].lower()
    return PLURAL_RULES.get(language, _one_other)


def plural_index(locale: str, n: int) -> int:
    if n < 0:
        return 0
    return plural_rule(locale)(n)
