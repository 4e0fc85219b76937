"""
Text normalization.

Two strengths:
- clean_text: display-safe cleanup (whitespace, dashes, invisible marks, typos).
- normalize_for_search: lowercase, ё folded, only [a-z0-9а-я] runs kept.

All functions are total and idempotent. decode_csv_bytes turns fetched bytes
into text before parsing.
"""

from __future__ import annotations

import re
from typing import Any

from charset_normalizer import from_bytes

from .errors import ParseError
from .rules import TYPO_FIXES

_INVISIBLE = re.compile("[\u200b-\u200d\ufeff]")
_DASHES = re.compile("[\u2013\u2014\u2212]")
_WS = re.compile(r"\s+")
_NON_SEARCH = re.compile(r"[^a-z0-9а-я]+")


def clean_text(value: Any) -> str:
    text = "" if value is None else str(value)
    text = _INVISIBLE.sub("", text)
    text = _DASHES.sub("-", text)
    text = _WS.sub(" ", text).strip()
    for wrong, right in TYPO_FIXES.items():
        text = text.replace(wrong, right)
    return text


def normalize_text(value: Any) -> str:
    return clean_text(value).lower()


def normalize_for_search(value: Any) -> str:
    text = normalize_text(value).replace("ё", "е")
    text = _NON_SEARCH.sub(" ", text)
    return _WS.sub(" ", text).strip()


def decode_csv_bytes(raw: bytes) -> str:
    """
    Decode CSV bytes to text.

    UTF-8 (BOM tolerated) is expected; anything else goes through
    charset-normalizer's best guess.
    """
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        pass

    match = from_bytes(raw).best()
    if match is None:
        raise ParseError("Не удалось определить кодировку CSV")
    return str(match)
