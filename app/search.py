"""
Search index construction.

The index is the normalized text of the searchable fields followed by
initials tokens, so "мгу" finds "Московский государственный университет".
"""

from __future__ import annotations

import re

from .normalize import normalize_for_search

_WORD = re.compile(r"[A-Za-zА-Яа-яЁё]+")


def build_initials(value: str) -> str:
    words = _WORD.findall(value or "")
    return normalize_for_search("".join(word[0] for word in words if len(word) > 2))


def build_search_index(
    program_name: str = "",
    institution_name: str = "",
    fgos_code: str = "",
    macrogroup_name: str = "",
    city: str = "",
) -> str:
    base = normalize_for_search(
        " ".join([program_name, institution_name, fgos_code, macrogroup_name, city])
    )
    initials = " ".join(
        token for token in (build_initials(institution_name), build_initials(program_name)) if token
    )
    return f"{base} {initials}".strip()
