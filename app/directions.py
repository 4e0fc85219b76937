from __future__ import annotations

from .normalize import normalize_text
from .rules import DIRECTION_CANONICAL, DIRECTION_MAP


def map_direction(raw: str) -> str:
    # Unknown labels pass through; they never show up in the direction facet.
    return DIRECTION_MAP.get(normalize_text(raw)) or raw or ""


def is_canonical_direction(value: str) -> bool:
    return value in DIRECTION_CANONICAL
