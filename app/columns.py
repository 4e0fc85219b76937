from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

from .normalize import normalize_text
from .rules import COLUMN_CANDIDATES


def resolve_column(headers: Sequence[str], candidates: Iterable[str]) -> Optional[str]:
    """Return the literal header matching the first usable candidate, or None."""
    normalized_headers: List[str] = [normalize_text(h) for h in headers]
    for candidate in candidates:
        wanted = normalize_text(candidate)
        if wanted in normalized_headers:
            return headers[normalized_headers.index(wanted)]
    return None


def resolve_columns(headers: Sequence[str], fields: Iterable[str]) -> Dict[str, Optional[str]]:
    return {field: resolve_column(headers, COLUMN_CANDIDATES[field]) for field in fields}
