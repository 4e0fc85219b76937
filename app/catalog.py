"""
Catalog load pipeline.

fetch -> decode -> parse -> resolve columns -> map directions -> index.
Every call builds a fresh, immutable CatalogSnapshot; nothing is cached.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import httpx

from .columns import resolve_columns
from .config import Settings
from .csv_parser import parse_csv
from .directions import map_direction
from .errors import FetchError
from .models import CatalogSnapshot, ProgramRecord, ReportItem
from .normalize import decode_csv_bytes
from .rules import CATALOG_FIELDS, DEFAULT_DELIMITER, FIELD_ATTRIBUTES
from .search import build_search_index

logger = logging.getLogger("program-catalog.catalog")

FETCH_FAILED = "Не удалось загрузить данные CSV"
NO_CACHE_HEADERS = {"Cache-Control": "no-cache", "Pragma": "no-cache"}


def _is_remote(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


async def fetch_csv_bytes(
    source: str,
    *,
    timeout: float = 15.0,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> bytes:
    if not _is_remote(source):
        try:
            return await asyncio.to_thread(Path(source).read_bytes)
        except OSError as e:
            logger.error("cannot read %s: %s", source, e)
            raise FetchError(FETCH_FAILED) from e

    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport, follow_redirects=True) as client:
            r = await client.get(source, headers=NO_CACHE_HEADERS)
            r.raise_for_status()
            return r.content
    except httpx.HTTPError as e:
        logger.error("fetch %s failed: %s", source, e)
        raise FetchError(FETCH_FAILED) from e


def _to_record(row: Dict[str, str], columns: Dict[str, Optional[str]]) -> ProgramRecord:
    values = {attr: "" for attr in FIELD_ATTRIBUTES.values()}
    for field, header in columns.items():
        if header is not None:
            values[FIELD_ATTRIBUTES[field]] = row.get(header, "")

    values["macrogroup_name"] = map_direction(values["macrogroup_name"])
    values["search_index"] = build_search_index(
        program_name=values["program_name"],
        institution_name=values["institution_name"],
        fgos_code=values["fgos_code"],
        macrogroup_name=values["macrogroup_name"],
        city=values["city"],
    )
    return ProgramRecord(**values)


def build_snapshot(
    text: str,
    *,
    delimiter: str = DEFAULT_DELIMITER,
    fields: Iterable[str] = CATALOG_FIELDS,
) -> CatalogSnapshot:
    parsed = parse_csv(text, delimiter)
    columns = resolve_columns(parsed.headers, fields)

    warnings: List[ReportItem] = list(parsed.warnings)
    for field, header in columns.items():
        if header is None:
            # non-fatal: the field stays empty for every record
            warnings.append(ReportItem(
                column=field,
                issue="column_resolution_gap",
                action="empty_field",
            ))
            logger.warning("no header found for %s", field)

    for item in parsed.warnings:
        logger.warning("row %s: %s (%s cells)", item.row, item.issue, item.value)

    programs = tuple(_to_record(row, columns) for row in parsed.rows)
    return CatalogSnapshot(
        programs=programs,
        headers=tuple(parsed.headers),
        columns=tuple(columns.items()),
        warnings=tuple(warnings),
    )


async def load_catalog(
    settings: Settings,
    *,
    fields: Iterable[str] = CATALOG_FIELDS,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> CatalogSnapshot:
    logger.info("loading catalog from %s", settings.csv_source)
    raw = await fetch_csv_bytes(settings.csv_source, timeout=settings.fetch_timeout, transport=transport)
    snapshot = build_snapshot(decode_csv_bytes(raw), delimiter=settings.delimiter, fields=fields)
    logger.info("catalog loaded: %d programs", len(snapshot.programs))
    return snapshot
