"""
Delimited-text parser.

Quoting follows RFC 4180: a quoted field may hold the delimiter and line
breaks, and "" inside quotes is one literal quote. Rows end at \\n, \\r\\n or a
bare \\r outside quotes. Rows made only of blank cells are spacer lines and
are dropped.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from .errors import ParseError
from .models import ReportItem
from .normalize import clean_text
from .rules import DEFAULT_DELIMITER


@dataclass
class ParsedCsv:
    headers: List[str]
    rows: List[Dict[str, str]]
    warnings: List[ReportItem] = field(default_factory=list)


def _is_blank(row: List[str]) -> bool:
    # cells that clean to nothing (whitespace, BOM, zero-width marks) count as blank
    return all(clean_text(cell) == "" for cell in row)


def parse_rows(text: str, delimiter: str = DEFAULT_DELIMITER) -> List[List[str]]:
    """Split text into rows of raw cells. Cell content is not cleaned."""
    if len(delimiter) != 1:
        raise ValueError(f"delimiter must be a single character, got {delimiter!r}")

    rows: List[List[str]] = []
    row: List[str] = []
    current: List[str] = []
    inside_quotes = False
    i = 0
    n = len(text)

    while i < n:
        char = text[i]
        nxt = text[i + 1] if i + 1 < n else ""

        if char == '"':
            if inside_quotes and nxt == '"':
                current.append('"')
                i += 1
            else:
                inside_quotes = not inside_quotes
        elif char == delimiter and not inside_quotes:
            row.append("".join(current))
            current = []
        elif char in "\r\n" and not inside_quotes:
            if char == "\r" and nxt == "\n":
                i += 1
            row.append("".join(current))
            if not _is_blank(row):
                rows.append(row)
            row = []
            current = []
        else:
            current.append(char)
        i += 1

    # last line without a trailing newline
    if current or row:
        row.append("".join(current))
        if not _is_blank(row):
            rows.append(row)

    return rows


def parse_csv(text: str, delimiter: str = DEFAULT_DELIMITER) -> ParsedCsv:
    """
    Parse CSV text into header-keyed rows.

    Rules:
    - The first retained row is the header row; headers are cleaned, not lowercased.
    - Short rows are padded with "" (warning row_too_short).
    - Long rows keep the first len(headers) cells (warning row_too_long).
    - No header row at all is a ParseError; a header-only file yields no rows.
    """
    raw_rows = parse_rows(text, delimiter)
    if not raw_rows:
        raise ParseError("CSV не содержит строки заголовков")

    headers = [clean_text(h) for h in raw_rows[0]]
    width = len(headers)
    warnings: List[ReportItem] = []
    data: List[Dict[str, str]] = []

    # row numbers in warnings count retained rows, header = 1
    for line_no, values in enumerate(raw_rows[1:], start=2):
        if len(values) < width:
            warnings.append(ReportItem(
                row=line_no,
                issue="row_too_short",
                value=str(len(values)),
                action=f"padded_to_{width}",
            ))
        elif len(values) > width:
            warnings.append(ReportItem(
                row=line_no,
                issue="row_too_long",
                value=str(len(values)),
                action="extra_cells_dropped",
            ))

        entry: Dict[str, str] = {}
        for index, header in enumerate(headers):
            entry[header] = clean_text(values[index]) if index < len(values) else ""
        data.append(entry)

    return ParsedCsv(headers=headers, rows=data, warnings=warnings)
