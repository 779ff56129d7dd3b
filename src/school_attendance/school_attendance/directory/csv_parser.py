"""Parser for the CSV export of the published roster spreadsheet.

The export is small and occasionally hand-edited, so parsing never raises:
broken quoting just yields best-effort field boundaries.
"""

from __future__ import annotations

import re

from .headers import normalize_header

_LINE_BREAK = re.compile(r"\r?\n")

def _clean(value: str) -> str:
    # Second unescape pass; normally a no-op after the scan below.
    value = value.strip()
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        value = value[1:-1]
    return value.replace('""', '"')


def parse_line(line: str) -> list[str]:
    values: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0
    while i < len(line):
        char = line[i]
        if char == '"':
            if in_quotes and line[i + 1:i + 2] == '"':
                current.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            values.append("".join(current))
            current = []
        else:
            current.append(char)
        i += 1
    values.append("".join(current))
    return [_clean(v) for v in values]

def parse_csv(text: str) -> list[dict[str, str]]:
    """Turn CSV text into one dict per data row keyed by normalized headers.

    Rows shorter than the header simply lack the trailing keys.
    """
    lines = [line for line in _LINE_BREAK.split(text) if line.strip()]
    if len(lines) < 2:
        return []

    headers = [normalize_header(h) for h in parse_line(lines[0])]
    rows: list[dict[str, str]] = []
    for line in lines[1:]:
        values = parse_line(line)
        row: dict[str, str] = {}
        for index, header in enumerate(headers):
            if header and index < len(values):
                row[header] = values[index]
        rows.append(row)
    return rows
