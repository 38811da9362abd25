"""CSV parser for linked datasets.

Supports quoted fields containing commas, newlines and doubled quotes,
enforces a consistent column count and caps the number of data rows.
Structural problems are reported through ``CsvParseResult``, not raised.
"""

import logging

from demokit_inference.config import DEFAULT_SETTINGS, InferenceSettings
from demokit_inference.dataset.models import CsvParseResult

logger = logging.getLogger(__name__)


def tokenize_csv(content: str) -> list[list[str]]:
    """Split CSV text into rows of raw (untrimmed) cells."""
    lines: list[list[str]] = []
    current_line: list[str] = []
    field: list[str] = []
    in_quotes = False
    i = 0
    length = len(content)

    while i < length:
        char = content[i]
        if in_quotes:
            if char == '"':
                if i + 1 < length and content[i + 1] == '"':
                    field.append('"')
                    i += 1
                else:
                    in_quotes = False
            else:
                field.append(char)
        elif char == '"':
            in_quotes = True
        elif char == ",":
            current_line.append("".join(field))
            field = []
        elif char == "\n":
            current_line.append("".join(field))
            lines.append(current_line)
            current_line = []
            field = []
        elif char != "\r":
            field.append(char)
        i += 1

    if field or current_line:
        current_line.append("".join(field))
        lines.append(current_line)

    return lines


def _is_blank(row: list[str]) -> bool:
    return len(row) == 1 and row[0].strip() == ""


def parse_csv(content: str, settings: InferenceSettings = DEFAULT_SETTINGS) -> CsvParseResult:
    """Parse CSV text into trimmed columns and rows."""
    if not content or not content.strip():
        return CsvParseResult(success=False, error="CSV content is empty")

    lines = tokenize_csv(content)
    if not lines:
        return CsvParseResult(success=False, error="No data found in CSV")

    columns = [c.strip() for c in lines[0]]
    seen: set[str] = set()
    for column in columns:
        if column in seen:
            return CsvParseResult(success=False, error=f'Duplicate column name: "{column}"')
        seen.add(column)

    data_lines = lines[1:]
    original_row_count = len(data_lines)
    rows: list[list[str]] = []

    for index, row in enumerate(data_lines):
        if _is_blank(row):
            continue
        if len(row) != len(columns):
            return CsvParseResult(
                success=False,
                error=f"Row {index + 2} has {len(row)} columns, expected {len(columns)}",
            )
        rows.append([cell.strip() for cell in row])
        if len(rows) >= settings.max_rows:
            break

    if not rows:
        return CsvParseResult(success=False, error="No data rows found in CSV")

    truncated = original_row_count > settings.max_rows
    if truncated:
        logger.info("CSV truncated to %d of %d rows", settings.max_rows, original_row_count)

    return CsvParseResult(
        success=True,
        columns=columns,
        rows=rows,
        truncated=truncated,
        original_row_count=original_row_count if truncated else None,
    )
