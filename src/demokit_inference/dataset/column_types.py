"""Column type inference from sampled cell values."""

import re
from collections.abc import Callable, Sequence

from dateutil import parser as date_parser

from demokit_inference.config import DEFAULT_SETTINGS, InferenceSettings
from demokit_inference.dataset.models import ColumnType

_INTEGER = re.compile(r"^-?\d+$")
_NUMBER = re.compile(r"^-?\d+\.?\d*$")
_BOOLEAN = re.compile(r"^(true|false|yes|no|1|0)$", re.IGNORECASE)
_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}")
_SLASH_DATE = re.compile(r"^\d{1,2}/\d{1,2}/\d{2,4}$")
_URL = re.compile(r"^https?://.+")
_EMAIL = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_DIGIT = re.compile(r"\d")
_DATE_SEPARATOR = re.compile(r"[-/,\s]")


def is_integer(value: str) -> bool:
    return bool(_INTEGER.match(value))


def is_number(value: str) -> bool:
    return bool(_NUMBER.match(value))


def is_boolean(value: str) -> bool:
    return bool(_BOOLEAN.match(value))


def is_date(value: str) -> bool:
    if _ISO_DATE.match(value) or _SLASH_DATE.match(value):
        return True
    if len(value) <= 4 or is_number(value):
        return False
    # dateutil also accepts bare month names and decimals.
    if not (_DIGIT.search(value) and _DATE_SEPARATOR.search(value)):
        return False
    try:
        date_parser.parse(value)
    except (ValueError, OverflowError):
        return False
    return True


def is_url(value: str) -> bool:
    return bool(_URL.match(value))


def is_email(value: str) -> bool:
    return bool(_EMAIL.match(value))


# Most specific first; the first type clearing the threshold wins.
TYPE_CHECKS: list[tuple[ColumnType, Callable[[str], bool]]] = [
    (ColumnType.EMAIL, is_email),
    (ColumnType.URL, is_url),
    (ColumnType.DATE, is_date),
    (ColumnType.BOOLEAN, is_boolean),
    (ColumnType.INTEGER, is_integer),
    (ColumnType.NUMBER, is_number),
]


def infer_column_type(values: Sequence[str], settings: InferenceSettings = DEFAULT_SETTINGS) -> ColumnType:
    """Classify one column from its sample values."""
    non_empty = [v for v in values if v is not None and v.strip() != ""]
    if not non_empty:
        return ColumnType.STRING

    threshold = len(non_empty) * settings.type_match_threshold
    for column_type, check in TYPE_CHECKS:
        matches = sum(1 for v in non_empty if check(v))
        if matches >= threshold:
            return column_type
    return ColumnType.STRING


def infer_column_types(
    columns: Sequence[str],
    rows: Sequence[Sequence[str]],
    settings: InferenceSettings = DEFAULT_SETTINGS,
) -> list[ColumnType]:
    """One type per column, each sampled from the first ``sample_size`` rows."""
    sample = rows[: settings.sample_size]
    return [
        infer_column_type([row[index] for row in sample if index < len(row)], settings)
        for index in range(len(columns))
    ]
