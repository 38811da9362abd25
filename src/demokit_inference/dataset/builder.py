"""Assemble typed Dataset records from raw CSV text."""

import re
import secrets
import string
import time
from collections.abc import Iterable
from datetime import datetime, timezone

from demokit_inference.config import DEFAULT_SETTINGS, MAX_DATASET_NAME_LENGTH, InferenceSettings
from demokit_inference.dataset.column_types import infer_column_types
from demokit_inference.dataset.csv_parser import parse_csv
from demokit_inference.dataset.models import Dataset

_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9\s\-_]+$")
_BASE36 = string.digits + string.ascii_lowercase


def _to_base36(number: int) -> str:
    digits = []
    while number:
        number, rem = divmod(number, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits)) or "0"


def generate_dataset_id() -> str:
    """Return an id like ``ds_lz3k9q1a4f7xk2``: base36 millis plus 6 random chars."""
    timestamp = _to_base36(int(time.time() * 1000))
    random_part = "".join(secrets.choice(_BASE36) for _ in range(6))
    return f"ds_{timestamp}{random_part}"


def validate_dataset_name(name: str, existing_names: Iterable[str] = ()) -> str | None:
    """Return an error message for an unusable name, or None when it is valid."""
    trimmed = name.strip()
    if not trimmed:
        return "Dataset name is required"
    if len(trimmed) > MAX_DATASET_NAME_LENGTH:
        return f"Dataset name must be {MAX_DATASET_NAME_LENGTH} characters or less"
    if not _NAME_PATTERN.match(trimmed):
        return "Dataset name can only contain letters, numbers, spaces, hyphens, and underscores"
    if trimmed in set(existing_names):
        return "A dataset with this name already exists"
    return None


def build_dataset(
    name: str,
    content: str,
    description: str | None = None,
    existing_names: Iterable[str] = (),
    settings: InferenceSettings = DEFAULT_SETTINGS,
) -> Dataset:
    """Parse ``content`` and return a typed Dataset.

    Raises ValueError when the name is invalid or the CSV cannot be parsed.
    """
    name_error = validate_dataset_name(name, existing_names)
    if name_error:
        raise ValueError(name_error)

    result = parse_csv(content, settings)
    if not result.success:
        raise ValueError(result.error)

    return Dataset(
        id=generate_dataset_id(),
        name=name.strip(),
        columns=result.columns,
        column_types=infer_column_types(result.columns, result.rows, settings),
        rows=result.rows,
        created_at=datetime.now(timezone.utc).isoformat(),
        description=description,
        truncated=result.truncated,
        original_row_count=result.original_row_count,
    )
