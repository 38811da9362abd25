"""Auto-detect API schema format and load it."""

import json
from pathlib import Path

import yaml

from .base import ApiSchema
from .postman import parse_postman
from .swagger import parse_openapi

SCHEMA_FORMATS = ("swagger", "postman")


def detect_format(file_path: Path) -> str | None:
    """Detect the format of an API schema file.

    Returns: 'swagger', 'postman', or None when the file is neither.
    """
    text = file_path.read_text(encoding="utf-8")

    # Try YAML/JSON parsing
    try:
        data = yaml.safe_load(text)
        if isinstance(data, dict):
            return _format_of(data)
    except yaml.YAMLError:
        pass

    # Try JSON specifically (for files not parseable as YAML)
    try:
        data = json.loads(text)
        if isinstance(data, dict):
            return _format_of(data)
    except (json.JSONDecodeError, ValueError):
        pass

    return None


def _format_of(data: dict) -> str | None:
    if "openapi" in data or "swagger" in data:
        return "swagger"
    if "info" in data and "_postman_id" in (data.get("info") or {}):
        return "postman"
    return None


def load_schema(file_path: Path, fmt: str = "auto") -> ApiSchema:
    """Parse a schema file, detecting its format when ``fmt`` is 'auto'."""
    if fmt == "auto":
        fmt = detect_format(file_path)

    if fmt == "swagger":
        return parse_openapi(file_path)
    elif fmt == "postman":
        return parse_postman(file_path)
    raise ValueError(f"Unrecognized schema format for {file_path}; expected OpenAPI/Swagger or Postman")
