"""Tunable constants for mapping inference and dataset parsing.

Module-level constants are the defaults. ``InferenceSettings`` bundles them
so callers (and the CLI's ``--config`` file) can override individual values
without touching the matching logic.
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

# Endpoints whose path contains any of these (case-insensitive) are skipped.
SKIP_PATH_PATTERNS = ("health", "healthz", "auth/", "oauth", "webhook", "hooks/", "graphql")
SKIP_METHODS = ("HEAD", "OPTIONS")

# Path segments that never name a resource.
API_PREFIX_SEGMENTS = ("api",)
VERSION_SEGMENT_PATTERN = r"^v\d+$"

CONFIDENCE_EXACT = 100
CONFIDENCE_PLURAL = 90
CONFIDENCE_NORMALIZED = 80
CONFIDENCE_GENERATED = 70

DEFAULT_BASE_PATH = "/api"
DEFAULT_LOOKUP_FIELD = "id"

MAX_ROWS = 1000
SAMPLE_SIZE = 100
TYPE_MATCH_THRESHOLD = 0.8

MAX_DATASET_NAME_LENGTH = 50


class InferenceSettings(BaseModel):
    """Overridable copy of the module defaults."""

    skip_path_patterns: list[str] = Field(default_factory=lambda: list(SKIP_PATH_PATTERNS))
    skip_methods: list[str] = Field(default_factory=lambda: list(SKIP_METHODS))
    confidence_exact: int = Field(default=CONFIDENCE_EXACT, ge=0, le=100)
    confidence_plural: int = Field(default=CONFIDENCE_PLURAL, ge=0, le=100)
    confidence_normalized: int = Field(default=CONFIDENCE_NORMALIZED, ge=0, le=100)
    confidence_generated: int = Field(default=CONFIDENCE_GENERATED, ge=0, le=100)
    default_base_path: str = DEFAULT_BASE_PATH
    max_rows: int = Field(default=MAX_ROWS, gt=0)
    sample_size: int = Field(default=SAMPLE_SIZE, gt=0)
    type_match_threshold: float = Field(default=TYPE_MATCH_THRESHOLD, gt=0, le=1)


DEFAULT_SETTINGS = InferenceSettings()


def load_settings(file_path: Path | None = None) -> InferenceSettings:
    """Load settings from a YAML file, falling back to defaults for missing keys."""
    if file_path is None:
        return InferenceSettings()

    data = yaml.safe_load(file_path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {file_path} must contain a mapping")
    return InferenceSettings(**data)
