"""Endpoint classification: target resource, response shape and lookup key."""

import re

from demokit_inference.config import API_PREFIX_SEGMENTS, DEFAULT_LOOKUP_FIELD, VERSION_SEGMENT_PATTERN
from demokit_inference.mapping.models import ResponseType
from demokit_inference.mapping.paths import is_param_segment, normalize_path_pattern, split_segments

_VERSION_SEGMENT = re.compile(VERSION_SEGMENT_PATTERN, re.IGNORECASE)


def _is_prefix_segment(segment: str) -> bool:
    return segment.lower() in API_PREFIX_SEGMENTS or bool(_VERSION_SEGMENT.match(segment))


def extract_model_from_path(path: str) -> str | None:
    """Return the last static segment of ``path``, lower-cased.

    ``/api/v1/users/{userId}/orders/{orderId}`` -> ``orders``.
    Returns None when only prefix or parameter segments remain.
    """
    segments = [
        s
        for s in split_segments(normalize_path_pattern(path))
        if not is_param_segment(s) and not _is_prefix_segment(s)
    ]
    if not segments:
        return None
    return segments[-1].lower()


def determine_response_type(method: str, pattern: str, params: list[str]) -> ResponseType:
    """GET on a path ending in a parameter is a single record, other GETs a collection.

    Every other method reads or writes a single record.
    """
    if method.upper() != "GET":
        return "single"

    segments = split_segments(pattern)
    if segments and is_param_segment(segments[-1]):
        return "single"
    return "collection"


def determine_lookup_field(params: list[str], model_hint: str | None = None) -> str:
    """The last path parameter identifies the record, whatever its name."""
    if not params:
        return DEFAULT_LOOKUP_FIELD
    return params[-1]
