"""Path template normalization.

OpenAPI writes path parameters as ``{name}``; mappings use the ``:name``
form throughout.
"""

import re

# Parameter names run to the next "/", brace or colon, e.g. {user-id} -> :user-id.
_NAME = r"[^/{}:]+"
_BRACE_PARAM = re.compile(r"\{(" + _NAME + r")\}")
_COLON_PARAM = re.compile(r":(" + _NAME + r")")


def normalize_path_pattern(path: str) -> str:
    """Replace every ``{name}`` token with ``:name``."""
    return _BRACE_PARAM.sub(r":\1", path)


def extract_path_params(pattern: str) -> list[str]:
    """Return ``:name`` parameter names in left-to-right order, duplicates included."""
    return _COLON_PARAM.findall(pattern)


def is_param_segment(segment: str) -> bool:
    return segment.startswith(":") or (segment.startswith("{") and segment.endswith("}"))


def split_segments(path: str) -> list[str]:
    return [s for s in path.split("/") if s]
