"""Synthesize conventional CRUD mappings when no API schema is available."""

from collections.abc import Iterable

from demokit_inference.config import DEFAULT_LOOKUP_FIELD, DEFAULT_SETTINGS, InferenceSettings
from demokit_inference.mapping.matcher import pluralize
from demokit_inference.mapping.models import EndpointMapping

# (method, has id segment, response type, label)
CRUD_OPERATIONS = (
    ("GET", False, "collection", "list"),
    ("GET", True, "single", "get"),
    ("POST", False, "single", "create"),
    ("PUT", True, "single", "update"),
    ("DELETE", True, "single", "delete"),
)


def infer_mappings_from_models(
    models: Iterable[str],
    base_path: str | None = None,
    settings: InferenceSettings = DEFAULT_SETTINGS,
) -> list[EndpointMapping]:
    """Generate list/get/create/update/delete mappings for every model name.

    ``models`` may be any iterable of names; a dict contributes its keys.
    """
    base = (settings.default_base_path if base_path is None else base_path).rstrip("/")
    mappings = []

    for model in models:
        collection = f"{base}/{pluralize(model.lower())}"
        for method, with_id, response_type, label in CRUD_OPERATIONS:
            pattern = f"{collection}/:{DEFAULT_LOOKUP_FIELD}" if with_id else collection
            lookup = DEFAULT_LOOKUP_FIELD if response_type == "single" else None
            mappings.append(
                EndpointMapping(
                    method=method,
                    pattern=pattern,
                    source_model=model,
                    response_type=response_type,
                    lookup_field=lookup,
                    lookup_param=lookup,
                    confidence=settings.confidence_generated,
                    is_auto_generated=True,
                    reason=f'Auto-generated {label} endpoint for model "{model}"',
                )
            )

    return mappings
