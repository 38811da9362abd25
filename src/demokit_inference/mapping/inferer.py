"""Infer endpoint-to-model mappings from a parsed API schema.

Every endpoint ends up in exactly one of ``mappings``, ``unmapped`` or
``skipped``, in schema order. Endpoints are processed independently.
"""

import logging
from collections.abc import Sequence

from demokit_inference.config import DEFAULT_SETTINGS, InferenceSettings
from demokit_inference.mapping.classifier import (
    determine_lookup_field,
    determine_response_type,
    extract_model_from_path,
)
from demokit_inference.mapping.matcher import find_matching_model
from demokit_inference.mapping.models import (
    EndpointMapping,
    InferenceResult,
    ModelMatch,
    SkippedEndpoint,
    UnmappedEndpoint,
)
from demokit_inference.mapping.paths import extract_path_params, normalize_path_pattern
from demokit_inference.parser.base import ApiEndpoint, ApiSchema

logger = logging.getLogger(__name__)

_STRATEGY_LABELS = {
    "exact": "exact match",
    "plural": "singular/plural match",
    "normalized": "normalized name match",
}


def match_skip_rule(endpoint: ApiEndpoint, settings: InferenceSettings = DEFAULT_SETTINGS) -> str | None:
    """Return the skip rule ``endpoint`` falls under, or None."""
    method = endpoint.method.upper()
    if method in settings.skip_methods:
        return f"{method} method"

    path = endpoint.path.lower()
    for pattern in settings.skip_path_patterns:
        if pattern.lower() in path:
            return pattern
    return None


def _build_mapping(endpoint: ApiEndpoint, pattern: str, params: list[str], match: ModelMatch, candidate: str) -> EndpointMapping:
    method = endpoint.method.upper()
    response_type = determine_response_type(method, pattern, params)

    lookup = None
    if response_type == "single":
        lookup = determine_lookup_field(params, match.model)

    reason = f'Path resource "{candidate}" matched model "{match.model}" ({_STRATEGY_LABELS[match.strategy]})'
    if lookup is not None:
        reason += f', {response_type} record looked up by "{lookup}"'
    else:
        reason += f", {response_type} response"

    return EndpointMapping(
        method=method,
        pattern=pattern,
        source_model=match.model,
        response_type=response_type,
        lookup_field=lookup,
        lookup_param=lookup,
        confidence=match.confidence,
        is_auto_generated=True,
        reason=reason,
    )


def infer_endpoint_mappings(
    schema: ApiSchema,
    available_models: Sequence[str],
    settings: InferenceSettings = DEFAULT_SETTINGS,
) -> InferenceResult:
    """Map each schema endpoint to one of ``available_models``."""
    result = InferenceResult(available_models=list(available_models))

    for endpoint in schema.endpoints:
        rule = match_skip_rule(endpoint, settings)
        if rule is not None:
            logger.debug("Skipping %s %s (rule %r)", endpoint.method, endpoint.path, rule)
            result.skipped.append(
                SkippedEndpoint(
                    method=endpoint.method,
                    path=endpoint.path,
                    reason=f'Matches skip pattern "{rule}"',
                )
            )
            continue

        pattern = normalize_path_pattern(endpoint.path)
        params = extract_path_params(pattern)

        candidate = extract_model_from_path(pattern)
        if candidate is None:
            result.unmapped.append(
                UnmappedEndpoint(
                    method=endpoint.method,
                    path=endpoint.path,
                    reason="Could not derive a model name from path",
                )
            )
            continue

        match = find_matching_model(candidate, available_models, settings)
        if match is None:
            logger.debug("No model for %s %s (candidate %r)", endpoint.method, endpoint.path, candidate)
            result.unmapped.append(
                UnmappedEndpoint(
                    method=endpoint.method,
                    path=endpoint.path,
                    reason=f'No matching model found for "{candidate}"',
                    suggested_model=candidate,
                )
            )
            continue

        result.mappings.append(_build_mapping(endpoint, pattern, params, match, candidate))

    logger.info(
        "Inferred %d mappings (%d unmapped, %d skipped) from %d endpoints",
        len(result.mappings),
        len(result.unmapped),
        len(result.skipped),
        len(schema.endpoints),
    )
    return result
