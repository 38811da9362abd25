"""OpenAPI / Swagger document parser.

Parses OpenAPI 3.x and Swagger 2.0 documents into an ApiSchema.
"""

import logging
from pathlib import Path

import yaml

from .base import ApiEndpoint, ApiSchema, Param, SchemaInfo

logger = logging.getLogger(__name__)

HTTP_METHODS = ("GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS")


def parse_openapi(file_path: Path) -> ApiSchema:
    """Parse an OpenAPI/Swagger file into an ApiSchema."""
    text = file_path.read_text(encoding="utf-8")
    doc = yaml.safe_load(text)
    if not isinstance(doc, dict):
        raise ValueError(f"{file_path} is not an OpenAPI document")
    return parse_openapi_document(doc)


def parse_openapi_document(doc: dict) -> ApiSchema:
    """Convert an already-loaded OpenAPI/Swagger mapping into an ApiSchema."""
    info = doc.get("info") or {}
    endpoints = []
    paths = doc.get("paths") or {}

    for path, methods in paths.items():
        shared_params = methods.get("parameters", [])
        for method, operation in methods.items():
            if method.upper() not in HTTP_METHODS:
                continue
            if not isinstance(operation, dict):
                continue

            params = _parse_parameters(_merge_parameters(shared_params, operation.get("parameters", [])))
            endpoints.append(
                ApiEndpoint(
                    method=method.upper(),
                    path=path,
                    summary=operation.get("summary", ""),
                    path_params=[p for p in params if p.location == "path"],
                    query_params=[p for p in params if p.location == "query"],
                    request_body=_parse_request_body(operation.get("requestBody")),
                    responses=_parse_responses(operation.get("responses", {})),
                    tags=operation.get("tags", []),
                )
            )

    logger.debug("Parsed %d endpoints from OpenAPI document", len(endpoints))
    return ApiSchema(
        info=SchemaInfo(title=info.get("title", ""), version=str(info.get("version", ""))),
        endpoints=endpoints,
    )


def _merge_parameters(shared: list[dict], own: list[dict]) -> list[dict]:
    """Operation-level parameters override path-level ones with the same name and location."""
    own_keys = {(p.get("name"), p.get("in")) for p in own if "$ref" not in p}
    merged = [p for p in shared if (p.get("name"), p.get("in")) not in own_keys]
    return merged + own


def _parse_parameters(params: list[dict]) -> list[Param]:
    result = []
    for p in params:
        if "$ref" in p:
            logger.debug("Skipping unresolved parameter reference %s", p["$ref"])
            continue
        # Swagger 2.0 keeps type information on the parameter itself
        schema = p.get("schema", p)
        constraints = {}
        for key in ("minimum", "maximum", "minLength", "maxLength", "pattern", "enum"):
            if key in schema:
                constraints[key] = schema[key]

        location = p.get("in", "query")
        result.append(
            Param(
                name=p["name"],
                location=location,
                required=p.get("required", location == "path"),
                param_type=schema.get("type", "string"),
                description=p.get("description", ""),
                constraints=constraints,
            )
        )
    return result


def _parse_request_body(body: dict | None) -> dict | None:
    if not body:
        return None
    content = body.get("content", {})
    for content_type in ("application/json", "multipart/form-data"):
        if content_type in content:
            return content[content_type].get("schema")
    # Fallback: return first available schema
    for ct_data in content.values():
        return ct_data.get("schema")
    return None


def _parse_responses(responses: dict) -> dict:
    result = {}
    for status_code, resp in responses.items():
        result[str(status_code)] = {"description": (resp or {}).get("description", "")}
    return result
