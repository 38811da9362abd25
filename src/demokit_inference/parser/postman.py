"""Postman Collection v2.1 parser.

Parses Postman exported JSON files into an ApiSchema. Postman writes path
variables as ``:name`` segments, which mapping inference accepts as-is.
"""

import json
import logging
from pathlib import Path

from .base import ApiEndpoint, ApiSchema, Param, SchemaInfo

logger = logging.getLogger(__name__)


def parse_postman(file_path: Path) -> ApiSchema:
    """Parse a Postman Collection v2.1 file into an ApiSchema."""
    text = file_path.read_text(encoding="utf-8")
    collection = json.loads(text)

    endpoints: list[ApiEndpoint] = []
    _parse_items(collection.get("item", []), endpoints)
    logger.debug("Parsed %d requests from Postman collection", len(endpoints))

    info = collection.get("info", {})
    return ApiSchema(
        info=SchemaInfo(title=info.get("name", ""), version=str(info.get("version", ""))),
        endpoints=endpoints,
    )


def _parse_items(items: list[dict], endpoints: list[ApiEndpoint]) -> None:
    """Recursively parse items (supports folders)."""
    for item in items:
        if "item" in item:
            _parse_items(item["item"], endpoints)
        elif "request" in item:
            endpoints.append(_parse_request(item))


def _parse_request(item: dict) -> ApiEndpoint:
    req = item["request"]
    method = req["method"].upper()
    url = req.get("url", {})
    if isinstance(url, str):
        url = {"raw": url, "path": _path_from_raw(url)}

    segments = url.get("path", [])
    path = "/" + "/".join(segments)

    return ApiEndpoint(
        method=method,
        path=path,
        summary=item.get("name", ""),
        path_params=_parse_path_variables(segments, url.get("variable", [])),
        query_params=_parse_query_params(url.get("query", [])),
        request_body=_parse_body(req.get("body")),
        responses={},
        tags=[],
    )


def _path_from_raw(raw: str) -> list[str]:
    """Split a raw Postman URL like ``{{baseUrl}}/users/:id?x=1`` into path segments."""
    without_query = raw.split("?", 1)[0]
    if "://" in without_query:
        without_query = without_query.split("://", 1)[1]
    segments = without_query.split("/")[1:]
    return [s for s in segments if s]


def _parse_path_variables(segments: list[str], variables: list[dict]) -> list[Param]:
    descriptions = {v.get("key"): v.get("description", "") for v in variables}
    return [
        Param(
            name=s[1:],
            location="path",
            required=True,
            param_type="string",
            description=descriptions.get(s[1:], "") or "",
        )
        for s in segments
        if s.startswith(":")
    ]


def _parse_query_params(query: list[dict]) -> list[Param]:
    return [
        Param(
            name=q["key"],
            location="query",
            required=False,
            param_type="string",
            description=q.get("description", ""),
        )
        for q in query
    ]


def _parse_body(body: dict | None) -> dict | None:
    if not body:
        return None
    if body.get("mode") == "raw":
        try:
            data = json.loads(body["raw"])
        except (json.JSONDecodeError, KeyError):
            return None
        return data if isinstance(data, dict) else None
    return None
