"""Unified data models for parsed API schemas.

The OpenAPI and Postman loaders convert their input into these models,
which are the input contract for mapping inference.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SchemaModel(BaseModel):
    """Base model: snake_case attributes, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Param(SchemaModel):
    """A single API parameter (query, path, header, or cookie)."""

    name: str
    location: str = Field(default="query", alias="in")  # query / path / header / cookie
    required: bool = False
    param_type: str = Field(default="string", alias="type")
    description: str = ""
    constraints: dict = {}  # min, max, pattern, enum, etc.


class ApiEndpoint(SchemaModel):
    """A single API endpoint with all its metadata."""

    method: str  # GET / POST / PUT / DELETE / PATCH / HEAD / OPTIONS
    path: str  # /api/users/{id} or /api/users/:id
    summary: str = ""
    path_params: list[Param] = []
    query_params: list[Param] = []
    request_body: dict | None = None
    responses: dict = {}  # {status_code: {description}}
    tags: list[str] = []


class SchemaInfo(SchemaModel):
    title: str = ""
    version: str = ""


class ApiSchema(SchemaModel):
    """A parsed API document: metadata plus endpoints in document order."""

    info: SchemaInfo = SchemaInfo()
    endpoints: list[ApiEndpoint] = []
