"""Result models produced by mapping inference."""

from typing import Literal

from pydantic import Field

from demokit_inference.parser.base import SchemaModel

ResponseType = Literal["single", "collection"]


class ModelMatch(SchemaModel):
    """A resolved model name and how confidently it was matched."""

    model: str
    confidence: int
    strategy: str  # exact / plural / normalized


class EndpointMapping(SchemaModel):
    """An inferred association between an endpoint and a data model."""

    method: str
    pattern: str  # normalized, e.g. /users/:userId/orders/:orderId
    source_model: str
    response_type: ResponseType
    lookup_field: str | None = None
    lookup_param: str | None = None
    confidence: int = Field(ge=0, le=100)
    is_auto_generated: bool = True
    reason: str


class UnmappedEndpoint(SchemaModel):
    method: str
    path: str
    reason: str
    suggested_model: str | None = None


class SkippedEndpoint(SchemaModel):
    method: str
    path: str
    reason: str


class InferenceResult(SchemaModel):
    mappings: list[EndpointMapping] = []
    unmapped: list[UnmappedEndpoint] = []
    skipped: list[SkippedEndpoint] = []
    available_models: list[str] = []
