"""Data models for CSV-derived datasets."""

from enum import Enum

from pydantic import model_validator

from demokit_inference.parser.base import SchemaModel


class ColumnType(str, Enum):
    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    DATE = "date"
    URL = "url"
    EMAIL = "email"


COLUMN_TYPE_LABELS = {
    ColumnType.STRING: "Text",
    ColumnType.NUMBER: "Number",
    ColumnType.INTEGER: "Integer",
    ColumnType.BOOLEAN: "Boolean",
    ColumnType.DATE: "Date",
    ColumnType.URL: "URL",
    ColumnType.EMAIL: "Email",
}


class CsvParseResult(SchemaModel):
    """Outcome of parsing CSV text. Failures carry ``error`` instead of data."""

    success: bool
    columns: list[str] | None = None
    rows: list[list[str]] | None = None
    error: str | None = None
    truncated: bool = False
    original_row_count: int | None = None


class Dataset(SchemaModel):
    """A parsed, typed table of correlated values."""

    id: str
    name: str
    columns: list[str]
    column_types: list[ColumnType]
    rows: list[list[str]]
    created_at: str
    description: str | None = None
    truncated: bool = False
    original_row_count: int | None = None

    @model_validator(mode="after")
    def _check_shape(self):
        width = len(self.columns)
        if len(self.column_types) != width:
            raise ValueError(f"Expected {width} column types, got {len(self.column_types)}")
        for i, row in enumerate(self.rows):
            if len(row) != width:
                raise ValueError(f"Row {i} has {len(row)} cells, expected {width}")
        return self
