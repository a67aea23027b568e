"""Pydantic models for frontmatter reading and validation.

This module contains:
- ValidationIssue: one problem found in a document's frontmatter
- FrontmatterSchema: caller-declared property schema
- ReadOptions: per-call validation configuration
- ParsedHeader: a document split into header and body
- FrontmatterResult: outcome of a read-and-validate call
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

__all__ = [
    "ValidationIssue",
    "FrontmatterSchema",
    "ReadOptions",
    "ParsedHeader",
    "FrontmatterResult",
]


class ValidationIssue(BaseModel):
    """A single frontmatter problem, reported as data rather than raised."""

    property: str | None = None
    message: str
    reason: str | None = None
    filepath: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict, excluding None values."""
        return self.model_dump(exclude_none=True)

    def __str__(self) -> str:
        prefix = f"{self.filepath}: " if self.filepath else ""
        subject = f"{self.property} " if self.property else ""
        suffix = f" ({self.reason})" if self.reason else ""
        return f"{prefix}{subject}{self.message}{suffix}"


class FrontmatterSchema(BaseModel):
    """JSON-schema style declaration of the expected frontmatter properties.

    The order of ``properties`` is the expected key order. Any other
    top-level keyword (``required``, ``additionalProperties``...) is kept and
    handed to the shape validator untouched.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    properties: dict[str, dict[str, Any] | bool] = Field(default_factory=dict)

    @classmethod
    def coerce(cls, value: FrontmatterSchema | dict[str, Any] | None) -> FrontmatterSchema:
        """Accept a schema instance, a plain mapping or None."""
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        return cls.model_validate(value)

    @property
    def allowed_keys(self) -> list[str]:
        return list(self.properties)

    def to_json_schema(self) -> dict[str, Any]:
        """Return the schema as a plain dict, properties first."""
        return self.model_dump()


class ReadOptions(BaseModel):
    """Configuration for one read-and-validate call."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    schema_: FrontmatterSchema = Field(default_factory=FrontmatterSchema, alias="schema")
    filepath: str | None = None
    validate_key_names: bool = False
    validate_key_order: bool = False

    @property
    def schema(self) -> FrontmatterSchema:  # type: ignore[override]
        return self.schema_


class ParsedHeader(BaseModel):
    """A document split into its raw header text, decoded fields and body."""

    raw: str = ""
    fields: dict[Any, Any] = Field(default_factory=dict)
    body: str = ""
    errors: list[ValidationIssue] = Field(default_factory=list)

    @property
    def decoded(self) -> bool:
        """True unless decoding the header failed."""
        return not self.errors


class FrontmatterResult(BaseModel):
    """Body content, decoded fields and every issue found.

    ``content`` is None when the header could not be decoded.
    """

    content: str | None = None
    data: dict[Any, Any] = Field(default_factory=dict)
    errors: list[ValidationIssue] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors
