"""Custom exception hierarchy for doc-frontmatter.

Only problems a caller has to fix raise: a malformed schema, bad settings,
or (inside the decoder collaborator) an undecodable header. Content problems
found in documents are reported as ``ValidationIssue`` records instead, and
I/O failures propagate as the builtin ``OSError`` they already are.
"""

from __future__ import annotations

from typing import Any


class DocFrontmatterError(Exception):
    """Base class for all doc-frontmatter errors."""

    def __init__(
        self,
        message: str,
        error_code: str = "UNKNOWN_ERROR",
        details: dict[str, Any] | None = None,
        user_message: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.user_message = user_message or message

    def to_dict(self) -> dict[str, Any]:
        """Convert the exception to a dictionary for structured logging."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "user_message": self.user_message,
            "details": self.details,
        }


class ConfigurationError(DocFrontmatterError):
    """Raised when a setting or option has an unusable value."""

    def __init__(self, setting: str, issue: str, value: Any = None):
        details: dict[str, Any] = {"setting": setting}
        if value is not None:
            details["invalid_value"] = value
        super().__init__(
            message=f"Invalid configuration for '{setting}': {issue}",
            error_code="CONFIGURATION_ERROR",
            details=details,
            user_message=f"Configuration error: {issue}",
        )
        self.setting = setting


class SchemaDefinitionError(DocFrontmatterError):
    """Raised when a caller-supplied schema is not a valid JSON schema."""

    def __init__(self, reason: str, schema_path: str | None = None):
        details: dict[str, Any] = {"failure_reason": reason}
        if schema_path:
            details["schema_path"] = schema_path
        super().__init__(
            message=f"Invalid frontmatter schema: {reason}",
            error_code="SCHEMA_DEFINITION_ERROR",
            details=details,
            user_message=f"The frontmatter schema is invalid: {reason}",
        )
        self.reason = reason


class FrontmatterDecodeError(DocFrontmatterError):
    """Raised by the decoder when a header block is not a YAML mapping.

    ``reason`` carries the parser's own explanation when it gave one.
    """

    def __init__(self, message: str, reason: str | None = None):
        details: dict[str, Any] = {}
        if reason:
            details["reason"] = reason
        super().__init__(
            message=message,
            error_code="FRONTMATTER_DECODE_ERROR",
            details=details,
        )
        self.reason = reason
