"""Report models for batch scans."""

from __future__ import annotations

import time
from typing import Any

from pydantic import BaseModel
from pydantic import Field

from ..models import ValidationIssue


class DocumentReport(BaseModel):
    """Issues found in a single document."""

    filepath: str = Field(..., description="Path of the scanned document")
    errors: list[ValidationIssue] = Field(default_factory=list, description="Issues in document order")


class ScanFailure(BaseModel):
    """A document that could not be read at all."""

    filepath: str = Field(..., description="Path of the unreadable document")
    error_type: str = Field(..., description="Exception class name")
    error: str = Field(..., description="Exception message")


class ScanReport(BaseModel):
    """Complete result of scanning a document tree.

    Only documents with at least one issue are listed in ``documents``.
    """

    root: str = Field(..., description="Directory that was scanned")
    total_documents: int = Field(default=0, description="Number of documents scanned")
    documents: list[DocumentReport] = Field(default_factory=list, description="Documents with issues")
    failed: list[ScanFailure] = Field(default_factory=list, description="Documents that could not be read")
    execution_time_ms: float = Field(default=0.0, description="Total scan time")
    timestamp: str = Field(default_factory=lambda: time.strftime("%Y-%m-%d %H:%M:%S"))

    @property
    def error_count(self) -> int:
        return sum(len(document.errors) for document in self.documents)

    @property
    def ok(self) -> bool:
        return not self.documents and not self.failed

    def iter_issues(self) -> list[ValidationIssue]:
        """All issues of the scan, flattened in document order."""
        return [issue for document in self.documents for issue in document.errors]

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output, leaving out unset issue fields."""
        data = self.model_dump(exclude={"documents"})
        data["documents"] = [
            {"filepath": document.filepath, "errors": [issue.to_dict() for issue in document.errors]}
            for document in self.documents
        ]
        data["error_count"] = self.error_count
        data["ok"] = self.ok
        return data
