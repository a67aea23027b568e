"""Concurrent read-and-validate over a document tree."""

from __future__ import annotations

import asyncio
import logging
import os
import time
from pathlib import Path

from ..config import get_settings
from ..frontmatter import read_frontmatter_file
from ..logger_config import ErrorCategory
from ..logger_config import log_structured_error
from ..models import ReadOptions
from .models import DocumentReport
from .models import ScanFailure
from .models import ScanReport

logger = logging.getLogger(__name__)


def discover_documents(root: str | os.PathLike[str], pattern: str | None = None) -> list[Path]:
    """List files under ``root`` matching ``pattern``, sorted, skipping hidden entries."""
    pattern = pattern or get_settings().document_pattern
    root_path = Path(root)
    if root_path.is_file():
        return [root_path]

    documents = []
    for path in root_path.rglob(pattern):
        relative_parts = path.relative_to(root_path).parts
        if any(part.startswith(".") for part in relative_parts):
            continue
        if path.is_file():
            documents.append(path)
    return sorted(documents)


async def scan_documents(
    root: str | os.PathLike[str],
    pattern: str | None = None,
    language_code: str | None = None,
    options: ReadOptions | None = None,
    max_concurrency: int | None = None,
) -> ScanReport:
    """Validate the frontmatter of every document under ``root``.

    Each document is read with its own file handle; at most
    ``max_concurrency`` are open at once. A document that cannot be read is
    recorded in ``ScanReport.failed`` and the scan carries on.

    Args:
        root: Directory to scan (a single file is accepted too)
        pattern: Filename glob, ``settings.document_pattern`` by default
        language_code: Passed to every read
        options: Schema and key checks shared by all documents; each
            document's own path is used for error annotation
        max_concurrency: Defaults to ``settings.max_concurrency``

    Returns:
        ScanReport with every document that had issues
    """
    start_time = time.time()
    settings = get_settings()
    options = options or ReadOptions()
    semaphore = asyncio.Semaphore(max_concurrency or settings.max_concurrency)

    documents = discover_documents(root, pattern)
    logger.info("Scanning %d document(s) under %s", len(documents), root)

    async def _scan_one(path: Path) -> DocumentReport | ScanFailure:
        per_document = options.model_copy(update={"filepath": str(path)})
        async with semaphore:
            try:
                result = await read_frontmatter_file(path, language_code, per_document)
            except (OSError, UnicodeDecodeError) as e:
                return ScanFailure(filepath=str(path), error_type=type(e).__name__, error=str(e))
        return DocumentReport(filepath=str(path), errors=result.errors)

    outcomes = await asyncio.gather(*(_scan_one(path) for path in documents))

    report = ScanReport(
        root=os.fspath(root),
        total_documents=len(documents),
        documents=[o for o in outcomes if isinstance(o, DocumentReport) and o.errors],
        failed=[o for o in outcomes if isinstance(o, ScanFailure)],
        execution_time_ms=(time.time() - start_time) * 1000,
    )

    if report.failed:
        log_structured_error(
            category=ErrorCategory.WARNING,
            message=f"{len(report.failed)} document(s) could not be read",
            operation="scan_documents",
            context={"root": report.root, "failed_paths": [f.filepath for f in report.failed]},
        )
    logger.info(
        "Scanned %d document(s): %d issue(s) in %d document(s), %d unreadable",
        report.total_documents,
        report.error_count,
        len(report.documents),
        len(report.failed),
    )
    return report


def scan_documents_sync(
    root: str | os.PathLike[str],
    pattern: str | None = None,
    language_code: str | None = None,
    options: ReadOptions | None = None,
    max_concurrency: int | None = None,
) -> ScanReport:
    """Synchronous wrapper for scan_documents."""
    return asyncio.run(scan_documents(root, pattern, language_code, options, max_concurrency))
