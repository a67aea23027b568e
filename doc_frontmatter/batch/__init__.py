"""Batch scanning of document trees.

Runs the read-and-validate pipeline over every matching document under a
root directory and collects the issues into one report.
"""

from .models import DocumentReport
from .models import ScanFailure
from .models import ScanReport
from .scanner import discover_documents
from .scanner import scan_documents
from .scanner import scan_documents_sync

__all__ = [
    "DocumentReport",
    "ScanFailure",
    "ScanReport",
    "discover_documents",
    "scan_documents",
    "scan_documents_sync",
]
