"""Streaming readers for documents on the local filesystem.

``read_frontmatter_block`` reads only as much of a document as it takes to
reach the end of its frontmatter, so scanning metadata across a large tree
does not pay for the bodies. ``read_document`` is the plain full read.
"""

from __future__ import annotations

import asyncio
import logging
import os

import aiofiles

from .config import get_settings
from .exceptions import ConfigurationError
from .logger_config import ErrorCategory
from .logger_config import log_structured_error

logger = logging.getLogger(__name__)

StrPath = str | os.PathLike[str]


async def read_frontmatter_block(
    filepath: StrPath,
    delimiter: str | None = None,
    chunk_size: int | None = None,
) -> str:
    """Read ``filepath`` up to and including the first ``delimiter``.

    Chunks are requested one at a time and the file is closed as soon as the
    delimiter has been seen. A delimiter split across two chunks is still
    found, because each search covers the tail of what was already read plus
    the new chunk. Without any delimiter the whole file is returned.

    Args:
        filepath: Document to read
        delimiter: End-of-header marker, ``settings.end_delimiter`` by default
        chunk_size: Characters per read, ``settings.read_chunk_size`` by default

    Returns:
        The document text up to the end of the delimiter

    Raises:
        OSError: the file could not be opened or read
        UnicodeDecodeError: the file is not UTF-8 text
    """
    settings = get_settings()
    delimiter = delimiter or settings.end_delimiter
    chunk_size = settings.read_chunk_size if chunk_size is None else chunk_size
    if chunk_size < 1:
        raise ConfigurationError("chunk_size", "must be at least 1", chunk_size)

    overlap = len(delimiter) - 1
    buffer = ""
    chunks_read = 0

    try:
        async with aiofiles.open(filepath, mode="r", encoding="utf-8") as f:
            while True:
                chunk = await f.read(chunk_size)
                if not chunk:
                    break
                chunks_read += 1

                search_from = max(0, len(buffer) - overlap)
                buffer += chunk
                index = buffer.find(delimiter, search_from)
                if index != -1:
                    buffer = buffer[: index + len(delimiter)]
                    break
    except (OSError, UnicodeDecodeError) as e:
        log_structured_error(
            category=ErrorCategory.ERROR,
            message=f"Failed to read frontmatter from {filepath}",
            exception=e,
            operation="read_frontmatter_block",
            filepath=str(filepath),
        )
        raise

    logger.debug("Read %d chars in %d chunk(s) from %s", len(buffer), chunks_read, filepath)
    return buffer


def read_frontmatter_block_sync(
    filepath: StrPath,
    delimiter: str | None = None,
    chunk_size: int | None = None,
) -> str:
    """Synchronous wrapper for read_frontmatter_block."""
    return asyncio.run(read_frontmatter_block(filepath, delimiter=delimiter, chunk_size=chunk_size))


async def read_document(filepath: StrPath) -> str:
    """Read a whole document as UTF-8 text.

    Raises:
        OSError: the file could not be opened or read
    """
    try:
        async with aiofiles.open(filepath, mode="r", encoding="utf-8") as f:
            content = await f.read()
    except (OSError, UnicodeDecodeError) as e:
        log_structured_error(
            category=ErrorCategory.ERROR,
            message=f"Failed to read document {filepath}",
            exception=e,
            operation="read_document",
            filepath=str(filepath),
        )
        raise

    logger.debug("Read %d chars (full) from %s", len(content), filepath)
    return content
