"""Read-and-validate entry points.

``read_frontmatter`` works on text already in memory; ``read_frontmatter_file``
reads a document from disk first, in full or only up to the end of its
frontmatter.
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Any

from .config import get_settings
from .models import FrontmatterResult
from .models import ReadOptions
from .parser import parse_frontmatter
from .reader import read_document
from .reader import read_frontmatter_block
from .validator import validate_frontmatter

logger = logging.getLogger(__name__)

# Translation tooling has been localizing YAML booleans in Spanish documents.
LOCALIZED_TRUE = ": verdadero"
CANONICAL_TRUE = ": true"


def _resolve_options(options: ReadOptions | None, overrides: dict[str, Any]) -> ReadOptions:
    if options is None:
        return ReadOptions(**overrides)
    if overrides:
        return ReadOptions(**{**options.model_dump(by_alias=True), **overrides})
    return options


def read_frontmatter(markdown: str, options: ReadOptions | None = None, **kwargs: Any) -> FrontmatterResult:
    """Decode and validate the frontmatter of ``markdown``.

    Args:
        markdown: Document text (a bounded read is fine; the body is not checked)
        options: Schema, filepath and key checks for this call
        **kwargs: ``ReadOptions`` fields, used instead of or on top of ``options``

    Returns:
        FrontmatterResult. When the header cannot be decoded, ``content`` is
        None, ``data`` is empty and ``errors`` holds the single decode issue.
    """
    options = _resolve_options(options, kwargs)

    parsed = parse_frontmatter(markdown, filepath=options.filepath)
    if not parsed.decoded:
        return FrontmatterResult(errors=parsed.errors)

    errors = validate_frontmatter(
        parsed.fields,
        options.schema,
        filepath=options.filepath,
        validate_key_names=options.validate_key_names,
        validate_key_order=options.validate_key_order,
    )
    return FrontmatterResult(content=parsed.body, data=parsed.fields, errors=errors)


def needs_full_read(filepath: str | os.PathLike[str]) -> bool:
    """True for documents whose body carries metadata too (table-of-contents indexes)."""
    return os.fspath(filepath).endswith(get_settings().full_read_suffix)


def localize_booleans(content: str, language_code: str | None) -> str:
    """Undo boolean translation in non-default-language documents."""
    if not language_code or language_code == get_settings().default_language:
        return content
    if LOCALIZED_TRUE not in content:
        return content
    logger.debug("Replacing localized booleans for language '%s'", language_code)
    return content.replace(LOCALIZED_TRUE, CANONICAL_TRUE)


async def read_frontmatter_file(
    filepath: str | os.PathLike[str],
    /,
    language_code: str | None = None,
    options: ReadOptions | None = None,
    **kwargs: Any,
) -> FrontmatterResult:
    """Read a document from disk and validate its frontmatter.

    Index documents are read in full; every other document only up to the
    end of its frontmatter, which leaves ``content`` empty for them.

    Args:
        filepath: Document to read; also used for error annotation unless
            the options name a filepath of their own
        language_code: Document language; anything but the default language
            gets the boolean substitution
        options: Schema and key checks for this call
        **kwargs: ``ReadOptions`` fields

    Raises:
        OSError: the document could not be read
    """
    options = _resolve_options(options, kwargs)
    if options.filepath is None:
        options = options.model_copy(update={"filepath": os.fspath(filepath)})

    if needs_full_read(filepath):
        content = await read_document(filepath)
    else:
        content = await read_frontmatter_block(filepath)

    content = localize_booleans(content, language_code)
    return read_frontmatter(content, options)


def read_frontmatter_file_sync(
    filepath: str | os.PathLike[str],
    /,
    language_code: str | None = None,
    options: ReadOptions | None = None,
    **kwargs: Any,
) -> FrontmatterResult:
    """Synchronous wrapper for read_frontmatter_file."""
    return asyncio.run(read_frontmatter_file(filepath, language_code, options, **kwargs))
