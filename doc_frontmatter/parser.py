"""YAML frontmatter parsing and writing.

Frontmatter format:
---
title: Getting started
versions: [1.0, 2.0]
---

# Document body here...

``decode_frontmatter`` is the strict decoder and raises on malformed YAML.
``parse_frontmatter`` wraps it for validation pipelines: a bad header turns
into a single ``ValidationIssue`` instead of an exception.
"""

from __future__ import annotations

import logging
import re
from typing import Any

import yaml  # type: ignore[import-untyped]

from .exceptions import FrontmatterDecodeError
from .models import ParsedHeader
from .models import ValidationIssue

logger = logging.getLogger(__name__)

# --- block at offset 0, closed by the first line that is exactly ---
FRONTMATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(?P<raw>.*?)^---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)

PARSE_ERROR_MESSAGE = "YML parsing error!"
DEFAULT_PARSE_REASON = "invalid frontmatter entry"

# PyYAML contexts for "could not read a mapping entry" failures. Their problem
# text talks about parser internals, so the generic reason is used instead.
NON_ACTIONABLE_CONTEXTS = (
    "while parsing a block mapping",
    "while scanning a simple key",
)


def _yaml_reason(error: yaml.YAMLError) -> str | None:
    problem = getattr(error, "problem", None)
    if not problem:
        return None
    context = getattr(error, "context", None) or ""
    if context.startswith(NON_ACTIONABLE_CONTEXTS):
        return None
    return problem


def split_frontmatter(content: str) -> tuple[str | None, str]:
    """Split content into (raw header, body); raw is None when there is no header."""
    if not content or not content.startswith("---"):
        return None, content

    match = FRONTMATTER_PATTERN.match(content)
    if not match:
        return None, content

    return match.group("raw"), content[match.end() :]


def decode_frontmatter(content: str) -> tuple[dict[Any, Any], str]:
    """Decode the frontmatter of ``content``.

    Returns:
        Tuple of (metadata dict, content without frontmatter).
        Content without a header yields an empty dict and the full content.

    Raises:
        FrontmatterDecodeError: the header is not valid YAML or not a mapping
    """
    raw, body = split_frontmatter(content)
    if raw is None:
        return {}, body

    try:
        metadata = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise FrontmatterDecodeError(f"Invalid YAML in frontmatter: {e}", reason=_yaml_reason(e)) from e

    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        raise FrontmatterDecodeError(
            f"Frontmatter must be a mapping, got {type(metadata).__name__}",
            reason="frontmatter must be a mapping of keys to values",
        )

    return metadata, body


def parse_frontmatter(content: str, filepath: str | None = None) -> ParsedHeader:
    """Parse frontmatter without raising on malformed headers.

    Args:
        content: Full document text, or the partial text of a bounded read
        filepath: Attached to the decode error, if any

    Returns:
        ParsedHeader; on a decode failure ``fields`` is empty and ``errors``
        holds exactly one issue
    """
    raw, _ = split_frontmatter(content)

    try:
        fields, body = decode_frontmatter(content)
    except FrontmatterDecodeError as e:
        issue = ValidationIssue(
            message=PARSE_ERROR_MESSAGE,
            reason=e.reason or DEFAULT_PARSE_REASON,
            filepath=filepath,
        )
        logger.warning("Could not decode frontmatter of %s: %s", filepath or "<string>", e.message)
        return ParsedHeader(raw=raw or "", fields={}, body="", errors=[issue])

    return ParsedHeader(raw=raw or "", fields=fields, body=body)


def stringify_frontmatter(body: str, data: dict[str, Any]) -> str:
    """Join a body and a metadata mapping back into one document.

    The inverse of ``decode_frontmatter``: keys keep their order and an empty
    mapping produces the body alone.
    """
    if not data:
        return body

    yaml_str = yaml.dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False)
    return f"---\n{yaml_str}---\n{body}"


def has_frontmatter(content: str) -> bool:
    """Check if content has a frontmatter block."""
    raw, _ = split_frontmatter(content)
    return raw is not None


def get_content_without_frontmatter(content: str) -> str:
    """Get content with the frontmatter block stripped."""
    _, body = split_frontmatter(content)
    return body
