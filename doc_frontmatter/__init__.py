"""doc-frontmatter: read and validate YAML frontmatter of text documents.

Usage:
    from doc_frontmatter import read_frontmatter, read_frontmatter_file

    result = read_frontmatter(text, schema={"properties": {"title": {"type": "string"}}})
    result = await read_frontmatter_file("docs/intro.md", "en", validate_key_names=True)
"""

from .exceptions import ConfigurationError
from .exceptions import DocFrontmatterError
from .exceptions import FrontmatterDecodeError
from .exceptions import SchemaDefinitionError
from .frontmatter import read_frontmatter
from .frontmatter import read_frontmatter_file
from .frontmatter import read_frontmatter_file_sync
from .models import FrontmatterResult
from .models import FrontmatterSchema
from .models import ParsedHeader
from .models import ReadOptions
from .models import ValidationIssue
from .parser import decode_frontmatter
from .parser import parse_frontmatter
from .parser import stringify_frontmatter
from .reader import read_frontmatter_block
from .validator import validate_frontmatter

__version__ = "0.1.0"

__all__ = [
    # exceptions
    "ConfigurationError",
    "DocFrontmatterError",
    "FrontmatterDecodeError",
    "SchemaDefinitionError",
    # pipeline
    "read_frontmatter",
    "read_frontmatter_file",
    "read_frontmatter_file_sync",
    # models
    "FrontmatterResult",
    "FrontmatterSchema",
    "ParsedHeader",
    "ReadOptions",
    "ValidationIssue",
    # building blocks
    "decode_frontmatter",
    "parse_frontmatter",
    "stringify_frontmatter",
    "read_frontmatter_block",
    "validate_frontmatter",
]
