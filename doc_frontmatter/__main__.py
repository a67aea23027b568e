"""Allow ``python -m doc_frontmatter``."""

import sys

from .cli import main

sys.exit(main())
