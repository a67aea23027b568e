"""The pytest configuration for doc-frontmatter testing.

Every test gets fresh settings with no ``DOC_FRONTMATTER_*`` overrides
leaking in from the surrounding environment.
"""

import os

import pytest

from doc_frontmatter.config import reset_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Reset the settings singleton and run from an empty directory (no .env)."""
    for key in list(os.environ):
        if key.startswith("DOC_FRONTMATTER_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def docs_root(tmp_path):
    """Provide an empty directory for test documents."""
    root = tmp_path / "docs"
    root.mkdir()
    return root


@pytest.fixture
def document_factory(docs_root):
    """Factory for writing test documents under ``docs_root``."""

    def _create_document(relative_path: str, content: str):
        path = docs_root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _create_document


@pytest.fixture
def article_schema():
    """A small schema with three ordered properties."""
    return {
        "properties": {
            "title": {"type": "string", "required": True},
            "intro": {"type": "string"},
            "versions": {"type": "array", "items": {"type": "string"}},
        }
    }
