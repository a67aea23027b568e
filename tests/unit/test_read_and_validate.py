"""Unit tests for the read-and-validate entry points."""

import pytest

from doc_frontmatter.frontmatter import localize_booleans
from doc_frontmatter.frontmatter import needs_full_read
from doc_frontmatter.frontmatter import read_frontmatter
from doc_frontmatter.frontmatter import read_frontmatter_file
from doc_frontmatter.frontmatter import read_frontmatter_file_sync
from doc_frontmatter.models import ReadOptions

ARTICLE = """---
title: Getting started
intro: Learn the basics
versions:
  - free-pro-team
---

# Getting started

Body text.
"""


class TestReadFrontmatter:
    """Tests for read_frontmatter on in-memory text."""

    def test_valid_document(self, article_schema):
        result = read_frontmatter(ARTICLE, schema=article_schema)

        assert result.data == {
            "title": "Getting started",
            "intro": "Learn the basics",
            "versions": ["free-pro-team"],
        }
        assert result.content == "\n# Getting started\n\nBody text.\n"
        assert result.errors == []
        assert result.is_valid is True

    def test_without_schema(self):
        result = read_frontmatter("---\ntitle: Hello\n---\nBody")

        assert result.data == {"title": "Hello"}
        assert result.errors == []

    def test_decode_failure_returns_errors_only(self, article_schema):
        result = read_frontmatter("---\ntitle: [\n---\nBody", schema=article_schema, filepath="a.md")

        assert result.content is None
        assert result.data == {}
        assert len(result.errors) == 1
        assert result.errors[0].message == "YML parsing error!"
        assert result.errors[0].filepath == "a.md"

    def test_key_checks_from_options(self):
        options = ReadOptions(
            schema={"properties": {"a": {}, "b": {}}},
            validate_key_names=True,
            validate_key_order=True,
        )

        result = read_frontmatter("---\nb: 1\na: 2\nc: 3\n---\n", options)

        assert [issue.property for issue in result.errors] == ["c", "keys"]

    def test_keyword_overrides_on_top_of_options(self):
        options = ReadOptions(schema={"properties": {"a": {}}})

        result = read_frontmatter("---\nz: 1\n---\n", options, validate_key_names=True, filepath="f.md")

        assert len(result.errors) == 1
        assert result.errors[0].property == "z"
        assert result.errors[0].filepath == "f.md"
        # The original options are untouched.
        assert options.validate_key_names is False

    def test_non_string_keys_are_reported_not_raised(self):
        options = ReadOptions(schema={"properties": {"title": {"type": "string"}}}, validate_key_names=True)

        result = read_frontmatter("---\n2020: launch\ntrue: yes\ntitle: x\n---\nbody\n", options)

        assert result.data == {2020: "launch", True: True, "title": "x"}
        assert result.content == "body\n"
        assert [issue.property for issue in result.errors] == ["2020", "True"]

    def test_headerless_document(self, article_schema):
        content = "# Just text\n"

        result = read_frontmatter(content)

        assert result.data == {}
        assert result.content == content
        assert result.errors == []

    def test_idempotent(self, article_schema):
        kwargs = {"schema": article_schema, "validate_key_names": True, "validate_key_order": True}
        text = "---\nversions: nope\nextra: 1\ntitle: 3\n---\nBody\n"

        assert read_frontmatter(text, **kwargs) == read_frontmatter(text, **kwargs)


class TestLocalizeBooleans:
    """Tests for the localized boolean substitution."""

    def test_non_default_language_is_substituted(self):
        content = "---\nhidden: verdadero\n---\n"

        assert localize_booleans(content, "es") == "---\nhidden: true\n---\n"

    def test_default_language_untouched(self):
        content = "---\nhidden: verdadero\n---\n"

        assert localize_booleans(content, "en") == content

    def test_no_language_untouched(self):
        content = "---\nhidden: verdadero\n---\n"

        assert localize_booleans(content, None) == content

    def test_every_occurrence_replaced(self):
        content = "a: verdadero\nb: verdadero\n"

        assert localize_booleans(content, "es") == "a: true\nb: true\n"

    def test_configured_default_language(self, monkeypatch):
        monkeypatch.setenv("DOC_FRONTMATTER_DEFAULT_LANGUAGE", "es")

        assert localize_booleans("a: verdadero", "es") == "a: verdadero"
        assert localize_booleans("a: verdadero", "en") == "a: true"


class TestNeedsFullRead:
    """Tests for needs_full_read."""

    def test_index_documents(self, docs_root):
        assert needs_full_read(docs_root / "index.md") is True
        assert needs_full_read("content/actions/index.md") is True

    def test_regular_documents(self):
        assert needs_full_read("content/actions/quickstart.md") is False


class TestReadFrontmatterFile:
    """Tests for read_frontmatter_file."""

    @pytest.mark.asyncio
    async def test_bounded_read_for_regular_document(self, document_factory, article_schema, mocker):
        path = document_factory("quickstart.md", ARTICLE)
        full_read = mocker.patch("doc_frontmatter.frontmatter.read_document")

        result = await read_frontmatter_file(path, "en", schema=article_schema)

        full_read.assert_not_called()
        assert result.data["title"] == "Getting started"
        assert result.content == ""
        assert result.errors == []

    @pytest.mark.asyncio
    async def test_full_read_for_index_document(self, document_factory):
        path = document_factory("actions/index.md", ARTICLE)

        result = await read_frontmatter_file(path, "en")

        assert result.content == "\n# Getting started\n\nBody text.\n"

    @pytest.mark.asyncio
    async def test_filepath_attached_to_errors(self, document_factory):
        path = document_factory("broken.md", "---\ntitle: [\n---\nBody\n")

        result = await read_frontmatter_file(path, "en")

        assert result.errors[0].filepath == str(path)

    @pytest.mark.asyncio
    async def test_explicit_filepath_wins(self, document_factory):
        path = document_factory("broken.md", "---\ntitle: [\n---\nBody\n")

        result = await read_frontmatter_file(path, "en", filepath="content/broken.md")

        assert result.errors[0].filepath == "content/broken.md"

    @pytest.mark.asyncio
    async def test_spanish_booleans(self, document_factory):
        schema = {"properties": {"hidden": {"type": "boolean"}}}
        path = document_factory("es/hidden.md", "---\nhidden: verdadero\n---\nCuerpo\n")

        result = await read_frontmatter_file(path, "es", schema=schema)

        assert result.data == {"hidden": True}
        assert result.errors == []

    @pytest.mark.asyncio
    async def test_english_booleans_untouched(self, document_factory):
        schema = {"properties": {"hidden": {"type": "boolean"}}}
        path = document_factory("hidden.md", "---\nhidden: verdadero\n---\nBody\n")

        result = await read_frontmatter_file(path, "en", schema=schema)

        assert result.data == {"hidden": "verdadero"}
        assert len(result.errors) == 1

    @pytest.mark.asyncio
    async def test_missing_file_raises(self, docs_root):
        with pytest.raises(FileNotFoundError):
            await read_frontmatter_file(docs_root / "missing.md", "en")

    @pytest.mark.asyncio
    async def test_idempotent(self, document_factory, article_schema):
        path = document_factory("twice.md", "---\nintro: 1\ntitle: x\nother: y\n---\nBody\n")
        kwargs = {"schema": article_schema, "validate_key_names": True, "validate_key_order": True}

        first = await read_frontmatter_file(path, "en", **kwargs)
        second = await read_frontmatter_file(path, "en", **kwargs)

        assert first == second
        assert [issue.property for issue in first.errors] == ["intro", "other", "keys"]

    def test_sync_wrapper(self, document_factory):
        path = document_factory("sync.md", "---\ntitle: Hello\n---\nBody\n")

        result = read_frontmatter_file_sync(path, "en")

        assert result.data == {"title": "Hello"}

    def test_sync_wrapper_accepts_filepath_override(self, document_factory):
        path = document_factory("broken.md", "---\ntitle: [\n---\nBody\n")

        result = read_frontmatter_file_sync(path, "es", filepath="content/broken.md")

        assert result.errors[0].filepath == "content/broken.md"
