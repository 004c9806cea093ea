"""Tests for page titles, layout validation and build paths."""

from types import MappingProxyType

import pytest
from docroutes.config import Options, normalize_options
from docroutes.core.navigation import NavItem
from docroutes.core.pages import (
    ParsedIndex,
    ParsedPage,
    derive_page_title,
    get_index_build_path,
    get_pages_build_path,
    title_case,
    validate_layout,
)
from docroutes.core.types import URLPath
from docroutes.errors import InvalidLayoutError, RouteError


class TestDerivePageTitle:
    """Tests for derive_page_title()."""

    def test__fallback_to_file_name(self) -> None:
        """Title-case the file name when no title is set."""
        assert derive_page_title("/docs/getting-started.md", {}) == "Getting Started"

    def test__explicit_title__trimmed(self) -> None:
        """Use the title attribute, trimmed."""
        assert derive_page_title("/docs/a.md", {"title": "  Custom Title  "}) == "Custom Title"

    def test__blank_title__falls_back(self) -> None:
        """A whitespace-only title is treated as missing."""
        assert derive_page_title("/docs/setup-guide.mdx", {"title": "   "}) == "Setup Guide"

    def test__non_string_title__falls_back(self) -> None:
        """Ignore titles that are not strings."""
        assert derive_page_title("/docs/faq.md", {"title": 42}) == "Faq"

    def test__lowercases_rest_of_word(self) -> None:
        """Only the first letter of each word stays upper-case."""
        assert derive_page_title("/docs/API-reference.md", {}) == "Api Reference"


class TestTitleCase:
    """Tests for title_case()."""

    def test__words(self) -> None:
        """Each whitespace-separated word is capitalized."""
        assert title_case("hello wORLD") == "Hello World"

    def test__word_with_punctuation(self) -> None:
        """Punctuation stays part of the word."""
        assert title_case("what's new_here") == "What's New_here"


class TestValidateLayout:
    """Tests for validate_layout()."""

    @pytest.fixture
    def layout_options(self) -> Options:
        return normalize_options("/docs", layouts={"wide": "layouts/wide.tsx"})

    def test__registered_layout__passes(self, layout_options: Options) -> None:
        """Accept a registered layout."""
        validate_layout(layout_options, "/docs/a.md", {"layout": "wide"})

    def test__default_layout__passes(self, layout_options: Options) -> None:
        """The default layout never needs registration."""
        validate_layout(layout_options, "/docs/a.md", {"layout": "default"})

    def test__missing_layout_attribute__passes(self, layout_options: Options) -> None:
        """Pages without a layout use the default."""
        validate_layout(layout_options, "/docs/a.md", {})

    def test__unknown_layout__raises(self, layout_options: Options) -> None:
        """Reject layouts that are not registered."""
        with pytest.raises(InvalidLayoutError) as exc_info:
            validate_layout(layout_options, "/docs/a.md", {"layout": "narrow"})

        assert exc_info.value.layout == "narrow"
        assert exc_info.value.file_path == "/docs/a.md"
        assert str(exc_info.value) == 'Invalid layout "narrow" in /docs/a.md'
        assert isinstance(exc_info.value, RouteError)

    def test__no_layouts_configured__skips(self, options: Options) -> None:
        """Skip validation when no layouts are configured."""
        validate_layout(options, "/docs/a.md", {"layout": "anything"})

    def test__layouts_are_read_only(self, layout_options: Options) -> None:
        """Options keep a read-only copy of the layouts."""
        assert isinstance(layout_options.layouts, MappingProxyType)


class TestBuildPaths:
    """Tests for get_pages_build_path() and get_index_build_path()."""

    def _page(self, pathname: str) -> ParsedPage:
        return ParsedPage(file_path="/docs/x.md", pathname=URLPath(pathname), title="X")

    def _index(self, href: str) -> ParsedIndex:
        return ParsedIndex(file_path="/docs/_index.md", href=URLPath(href), text="X")

    def test__page__root(self) -> None:
        """The root route is written as the index module."""
        assert get_pages_build_path(self._page("/")) == "pages/index.js"

    def test__page__nested(self) -> None:
        """Nested routes map to nested modules."""
        assert get_pages_build_path(self._page("/guide/intro")) == "pages/guide/intro.js"

    def test__page__trailing_slash(self) -> None:
        """Trailing slashes never leak into file names."""
        assert get_pages_build_path(self._page("/guide/intro/")) == "pages/guide/intro.js"

    def test__index__nested(self) -> None:
        """Index menus live beside the directory's pages."""
        assert get_index_build_path(self._index("/guide")) == "pages/guide/index.json"
        assert get_index_build_path(self._index("/guide/")) == "pages/guide/index.json"

    def test__index__root(self) -> None:
        """The root index menu has no empty path segment."""
        assert get_index_build_path(self._index("/")) == "pages/index.json"


class TestParsedIndexToDict:
    """Tests for ParsedIndex.to_dict()."""

    def test__serializes_items(self) -> None:
        """Nested items are serialized recursively, hrefs only when present."""
        index = ParsedIndex(
            file_path="/docs/_index.md",
            href=URLPath("/"),
            text="Docs",
            items=[NavItem(text="Basics", children=[NavItem(text="Intro", href="/intro")])],
        )

        assert index.to_dict() == {
            "href": "/",
            "text": "Docs",
            "items": [{"text": "Basics", "children": [{"text": "Intro", "href": "/intro"}]}],
        }
