"""Tests for discovery lookup tables."""

import pytest
from docroutes.config import Options, normalize_options
from docroutes.filters import is_ignored, is_markdown_file, is_readme_file


class TestIsMarkdownFile:
    """Tests for is_markdown_file()."""

    def test__default_extensions(self, options: Options) -> None:
        """Accept .md and .mdx in any case."""
        assert is_markdown_file(options, "/docs/a.md")
        assert is_markdown_file(options, "/docs/a.MDX")
        assert not is_markdown_file(options, "/docs/a.png")
        assert not is_markdown_file(options, "/docs/README")

    def test__configured_extensions(self) -> None:
        """Use the normalized configured extensions."""
        options = normalize_options("/docs", extensions=[" .Markdown ", 3, ".md"])

        assert options.extensions == (".markdown", ".md")
        assert is_markdown_file(options, "/docs/a.markdown")
        assert not is_markdown_file(options, "/docs/a.mdx")


class TestIsReadmeFile:
    """Tests for is_readme_file()."""

    @pytest.mark.parametrize("name", ["README.md", "readme.md", "README", "Readme"])
    def test__readme_names(self, name: str) -> None:
        """Match README names regardless of case."""
        assert is_readme_file(name)

    def test__other_names(self) -> None:
        """Reject other names."""
        assert not is_readme_file("README.mdx")
        assert not is_readme_file("intro.md")


class TestIsIgnored:
    """Tests for is_ignored()."""

    @pytest.mark.parametrize("name", ["node_modules", ".github", "LICENSE", ".DS_Store"])
    def test__ignored_names(self, name: str) -> None:
        """Skip well-known non-content names."""
        assert is_ignored(name)

    @pytest.mark.parametrize("name", ["app.tsx", "logo.PNG", "package.json", "Cargo.lock"])
    def test__ignored_extensions(self, name: str) -> None:
        """Skip files with non-content extensions."""
        assert is_ignored(name)

    @pytest.mark.parametrize("name", ["guide", "intro.md", "license-notes.mdx"])
    def test__content_names(self, name: str) -> None:
        """Keep content files and directories."""
        assert not is_ignored(name)
