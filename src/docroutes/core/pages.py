"""Page metadata helpers and build output locations."""

import os
import posixpath
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from docroutes.config import Options
from docroutes.core.navigation import NavItem
from docroutes.core.pathname import strip_content_extension, to_posix
from docroutes.core.types import URLPath
from docroutes.errors import InvalidLayoutError

_WORD = re.compile(r"\w\S*")


@dataclass(frozen=True)
class ParsedPage:
    """Content page with its resolved route."""

    file_path: str
    pathname: URLPath
    title: str
    attrs: Mapping[str, Any] = field(default_factory=dict)


@dataclass
class ParsedIndex:
    """Index document with its directory route and menu items."""

    file_path: str
    href: URLPath
    text: str
    items: list[NavItem] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "href": self.href,
            "text": self.text,
            "items": [item.to_dict() for item in self.items],
        }


def derive_page_title(file_path: str | os.PathLike[str], attrs: Mapping[str, Any]) -> str:
    """Get the display title of a page.

    Uses the "title" attribute when it is a non-blank string, otherwise the
    file name with hyphens as spaces, title-cased.

    Args:
        file_path: Path of the content file
        attrs: Front-matter attributes of the page

    Returns:
        Page title

    Examples:
        >>> derive_page_title("/docs/getting-started.md", {})
        'Getting Started'
    """
    title = ""
    raw_title = attrs.get("title")
    if isinstance(raw_title, str):
        title = raw_title.strip()
    if not title:
        name = strip_content_extension(posixpath.basename(to_posix(os.fspath(file_path))))
        title = title_case(name.replace("-", " "))
    return title.strip()


def title_case(text: str) -> str:
    """Upper-case the first letter of each word and lower-case the rest."""
    return _WORD.sub(lambda match: match[0][:1].upper() + match[0][1:].lower(), text)


def validate_layout(
    options: Options, file_path: str | os.PathLike[str], attrs: Mapping[str, Any]
) -> None:
    """Check that a page's declared layout is registered.

    Skipped when no layouts are configured. The "default" layout is always
    accepted.

    Raises:
        InvalidLayoutError: If the layout name is not registered
    """
    if options.layouts is None:
        return
    layout = attrs.get("layout")
    if isinstance(layout, str) and layout != "default" and not options.layouts.get(layout):
        raise InvalidLayoutError(file_path, layout)


def get_pages_build_path(page: ParsedPage) -> str:
    """Output path of a page module, e.g. "pages/guide/intro.js"."""
    pathname = page.pathname.rstrip("/") or "/index"
    return f"pages{pathname}.js"


def get_index_build_path(index: ParsedIndex) -> str:
    """Output path of an index menu, e.g. "pages/guide/index.json"."""
    return f"pages{index.href.rstrip('/')}/index.json"
