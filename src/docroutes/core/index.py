"""Index document parsing.

An index document describes the menu of its directory:

    # Guide

    ## Basics

    - [Getting Started](getting-started.md)
    - [Install](./setup/install.mdx#linux)

The first level-1 heading names the menu, each level-2 heading opens a
section, and list items become menu entries. Relative content links are
rewritten to the routes their targets are served under.
"""

import logging
import os
from pathlib import Path
from typing import Any
from urllib.parse import unquote

import mistune

from docroutes.config import Options
from docroutes.core.links import rewrite_link
from docroutes.core.navigation import NavItem
from docroutes.core.pages import ParsedIndex, title_case
from docroutes.core.pathname import resolve_index_route

logger = logging.getLogger(__name__)

Token = dict[str, Any]


def parse_index(options: Options, file_path: str | os.PathLike[str], content: str) -> ParsedIndex:
    """Parse an index document into a menu tree.

    Args:
        options: Build options
        file_path: Absolute path of the index document
        content: Markdown source of the index document

    Returns:
        ParsedIndex with the directory route, title and menu items

    Raises:
        StructuralLayoutError: If an item links to a nested index file
    """
    markdown = mistune.create_markdown(renderer="ast")
    tokens: list[Token] = markdown(content)

    text: str | None = None
    items: list[NavItem] = []
    section: NavItem | None = None

    for token in tokens:
        token_type = token["type"]
        if token_type == "heading":
            level = token["attrs"]["level"]
            heading = _inline_text(token.get("children", []))
            if level == 1 and text is None:
                text = heading
            elif level == 2:
                section = NavItem(text=heading)
                items.append(section)
        elif token_type == "list":
            entries = _parse_list(options, file_path, token)
            if section is not None:
                section.children.extend(entries)
            else:
                items.extend(entries)

    if not text:
        text = title_case(Path(file_path).parent.name.replace("-", " "))

    index = ParsedIndex(
        file_path=os.fspath(file_path),
        href=resolve_index_route(options, file_path),
        text=text,
        items=items,
    )
    logger.debug(f"Parsed index {index.file_path} with {len(items)} top-level items")
    return index


def _parse_list(options: Options, file_path: str | os.PathLike[str], token: Token) -> list[NavItem]:
    """Convert a list token into menu items, recursing into nested lists."""
    entries: list[NavItem] = []
    for list_item in token.get("children", []):
        if list_item["type"] != "list_item":
            continue

        item: NavItem | None = None
        children: list[NavItem] = []
        for child in list_item.get("children", []):
            if child["type"] == "list":
                children.extend(_parse_list(options, file_path, child))
            elif child["type"] in ("block_text", "paragraph") and item is None:
                item = _parse_entry(options, file_path, child.get("children", []))

        if item is None:
            continue
        item.children.extend(children)
        entries.append(item)
    return entries


def _parse_entry(
    options: Options, file_path: str | os.PathLike[str], inline: list[Token]
) -> NavItem | None:
    """Build a menu item from the inline content of a list item."""
    link = _find_link(inline)
    if link is not None:
        # mistune percent-encodes link targets
        href = rewrite_link(options, file_path, unquote(link["attrs"]["url"]))
        return NavItem(text=_inline_text(link.get("children", [])), href=href)

    text = _inline_text(inline)
    if not text:
        return None
    return NavItem(text=text)


def _find_link(inline: list[Token]) -> Token | None:
    for token in inline:
        if token["type"] == "link":
            return token
        found = _find_link(token.get("children", []))
        if found is not None:
            return found
    return None


def _inline_text(inline: list[Token]) -> str:
    """Concatenate the plain text of inline tokens."""
    parts: list[str] = []
    for token in inline:
        if "raw" in token:
            parts.append(token["raw"])
        elif token["type"] in ("softbreak", "linebreak"):
            parts.append(" ")
        else:
            parts.append(_inline_text(token.get("children", [])))
    return "".join(parts).strip()
