"""Navigation items for index documents.

An index document lists the pages of its directory, optionally grouped
under section headings. Items are a view layer for the site menu.
"""

from dataclasses import dataclass, field
from typing import TypedDict


class NavItemDict(TypedDict, total=False):
    """Dictionary representation of a navigation item."""

    text: str
    href: str
    children: list["NavItemDict"]


@dataclass
class NavItem:
    """Navigation item with children for the menu tree.

    Section headings have no href; links carry the rewritten href.
    """

    text: str
    href: str | None = None
    children: list["NavItem"] = field(default_factory=list)

    def to_dict(self) -> NavItemDict:
        """Convert to dictionary for JSON serialization."""
        result: NavItemDict = {"text": self.text}
        if self.href is not None:
            result["href"] = self.href
        if self.children:
            result["children"] = [child.to_dict() for child in self.children]
        return result
