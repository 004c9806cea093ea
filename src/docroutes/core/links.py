"""Rewriting of relative links found in index documents.

Links that point at another content file are replaced by the route that
file will be served under. Everything else is left as authored.
"""

import logging
import os

from docroutes.config import Options
from docroutes.core.pathname import resolve_page_route, to_posix

logger = logging.getLogger(__name__)

_PASSTHROUGH_PREFIXES = ("/", "https:", "http:", "file:")

_CONTENT_SUFFIXES = (".mdx", ".md")


def rewrite_link(options: Options, index_file_path: str | os.PathLike[str], href: str) -> str:
    """Resolve a link from an index document to a route pathname.

    Absolute and external hrefs are returned unchanged. Relative hrefs that
    do not target a content file lose any query or fragment. Content links
    are resolved against the index document's directory, and the query
    (or, when there is none, the fragment) is reattached to the route.

    Note:
        Only the text between the first and second "?" (or "#") is
        reattached. "a.md?x=1#top" keeps both parts because the fragment
        rides along in the query, while "a.md#top?x=1" keeps only "?x=1".

    Args:
        options: Build options
        index_file_path: Absolute path of the document containing the link
        href: Raw link target as authored

    Returns:
        Rewritten href

    Raises:
        StructuralLayoutError: If the link targets a nested index file
    """
    if href.lower().startswith(_PASSTHROUGH_PREFIXES):
        return href

    query_split = href.split("?")
    hash_split = href.split("#")
    path = query_split[0].split("#")[0]

    if not path.lower().endswith(_CONTENT_SUFFIXES):
        return path

    parts = [part for part in to_posix(path).split("/") if part]
    target = os.path.join(os.path.dirname(os.fspath(index_file_path)), *parts)

    pathname: str = resolve_page_route(options, target)
    if len(query_split) > 1:
        pathname += "?" + query_split[1]
    elif len(hash_split) > 1:
        pathname += "#" + hash_split[1]

    logger.debug(f"Rewrote link {href!r} in {index_file_path} to {pathname!r}")
    return pathname
