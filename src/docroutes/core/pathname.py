"""Route pathnames for content files.

A source file is first mapped to a route skeleton (parent directory plus
extension-less basename, with the root ``index`` collapsed to "/"), then
canonicalized into a lower-case, slug-safe URL path.
"""

import os
import posixpath
import re
from urllib.parse import urljoin, urlsplit

from slugify import slugify

from docroutes.config import Options
from docroutes.core.types import URLPath
from docroutes.errors import StructuralLayoutError

# Fixed authority used only to let URL parsing resolve dot segments
_NORMALIZE_BASE = "http://normalize.me/"

_CONTENT_EXTENSIONS = (".mdx", ".md")

_REPEATED_SLASHES = re.compile(r"/{2,}")


def normalize_pathname(pathname: str, trailing_slash: bool = False) -> URLPath:
    """Canonicalize a route skeleton.

    Steps run in a fixed order: trim, case fold, spaces and underscores
    to hyphens, per-segment slugify, URL canonicalization, a second
    per-segment slugify, then the trailing-slash policy.

    Args:
        pathname: Route skeleton (e.g., "/Guide/Getting Started")
        trailing_slash: Append "/" when the result lacks one

    Returns:
        Canonical route pathname (e.g., "/guide/getting-started")
    """
    pathname = pathname.strip().casefold().replace(" ", "-").replace("_", "-")
    pathname = _slugify_segments(pathname, keep_dot_segments=True)

    # A leading "//" would otherwise be parsed as a network authority
    pathname = _REPEATED_SLASHES.sub("/", pathname)
    pathname = urlsplit(urljoin(_NORMALIZE_BASE, pathname)).path
    pathname = _slugify_segments(pathname)

    if trailing_slash and not pathname.endswith("/"):
        pathname += "/"
    return URLPath(pathname)


def resolve_page_route(options: Options, file_path: str | os.PathLike[str]) -> URLPath:
    """Resolve the route of a content file.

    Args:
        options: Build options (pages_dir, trailing_slash)
        file_path: Absolute path of a content file

    Returns:
        Canonical route pathname, "/" for the root index file

    Raises:
        StructuralLayoutError: If a file below the root is named index
    """
    relative = _relative_posix(options, file_path)
    name = strip_content_extension(posixpath.basename(relative))
    parent = posixpath.dirname(relative)

    if name == "index":
        if _is_root(parent):
            return normalize_pathname("/", options.trailing_slash)
        raise StructuralLayoutError(file_path)

    skeleton = f"/{name}" if _is_root(parent) else f"/{parent}/{name}"
    return normalize_pathname(skeleton, options.trailing_slash)


def resolve_index_route(options: Options, file_path: str | os.PathLike[str]) -> URLPath:
    """Resolve the route of the directory an index document describes.

    The file's own name is ignored, so no index-nesting restriction applies.

    Args:
        options: Build options (pages_dir, trailing_slash)
        file_path: Absolute path of the index document

    Returns:
        Canonical route pathname of the containing directory
    """
    parent = posixpath.dirname(_relative_posix(options, file_path))
    return normalize_pathname(f"/{parent}", options.trailing_slash)


def strip_content_extension(file_name: str) -> str:
    """Drop a trailing ".md" or ".mdx" (any case) from a file name."""
    lowered = file_name.lower()
    for ext in _CONTENT_EXTENSIONS:
        if lowered.endswith(ext):
            return file_name[: -len(ext)]
    return file_name


def to_posix(path: str) -> str:
    """Use forward slashes regardless of the host separator."""
    return path.replace("\\", "/")


def _relative_posix(options: Options, file_path: str | os.PathLike[str]) -> str:
    return to_posix(os.path.relpath(os.fspath(file_path), os.fspath(options.pages_dir)))


def _is_root(parent: str) -> bool:
    return parent in ("", ".")


def _slugify_segments(pathname: str, *, keep_dot_segments: bool = False) -> str:
    """Slugify each non-empty segment, keeping the separators in place."""
    segments = []
    for segment in pathname.split("/"):
        if not segment or (keep_dot_segments and segment in (".", "..")):
            segments.append(segment)
        else:
            segments.append(slugify(segment))
    return "/".join(segments)
