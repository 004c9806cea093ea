"""Lookup tables for content file discovery.

Discovery walks the pages tree and skips anything that can never be a
content file or a content directory. The route functions never consult
these tables; they expect discovery to have filtered their input already.
"""

import os
import posixpath

from docroutes.config import Options

# Known file extensions that are never directories or content
IGNORE_EXT = frozenset(
    {
        ".ts",
        ".tsx",
        ".js",
        ".mjs",
        ".cjs",
        ".jsx",
        ".css",
        ".html",
        ".png",
        ".jpg",
        ".jpeg",
        ".gif",
        ".ico",
        ".svg",
        ".txt",
        ".json",
        ".yml",
        ".yaml",
        ".toml",
        ".lock",
        ".log",
        ".bazel",
        ".bzl",
    }
)

# Known file and directory names that are skipped entirely
IGNORE_NAMES = frozenset(
    {
        "build",
        "dist",
        "node_modules",
        "target",
        "LICENSE",
        "LICENSE.md",
        "Dockerfile",
        "Makefile",
        "WORKSPACE",
        ".devcontainer",
        ".gitignore",
        ".gitattributes",
        ".gitkeep",
        ".github",
        ".husky",
        ".npmrc",
        ".nvmrc",
        ".prettierignore",
        ".history",
        ".vscode",
        ".DS_Store",
    }
)


def is_ignored(name: str) -> bool:
    """Check whether a file or directory name can be skipped during discovery."""
    if name in IGNORE_NAMES:
        return True
    return posixpath.splitext(name)[1].lower() in IGNORE_EXT


def is_markdown_file(options: Options, file_path: str | os.PathLike[str]) -> bool:
    """Check whether a file has one of the configured content extensions."""
    ext = os.path.splitext(os.fspath(file_path))[1].lower()
    return ext in options.extensions


def is_readme_file(file_name: str) -> bool:
    """Check whether a file name is a README (never routed as a page)."""
    file_name = file_name.lower()
    return file_name in ("readme.md", "readme")
