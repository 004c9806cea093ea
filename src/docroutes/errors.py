"""Typed failures raised by route derivation and page validation."""

import os


class RouteError(Exception):
    """Base error for a content file that cannot be routed or built.

    Carries the offending file path and a reason so the build can report
    the file to its author.
    """

    def __init__(self, file_path: str | os.PathLike[str], reason: str) -> None:
        self.file_path = os.fspath(file_path)
        self.reason = reason
        super().__init__(reason)


class StructuralLayoutError(RouteError):
    """A file below the pages root is named ``index``."""

    def __init__(self, file_path: str | os.PathLike[str]) -> None:
        super().__init__(
            file_path,
            f'Subdirectories cannot have an index file: "{os.fspath(file_path)}". '
            'Please rename the file to something like "overview.mdx" or "introduction.md".',
        )


class InvalidLayoutError(RouteError):
    """A file declares a layout that is not registered."""

    def __init__(self, file_path: str | os.PathLike[str], layout: str) -> None:
        self.layout = layout
        super().__init__(file_path, f'Invalid layout "{layout}" in {os.fspath(file_path)}')
