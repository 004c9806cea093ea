"""Configuration management for Docroutes.

Supports TOML configuration format with auto-discovery. The loaded
configuration is turned into an immutable ``Options`` record once per
build; the route functions only ever read that record.
"""

import tomllib
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from types import MappingProxyType

CONFIG_FILENAME = "docroutes.toml"

DEFAULT_EXTENSIONS = (".md", ".mdx")


@dataclass(frozen=True)
class Options:
    """Build-wide options read by the route functions.

    Attributes:
        pages_dir: Absolute root of the content tree
        trailing_slash: Whether every route ends with "/"
        extensions: Recognized content extensions, lower-cased and dot-prefixed
        layouts: Registered layout names, None to skip layout validation
    """

    pages_dir: Path
    trailing_slash: bool = False
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    layouts: Mapping[str, str] | None = None


def normalize_options(
    pages_dir: str | Path,
    *,
    trailing_slash: bool = False,
    extensions: Iterable[object] | None = None,
    layouts: Mapping[str, str] | None = None,
) -> Options:
    """Build an Options record from raw user settings.

    Non-string extensions are dropped, the rest are trimmed and lower-cased.

    Args:
        pages_dir: Root of the content tree
        trailing_slash: Trailing-slash policy for routes
        extensions: Content extensions, defaults to ".md" and ".mdx"
        layouts: Registered layouts, copied into a read-only mapping

    Returns:
        Immutable Options instance
    """
    if extensions is None:
        normalized_extensions = DEFAULT_EXTENSIONS
    else:
        normalized_extensions = tuple(
            ext.strip().lower() for ext in extensions if isinstance(ext, str)
        )

    return Options(
        pages_dir=Path(pages_dir).absolute(),
        trailing_slash=trailing_slash,
        extensions=normalized_extensions,
        layouts=MappingProxyType(dict(layouts)) if layouts is not None else None,
    )


@dataclass
class PagesConfig:
    """Content tree configuration."""

    pages_dir: Path = field(default_factory=lambda: Path("docs"))
    trailing_slash: bool = False
    extensions: list[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))


@dataclass
class Config:
    """Application configuration."""

    pages: PagesConfig
    layouts: dict[str, str] | None = None
    config_path: Path | None = None

    @property
    def options(self) -> Options:
        """Immutable options for route derivation."""
        return normalize_options(
            self.pages.pages_dir,
            trailing_slash=self.pages.trailing_slash,
            extensions=self.pages.extensions,
            layouts=self.layouts,
        )

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for docroutes.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents."""
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> "Config":
        """Create config with all defaults."""
        return cls(pages=PagesConfig())

    @classmethod
    def _load_from_file(cls, path: Path) -> "Config":
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            data = tomllib.load(f)

        config_dir = path.parent

        pages = cls._parse_pages(data.get("pages"), config_dir)
        layouts = cls._parse_layouts(data.get("layouts"))

        return cls(pages=pages, layouts=layouts, config_path=path)

    @classmethod
    def _parse_pages(cls, data: object, config_dir: Path) -> PagesConfig:
        """Parse pages configuration section.

        Args:
            data: Raw pages section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            PagesConfig instance
        """
        if data is None:
            return PagesConfig(pages_dir=config_dir / "docs")

        if not isinstance(data, dict):
            raise ValueError("pages section must be a dictionary")

        pages_dir = data.get("pages_dir", "docs")
        if not isinstance(pages_dir, str):
            raise ValueError("pages.pages_dir must be a string")

        trailing_slash = data.get("trailing_slash", False)
        if not isinstance(trailing_slash, bool):
            raise ValueError("pages.trailing_slash must be a boolean")

        extensions_raw = data.get("extensions", list(DEFAULT_EXTENSIONS))
        if not isinstance(extensions_raw, list):
            raise ValueError("pages.extensions must be a list")
        extensions: list[str] = []
        for item in extensions_raw:
            if not isinstance(item, str):
                raise ValueError("pages.extensions items must be strings")
            extensions.append(item)

        return PagesConfig(
            pages_dir=config_dir / pages_dir,
            trailing_slash=trailing_slash,
            extensions=extensions,
        )

    @classmethod
    def _parse_layouts(cls, data: object) -> dict[str, str] | None:
        """Parse layouts configuration section.

        Args:
            data: Raw layouts section data

        Returns:
            Mapping of layout name to implementation, None if section not present
        """
        if data is None:
            return None

        if not isinstance(data, dict):
            raise ValueError("layouts section must be a dictionary")

        layouts: dict[str, str] = {}
        for name, target in data.items():
            if not isinstance(target, str):
                raise ValueError(f"layouts.{name} must be a string")
            layouts[name] = target

        return layouts

    def with_overrides(
        self,
        *,
        pages_dir: Path | None = None,
        trailing_slash: bool | None = None,
    ) -> "Config":
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            pages_dir: Override pages.pages_dir
            trailing_slash: Override pages.trailing_slash

        Returns:
            New Config instance with overrides applied
        """
        pages = self.pages
        if pages_dir is not None or trailing_slash is not None:
            pages = replace(
                self.pages,
                pages_dir=pages_dir if pages_dir is not None else self.pages.pages_dir,
                trailing_slash=(
                    trailing_slash if trailing_slash is not None else self.pages.trailing_slash
                ),
            )

        return replace(self, pages=pages)
