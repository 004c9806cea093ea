"""CLI interface for Docroutes.

Command-line tool for resolving routes and rewriting links of
documentation sources.
"""

import json
import logging
import sys
from pathlib import Path

import click

from docroutes.config import Config, Options
from docroutes.core.index import parse_index
from docroutes.core.links import rewrite_link
from docroutes.core.pages import ParsedPage, derive_page_title, get_pages_build_path
from docroutes.core.pathname import resolve_page_route
from docroutes.errors import RouteError
from docroutes.filters import is_markdown_file, is_readme_file

logger = logging.getLogger(__name__)


@click.group()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (show skipped files and rewrites)",
)
def cli(verbose: bool) -> None:
    """Docroutes - canonical routes for documentation sources."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@cli.command()
@click.argument("files", nargs=-1, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover docroutes.toml)",
)
@click.option(
    "--pages-dir",
    "-p",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Root of the content tree (overrides config)",
)
@click.option(
    "--trailing-slash/--no-trailing-slash",
    default=None,
    help="End every route with a slash (overrides config, default: disabled)",
)
@click.option(
    "--build-path",
    is_flag=True,
    help="Print the build output path instead of the route",
)
def route(
    files: tuple[Path, ...],
    config_path: Path | None,
    pages_dir: Path | None,
    trailing_slash: bool | None,
    build_path: bool,
) -> None:
    """Print the route of each content file.

    Files that cannot be routed are reported and skipped; the command then
    exits with status 1.
    """
    options = _load_options(config_path, pages_dir, trailing_slash)

    failed = 0
    for file_path in files:
        if not is_markdown_file(options, file_path) or is_readme_file(file_path.name):
            logger.debug(f"Skipping non-content file {file_path}")
            continue

        absolute = file_path.absolute()
        try:
            pathname = resolve_page_route(options, absolute)
        except RouteError as e:
            click.echo(click.style(f"Error: {e}", fg="red"), err=True)
            failed += 1
            continue

        if build_path:
            page = ParsedPage(
                file_path=str(absolute),
                pathname=pathname,
                title=derive_page_title(absolute, {}),
            )
            click.echo(f"{get_pages_build_path(page)}\t{file_path}")
        else:
            click.echo(f"{pathname}\t{file_path}")

    if failed:
        click.echo(click.style(f"{failed} file(s) could not be routed", fg="red"), err=True)
        sys.exit(1)


@cli.command()
@click.argument("index_file", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("href")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover docroutes.toml)",
)
@click.option(
    "--pages-dir",
    "-p",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Root of the content tree (overrides config)",
)
@click.option(
    "--trailing-slash/--no-trailing-slash",
    default=None,
    help="End every route with a slash (overrides config, default: disabled)",
)
def link(
    index_file: Path,
    href: str,
    config_path: Path | None,
    pages_dir: Path | None,
    trailing_slash: bool | None,
) -> None:
    """Rewrite HREF as it would appear in INDEX_FILE."""
    options = _load_options(config_path, pages_dir, trailing_slash)
    try:
        click.echo(rewrite_link(options, index_file.absolute(), href))
    except RouteError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)


@cli.command()
@click.argument("index_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover docroutes.toml)",
)
@click.option(
    "--pages-dir",
    "-p",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Root of the content tree (overrides config)",
)
@click.option(
    "--trailing-slash/--no-trailing-slash",
    default=None,
    help="End every route with a slash (overrides config, default: disabled)",
)
def index(
    index_file: Path,
    config_path: Path | None,
    pages_dir: Path | None,
    trailing_slash: bool | None,
) -> None:
    """Print the menu of INDEX_FILE as JSON."""
    options = _load_options(config_path, pages_dir, trailing_slash)
    content = index_file.read_text(encoding="utf-8")
    try:
        parsed = parse_index(options, index_file.absolute(), content)
    except RouteError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    click.echo(json.dumps(parsed.to_dict(), indent=2))


def _load_options(
    config_path: Path | None,
    pages_dir: Path | None,
    trailing_slash: bool | None,
) -> Options:
    """Load configuration and apply CLI overrides, exiting on invalid config."""
    try:
        config = Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    config = config.with_overrides(pages_dir=pages_dir, trailing_slash=trailing_slash)
    logger.debug(f"Pages directory: {config.pages.pages_dir}")
    return config.options


if __name__ == "__main__":
    cli()
