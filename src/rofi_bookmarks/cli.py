"""CLI interface for rofi-bookmarks.

Meant to be driven by a selector such as rofi or dmenu:

    rofi-bookmarks            - print one line per bookmark (list mode)
    rofi-bookmarks "<line>"   - open the bookmark that produced <line> (open mode)

Open mode never fails the run: lookup misses and launcher errors are
reported on stderr and the exit code stays 0 so the selector sees a clean
child process. Only a missing or unreadable bookmarks file (or a broken
config) exits non-zero.
"""

import logging
import sys
from pathlib import Path

import click

from .config import (
    CONFIG_FILE,
    AppConfig,
    config_exists,
    load_config,
    resolve_bookmarks_path,
    save_config,
)
from .logging_config import setup_logging
from .markdown import parse_markdown_to_bookmarks
from .opener import OpenError, open_url
from .selector import display_lines, find_by_display

logger = logging.getLogger(__name__)


class SelectorCommand(click.Command):
    """A command whose lone argument is the selector's chosen line.

    Selectors pass the chosen line as the only argument, and a bookmark
    title may well begin with "-". A single argument is therefore taken
    verbatim as the selection unless it is exactly one of our option names
    and no bookmark displays as that text.
    """

    def parse_args(self, ctx, args):
        if len(args) == 1 and self._is_selection(ctx, args[0]):
            args = ["--", args[0]]
        return super().parse_args(ctx, args)

    def _is_selection(self, ctx, arg: str) -> bool:
        names: set[str] = set()
        for param in self.get_params(ctx):
            if isinstance(param, click.Option):
                names.update(param.opts)
                names.update(param.secondary_opts)
        if arg not in names:
            return True
        return _is_default_display(arg)


def _is_default_display(text: str) -> bool:
    """Check text against the display strings of the configured bookmarks file."""
    try:
        if config_exists(CONFIG_FILE):
            app_config = load_config(CONFIG_FILE)
        else:
            app_config = AppConfig()
        content = app_config.source_path.read_text(encoding="utf-8")
    except (OSError, ValueError):
        # main() reads the file again and reports the error
        return False
    return find_by_display(parse_markdown_to_bookmarks(content), text) is not None


@click.command(cls=SelectorCommand)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--config", type=click.Path(), default=None, help="Config file path")
@click.option(
    "-f",
    "--file",
    "bookmarks_file",
    type=click.Path(),
    default=None,
    help="Markdown bookmarks file (overrides the config)",
)
@click.option(
    "--init-config",
    is_flag=True,
    help="Write a default config file and exit",
)
@click.argument("selection", nargs=-1, type=click.UNPROCESSED)
def main(verbose, config, bookmarks_file, init_config, selection):
    """Markdown bookmarks for rofi: list them, or open the SELECTION."""
    setup_logging(debug=verbose)
    config_path = Path(config) if config else CONFIG_FILE

    if init_config:
        if config_exists(config_path):
            click.echo(f"Error: Config already exists at {config_path}", err=True)
            sys.exit(1)
        save_config(AppConfig(), config_path)
        click.echo(f"Config saved to {config_path}")
        return

    app_config = _load_app_config(config_path)
    if bookmarks_file:
        source = resolve_bookmarks_path(bookmarks_file)
    else:
        source = app_config.source_path
    logger.debug("Reading bookmarks from %s", source)

    if not source.exists():
        click.echo(f"Error: File not found at {source}", err=True)
        sys.exit(1)

    try:
        content = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        click.echo(f"Error: Could not read file {source}: {e}", err=True)
        sys.exit(1)

    bookmarks = parse_markdown_to_bookmarks(content)

    if not selection:
        for line in display_lines(bookmarks):
            click.echo(line, color=True)
        return

    # Only the first argument is the selector's answer
    chosen = selection[0]
    if len(selection) > 1:
        logger.debug("Ignoring %d extra arguments", len(selection) - 1)

    target = find_by_display(bookmarks, chosen)
    if target is None:
        click.echo("Selection not found in bookmarks file.", err=True)
        return

    try:
        open_url(target.url)
    except OpenError as e:
        click.echo(f"Failed to open URL: {e}", err=True)


def _load_app_config(config_path: Path) -> AppConfig:
    """Load the config file, falling back to defaults when there is none."""
    if not config_exists(config_path):
        logger.debug("No config at %s, using defaults", config_path)
        return AppConfig()

    try:
        return load_config(config_path)
    except (OSError, ValueError) as e:
        click.echo(f"Error: Invalid config {config_path}: {e}", err=True)
        sys.exit(1)
