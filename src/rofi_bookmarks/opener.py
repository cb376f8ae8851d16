"""Hand a URL to the desktop's default handler.

Uses click.launch, which runs xdg-open on Linux, open on macOS and start on
Windows. The request is fire-and-forget: we only learn whether the launcher
accepted it, never what the handler did afterwards.
"""

import logging

import click

logger = logging.getLogger(__name__)


class OpenError(RuntimeError):
    """The OS refused or failed to launch a handler for a URL."""


def open_url(url: str) -> None:
    if not url:
        raise OpenError("bookmark has an empty URL")

    logger.debug("Launching default handler for %s", url)
    try:
        status = click.launch(url)
    except OSError as e:
        raise OpenError(f"could not launch handler for {url}: {e}") from e

    if status != 0:
        raise OpenError(f"handler for {url} exited with status {status}")
