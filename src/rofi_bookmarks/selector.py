"""Map bookmarks to selector lines and back.

The selector hands back the chosen line verbatim, so the display string is
the only key. Duplicate display strings resolve to the first bookmark.
"""

from .models import Bookmark


def display_lines(bookmarks: list[Bookmark]) -> list[str]:
    return [b.display for b in bookmarks]


def find_by_display(bookmarks: list[Bookmark], selection: str) -> Bookmark | None:
    """Return the first bookmark whose display string equals selection."""
    for bookmark in bookmarks:
        if bookmark.display == selection:
            return bookmark
    return None
