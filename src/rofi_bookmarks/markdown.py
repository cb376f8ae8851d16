"""Parse bookmark entries out of a markdown note.

Only bulleted links count, one per line:

    - [Rust Book](https://doc.rust-lang.org/book/) #rust #learning

Everything after the closing paren is kept as free-text tags. Headers,
prose, blank lines and malformed links are skipped without complaint.

Lines are split on newline only, so a lone carriage return inside content
stays part of its line. Files read through Path.read_text have already had
CRLF and bare CR translated to newline. Captures are trimmed with str.strip,
which also drops the ASCII file/group/record/unit separator controls.
"""

import logging
import re

from .models import Bookmark

logger = logging.getLogger(__name__)

# Title and url captures are lazy: the first "](" and the first ")" end them.
BOOKMARK_LINE_RE = re.compile(
    r"^\s*-\s*\[(?P<title>.*?)\]\((?P<url>.*?)\)\s*(?P<tags>.*)"
)


def parse_markdown_to_bookmarks(content: str) -> list[Bookmark]:
    """Parse markdown content into bookmarks, in file order."""
    bookmarks: list[Bookmark] = []
    for line in content.split("\n"):
        match = BOOKMARK_LINE_RE.match(line)
        if not match:
            continue
        bookmarks.append(
            Bookmark(
                title=match.group("title").strip(),
                url=match.group("url").strip(),
                tags=match.group("tags").strip(),
            )
        )

    logger.debug("Parsed %d bookmarks", len(bookmarks))
    return bookmarks
