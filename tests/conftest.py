"""Shared test fixtures."""

import pytest

from rofi_bookmarks.models import Bookmark

SAMPLE_MARKDOWN = """\
# Bookmarks

Some notes about the list below.

## Learning
- [Rust Book](https://doc.rust-lang.org/book/) #rust #learning
- [Python Docs](https://docs.python.org/3/)
  - [ Nested Entry ](  https://example.com/nested  )   #indented

## Misc
- [Untitled]()
Just some notes, no link here.
- plain dash without a link
"""


@pytest.fixture
def sample_markdown() -> str:
    return SAMPLE_MARKDOWN


@pytest.fixture
def sample_bookmarks() -> list[Bookmark]:
    """The bookmarks SAMPLE_MARKDOWN parses into."""
    return [
        Bookmark(
            title="Rust Book",
            url="https://doc.rust-lang.org/book/",
            tags="#rust #learning",
        ),
        Bookmark(title="Python Docs", url="https://docs.python.org/3/"),
        Bookmark(
            title="Nested Entry",
            url="https://example.com/nested",
            tags="#indented",
        ),
        Bookmark(title="Untitled", url=""),
    ]


@pytest.fixture
def bookmarks_file(tmp_path, sample_markdown):
    """Write the sample markdown to a temporary Bookmarks.md."""
    path = tmp_path / "Bookmarks.md"
    path.write_text(sample_markdown, encoding="utf-8")
    return path
