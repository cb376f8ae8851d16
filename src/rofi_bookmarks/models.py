"""Data model for bookmarks parsed from a markdown note."""

from dataclasses import dataclass


@dataclass
class Bookmark:
    title: str  # link label, may be empty
    url: str  # link target, not validated
    tags: str = ""  # free text after the link, e.g. "#rust #learning"

    @property
    def display(self) -> str:
        """The line shown by the selector and matched against its answer."""
        if not self.tags:
            return self.title
        return f"{self.title} {self.tags}"
