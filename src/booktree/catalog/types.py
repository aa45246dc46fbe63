# ABOUTME: Core data structure for a cataloged book.
# ABOUTME: BookRecord is the immutable title/author/genre triple the catalog hands out.

from dataclasses import dataclass

from booktree.catalog.keys import title_key


@dataclass(frozen=True)
class BookRecord:
    """A single book held by the catalog.

    Records are frozen: callers can keep them around after a lookup without
    being able to change what the catalog stores.
    """

    title: str
    author: str
    genre: str

    @property
    def key(self) -> str:
        """Case-insensitive title key used for ordering and duplicate checks."""
        return title_key(self.title)
