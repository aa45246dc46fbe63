# ABOUTME: Error types and the insert result returned by the book catalog.
# ABOUTME: Failures are carried inside InsertResult instead of being raised.

from dataclasses import dataclass

from booktree.catalog.types import BookRecord


class CatalogError(Exception):
    """Base class for failures reported by the catalog."""


class ValidationError(CatalogError):
    """Raised (or reported) when a required field is empty."""

    def __init__(self, fields: tuple[str, ...]) -> None:
        self.fields = fields
        super().__init__(f"Empty field(s): {', '.join(fields)}")


class DuplicateTitleError(CatalogError):
    """Raised (or reported) when a title already exists, ignoring case."""

    def __init__(self, title: str, existing: BookRecord) -> None:
        self.title = title
        self.existing = existing
        super().__init__(f"A book with the title {title!r} already exists")


@dataclass(frozen=True)
class InsertResult:
    """Outcome of BookCatalog.insert.

    Truthy when the record was stored. On failure ``error`` holds the
    reason and ``record`` is None.
    """

    record: BookRecord | None = None
    error: CatalogError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.record is not None

    def __bool__(self) -> bool:
        return self.ok

    def raise_for_error(self) -> BookRecord:
        """Return the stored record, or raise the carried error."""
        if self.error is not None:
            raise self.error
        if self.record is None:
            raise CatalogError("Insert result carries neither a record nor an error")
        return self.record
