# ABOUTME: Public API for the booktree catalog layer.
# ABOUTME: Exports the tree-backed catalog, its record type, errors, and title keys.

from booktree.catalog.errors import (
    CatalogError,
    DuplicateTitleError,
    InsertResult,
    ValidationError,
)
from booktree.catalog.keys import keys_equal, title_key
from booktree.catalog.tree import BookCatalog
from booktree.catalog.types import BookRecord

__all__ = [
    "BookCatalog",
    "BookRecord",
    "CatalogError",
    "DuplicateTitleError",
    "InsertResult",
    "ValidationError",
    "keys_equal",
    "title_key",
]
