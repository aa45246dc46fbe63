# ABOUTME: Shared pytest fixtures for booktree tests.
# ABOUTME: Provides empty and pre-seeded catalogs with known tree shapes.

import pytest

from booktree.catalog import BookCatalog


@pytest.fixture
def catalog() -> BookCatalog:
    """An empty catalog."""
    return BookCatalog()


@pytest.fixture
def seeded_catalog() -> BookCatalog:
    """A catalog whose shape is fixed by insertion order.

    Layout (by title key):
               middlemarch
              /       \\
        dune            the name of the rose
           \\          /
          emma     rebecca
    """
    catalog = BookCatalog()
    catalog.insert("Middlemarch", "George Eliot", "Classic")
    catalog.insert("Dune", "Frank Herbert", "Sci-Fi")
    catalog.insert("The Name of the Rose", "Umberto Eco", "Mystery")
    catalog.insert("Emma", "Jane Austen", "Classic")
    catalog.insert("Rebecca", "Daphne du Maurier", "Mystery")
    return catalog
