# ABOUTME: Unit tests for case-insensitive title keys and the BookRecord type.
# ABOUTME: Validates ASCII-only folding, whitespace preservation, and record immutability.

import dataclasses

import pytest

from booktree.catalog import BookRecord, keys_equal, title_key


class TestTitleKey:
    """Tests for title_key and keys_equal."""

    def test_folds_ascii_uppercase(self) -> None:
        """ASCII capitals are lowered."""
        assert title_key("The Name Of The ROSE") == "the name of the rose"

    def test_keeps_whitespace_and_punctuation(self) -> None:
        """Nothing is trimmed or collapsed."""
        assert title_key("  Foucault's  Pendulum! ") == "  foucault's  pendulum! "

    def test_non_ascii_untouched(self) -> None:
        """Letters outside A-Z keep their case."""
        assert title_key("ÉMILE") == "Émile"
        assert title_key("STRASSE ß") == "strasse ß"

    def test_empty(self) -> None:
        """The empty string maps to itself."""
        assert title_key("") == ""

    def test_keys_equal(self) -> None:
        """keys_equal ignores ASCII case only."""
        assert keys_equal("Jane Doe", "JANE doe")
        assert not keys_equal("Jane Doe", "Jane Doe ")
        assert not keys_equal("Ärger", "ärger")

    def test_ordering_matches_folded_code_points(self) -> None:
        """Keys compare case-blind, so capitalized titles sort among lowercase ones."""
        assert title_key("apple") < title_key("Banana") < title_key("cherry")
        assert "Apple" < "[bracket]"
        assert title_key("[bracket]") < title_key("Apple")


class TestBookRecord:
    """Tests for the BookRecord dataclass."""

    def test_key_property(self) -> None:
        """key exposes the folded title."""
        record = BookRecord(title="Dune", author="Frank Herbert", genre="Sci-Fi")
        assert record.key == "dune"

    def test_is_frozen(self) -> None:
        """Records cannot be modified after creation."""
        record = BookRecord(title="Dune", author="Frank Herbert", genre="Sci-Fi")
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.title = "Children of Dune"  # type: ignore[misc]

    def test_equality_is_by_value(self) -> None:
        """Two records with the same fields compare equal."""
        assert BookRecord("Dune", "Frank Herbert", "Sci-Fi") == BookRecord(
            "Dune", "Frank Herbert", "Sci-Fi"
        )
