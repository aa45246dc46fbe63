# ABOUTME: Case-insensitive comparison keys for catalog titles, authors, and genres.
# ABOUTME: Folds ASCII letters only, so ordering matches a byte-wise C-locale lowercase.

import string

_ASCII_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def title_key(text: str) -> str:
    """Return the case-insensitive comparison key for a piece of text.

    Only ``A``-``Z`` are folded. Non-ASCII characters keep their code point,
    and surrounding whitespace is preserved.
    """
    return text.translate(_ASCII_FOLD)


def keys_equal(left: str, right: str) -> bool:
    """Whether two strings are equal once case-folded."""
    return title_key(left) == title_key(right)
