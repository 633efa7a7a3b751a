"""Letter-class reduction — the heart of the Lein algorithm.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.

Pipeline order (enforced by :func:`reduce_letters`):

1. **Split** — keep the first letter verbatim, work on the rest.
2. **Delete** — drop vowels and the semivowels Y, W, H.
3. **Squeeze** — collapse adjacent duplicates left after deletion.
4. **Map** — replace consonants by their class digit.

The order is load-bearing: squeezing before deletion would miss letters
that only become adjacent once the vowels between them are gone.
"""

from __future__ import annotations

DELETED_LETTERS: str = "AEIOUYWH"
"""Vowels and semivowels; they contribute nothing to the code."""

CONSONANT_CLASSES: tuple[tuple[str, str], ...] = (
    ("DT", "1"),
    ("MN", "2"),
    ("LR", "3"),
    ("BFPV", "4"),
    ("CJKGQSXZ", "5"),
)
"""Substitution passes, applied in this order."""


# ---------------------------------------------------------------------------
# String helpers
# ---------------------------------------------------------------------------

def strip_first_char(string: str) -> str:
    """Return *string* without its first character."""
    return string[1:]


def remove_duplicate_characters(string: str) -> str:
    """Collapse every run of identical adjacent characters to one.

    ``"baaaaabbbbbbb"`` becomes ``"bab"``; characters that are equal but
    not adjacent are left alone.
    """
    result: list[str] = []
    for char in string:
        if not result or result[-1] != char:
            result.append(char)
    return "".join(result)


def transform_characters(string: str, src: str, dst: str) -> str:
    """Replace each character of *string* found in *src* with *dst*.

    *dst* may be empty, in which case matching characters are deleted.
    """
    return "".join(dst if char in src else char for char in string)


# ---------------------------------------------------------------------------
# Composite pipeline
# ---------------------------------------------------------------------------

def reduce_letters(letters: str) -> str:
    """Reduce a normalized, non-empty letter sequence to its Lein key.

    The key is the first letter followed by one digit per surviving
    consonant group; it is not yet padded or truncated.
    """
    first_char = letters[0]
    rest = strip_first_char(letters)
    rest = transform_characters(rest, DELETED_LETTERS, "")
    rest = remove_duplicate_characters(rest)
    # Replaced characters become digits, so later passes never see them.
    for src, digit in CONSONANT_CLASSES:
        rest = transform_characters(rest, src, digit)
    return first_char + rest
