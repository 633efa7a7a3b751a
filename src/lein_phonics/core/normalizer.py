"""Input normalization — uppercase, validate, and filter to A–Z.

Pure functions only: no I/O, no side effects.
"""

from __future__ import annotations

import re

from lein_phonics.exceptions import UnknownCharactersFoundError

_NON_LETTER_RE: re.Pattern[str] = re.compile(r"[^A-Z]")


def find_unknown_characters(text: str) -> str:
    """Return the characters of *text* outside A–Z, each listed once."""
    return "".join(dict.fromkeys(_NON_LETTER_RE.findall(text)))


def normalize(text: str, *, strict: bool = False) -> str:
    """Uppercase *text* and keep only the letters A–Z.

    Uppercasing uses :meth:`str.upper`, which does not depend on the
    process locale.  A character that uppercases into plain letters
    (``"ß"`` → ``"SS"``) therefore counts as valid.

    Raises
    ------
    UnknownCharactersFoundError
        If *strict* is set and the uppercased text contains anything
        other than A–Z, including whitespace, digits and accented
        letters.
    """
    upper = text.upper()
    if strict:
        unknown = find_unknown_characters(upper)
        if unknown:
            raise UnknownCharactersFoundError(unknown)
    return _NON_LETTER_RE.sub("", upper)
