"""Custom exception hierarchy for lein-phonics.

Every error raised by the library inherits from :class:`PhonicsError`
so that callers (and the CLI error boundary) can catch a single type.

Hierarchy
---------
PhonicsError
├── EncodeError
│   └── UnknownCharactersFoundError
├── InvalidConfigurationError
└── DependencyMissingError
"""

from __future__ import annotations


class PhonicsError(Exception):
    """Base exception for all lein-phonics errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Encoding --------------------------------------------------------------

class EncodeError(PhonicsError):
    """Raised when an input string cannot be encoded."""


class UnknownCharactersFoundError(EncodeError):
    """Raised in strict mode when the input holds characters outside A–Z.

    Many phonetic algorithms only accept a limited range of inputs; a
    French ``"ç"`` has no place in an English-language encoder.  In
    lenient mode such characters are dropped instead.
    """

    def __init__(self, characters: str) -> None:
        super().__init__(
            f"Unknown characters found: {characters!r}",
            hint="Disable strict mode to silently drop characters outside A-Z.",
        )
        self.characters: str = characters
        """Offending characters, in order of first appearance."""


# --- Configuration ---------------------------------------------------------

class InvalidConfigurationError(PhonicsError):
    """Raised when an encoder setting is given an unusable value."""


# --- Environment / tooling -------------------------------------------------

class DependencyMissingError(PhonicsError):
    """Raised when an optional runtime dependency is not available."""
