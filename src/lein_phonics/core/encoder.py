"""Lein encoder — orchestrates normalization, reduction and formatting.

Guarantees
----------
* Pure orchestration — no I/O, no ``print()``.
* Only :class:`~lein_phonics.exceptions.PhonicsError` subclasses escape.
* ``encode`` never mutates encoder state; the configuration snapshot is
  read once per call, so instances are safe to share across threads.
"""

from __future__ import annotations

import dataclasses
import logging

from lein_phonics.core.formatter import format_code
from lein_phonics.core.models import DEFAULT_MAX_CODE_LEN, DEFAULT_STRICT, EncoderConfig
from lein_phonics.core.normalizer import normalize
from lein_phonics.core.reducer import reduce_letters
from lein_phonics.exceptions import InvalidConfigurationError, UnknownCharactersFoundError

_log = logging.getLogger(__name__)


class LeinEncoder:
    """Encode names into Lein codes.

    Parameters
    ----------
    config:
        Initial settings.  Defaults to a code length of 4 in lenient
        mode.
    """

    def __init__(self, config: EncoderConfig | None = None) -> None:
        if config is None:
            config = EncoderConfig()
        _validate_max_code_len(config.max_code_len)
        _validate_strict(config.strict)
        self._config: EncoderConfig = config

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(max_code_len={self._config.max_code_len}, "
            f"strict={self._config.strict})"
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def config(self) -> EncoderConfig:
        """Current configuration snapshot."""
        return self._config

    def get_max_code_len(self) -> int:
        return self._config.max_code_len

    def set_max_code_len(self, max_code_len: int) -> None:
        """Set the exact length of produced codes.

        Raises
        ------
        InvalidConfigurationError
            If *max_code_len* is not an integer of at least 1.
        """
        _validate_max_code_len(max_code_len)
        self._config = dataclasses.replace(self._config, max_code_len=max_code_len)

    def get_strict(self) -> bool:
        return self._config.strict

    def set_strict(self, strict: bool) -> None:
        """Choose between rejecting and dropping characters outside A–Z.

        Raises
        ------
        InvalidConfigurationError
            If *strict* is not a ``bool``.
        """
        _validate_strict(strict)
        self._config = dataclasses.replace(self._config, strict=strict)

    max_code_len = property(get_max_code_len, set_max_code_len)
    strict = property(get_strict, set_strict)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def encode(self, text: str) -> str:
        """Return the Lein code of *text*.

        The code is exactly ``max_code_len`` characters long, or empty
        when *text* holds no letters A–Z.

        Raises
        ------
        UnknownCharactersFoundError
            In strict mode, if *text* contains characters outside A–Z
            after uppercasing.
        """
        config = self._config
        try:
            letters = normalize(text, strict=config.strict)
        except UnknownCharactersFoundError as exc:
            _log.debug("Rejected %r: unknown characters %r", text, exc.characters)
            raise
        if not letters:
            return ""

        code = format_code(reduce_letters(letters), config.max_code_len)
        _log.debug("Encoded %r as %r", text, code)
        return code


def encode(
    text: str,
    *,
    max_code_len: int = DEFAULT_MAX_CODE_LEN,
    strict: bool = DEFAULT_STRICT,
) -> str:
    """Encode *text* with a one-off :class:`LeinEncoder`."""
    encoder = LeinEncoder(EncoderConfig(max_code_len=max_code_len, strict=strict))
    return encoder.encode(text)


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

def _validate_max_code_len(value: object) -> None:
    # bool is an int subclass.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfigurationError(
            f"max_code_len must be an integer, got {type(value).__name__}.",
        )
    if value < 1:
        raise InvalidConfigurationError(
            f"max_code_len must be at least 1, got {value}.",
            hint=f"The default code length is {DEFAULT_MAX_CODE_LEN}.",
        )


def _validate_strict(value: object) -> None:
    if not isinstance(value, bool):
        raise InvalidConfigurationError(
            f"strict must be a bool, got {type(value).__name__}.",
        )
