"""Protocols (interfaces) shared by phonetic encoders.

Code that only needs to turn a word into a code should depend on
:class:`PhoneticEncoder` rather than on a concrete encoder class.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class PhoneticEncoder(Protocol):
    """Contract for phonetic encoders.

    Any object that implements :meth:`encode` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).  Encoders are not expected to keep state between calls.
    """

    def encode(self, word: str) -> str:
        """Encode *word* and return its phonetic code.

        Raises
        ------
        EncodeError
            When *word* cannot be encoded under the encoder's settings.
        """
        ...  # pragma: no cover
