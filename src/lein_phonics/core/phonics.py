"""Generic façade over any :class:`PhoneticEncoder`."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

from lein_phonics.core.protocols import PhoneticEncoder

E = TypeVar("E", bound=PhoneticEncoder)


class Phonics(Generic[E]):
    """Build an encoder from *factory* and delegate encoding to it.

    Lets callers pick the algorithm once, e.g. ``Phonics(LeinEncoder)``,
    and pass the façade around without caring which encoder it wraps.
    """

    def __init__(self, factory: Callable[[], E]) -> None:
        self._encoder: E = factory()

    @property
    def encoder(self) -> E:
        """The wrapped encoder instance."""
        return self._encoder

    def encode(self, word: str) -> str:
        return self._encoder.encode(word)
