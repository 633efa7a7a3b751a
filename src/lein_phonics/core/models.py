"""Domain models for lein-phonics.

The encoder configuration is a **frozen** dataclass — an immutable value
object.  Owners change a setting by swapping in a new instance, never by
mutating one that an in-flight call might be reading.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MAX_CODE_LEN: int = 4
"""Length of a Lein code unless configured otherwise."""

DEFAULT_STRICT: bool = False
"""Whether characters outside A–Z are rejected rather than dropped."""


@dataclass(frozen=True, slots=True)
class EncoderConfig:
    """Settings applied to a single :meth:`LeinEncoder.encode` call."""

    max_code_len: int = DEFAULT_MAX_CODE_LEN
    """Exact length of every non-empty code."""

    strict: bool = DEFAULT_STRICT
    """Raise on characters outside A–Z instead of discarding them."""
