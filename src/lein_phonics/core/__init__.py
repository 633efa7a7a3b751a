"""Core layer — the pure Lein encoding pipeline.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* All functions must be fully typed and deterministic.
"""

from lein_phonics.core.encoder import LeinEncoder, encode
from lein_phonics.core.models import EncoderConfig
from lein_phonics.core.phonics import Phonics
from lein_phonics.core.protocols import PhoneticEncoder

__all__: list[str] = [
    "EncoderConfig",
    "LeinEncoder",
    "Phonics",
    "PhoneticEncoder",
    "encode",
]
