"""lein-phonics — Lein phonetic name coding.

Reduces a name to a fixed-length code approximating its pronunciation,
for fuzzy name matching and record linkage.
"""

from lein_phonics.core.encoder import LeinEncoder, encode
from lein_phonics.core.models import EncoderConfig
from lein_phonics.core.phonics import Phonics
from lein_phonics.core.protocols import PhoneticEncoder
from lein_phonics.exceptions import (
    EncodeError,
    PhonicsError,
    UnknownCharactersFoundError,
)
from lein_phonics.version import __version__

__all__: list[str] = [
    "EncodeError",
    "EncoderConfig",
    "LeinEncoder",
    "Phonics",
    "PhoneticEncoder",
    "PhonicsError",
    "UnknownCharactersFoundError",
    "__version__",
    "encode",
]
