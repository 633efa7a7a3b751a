"""Fixed-length code formatting."""

from __future__ import annotations

PAD_CHAR: str = "0"

RESERVED_EMPTY_CODE: str = "0000"
"""Padded result that is reported as the empty code instead.

Compared literally, whatever the configured code length.
"""


def format_code(key: str, max_code_len: int) -> str:
    """Zero-pad and truncate *key* to exactly *max_code_len* characters.

    Returns ``""`` when the result equals :data:`RESERVED_EMPTY_CODE`.
    """
    code = (key + PAD_CHAR * max_code_len)[:max_code_len]
    if code == RESERVED_EMPTY_CODE:
        return ""
    return code
