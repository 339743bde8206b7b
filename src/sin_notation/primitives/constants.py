from __future__ import annotations

from .side import Side
from .style import Style

# Fixed vocabularies of the notation; built once at import.
VALID_STYLES: tuple[Style, ...] = tuple(Style)
VALID_SIDES: tuple[Side, ...] = tuple(Side)

# A token is exactly one ASCII letter, so one UTF-8 byte.
MAX_TOKEN_BYTES = 1

__all__ = [
    "MAX_TOKEN_BYTES",
    "VALID_SIDES",
    "VALID_STYLES",
]
