"""
SIN primitives.

This package re-exports the value types so that other modules can import them
from one place:

    from sin_notation.primitives import Identifier, Side, Style
"""

from .constants import MAX_TOKEN_BYTES, VALID_SIDES, VALID_STYLES
from .identifier import Identifier
from .side import Side
from .style import Style

__all__ = [
    "Identifier",
    "MAX_TOKEN_BYTES",
    "Side",
    "Style",
    "VALID_SIDES",
    "VALID_STYLES",
]
