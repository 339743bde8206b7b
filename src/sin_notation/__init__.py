"""
SIN (Style Identifier Notation) codec.

A token is one ASCII letter: the letter identity is the style, the case is the side
(uppercase for first player, lowercase for second player).

    from sin_notation import parse, valid

    parse("c")  # Identifier(style='C', side='second')
    valid("CC")  # False
"""

from .errors import (
    NotationError,
    SinDomainError,
    SinEmptyInputError,
    SinInputTooLongError,
    SinInvalidSideError,
    SinInvalidStyleError,
    SinMustBeLetterError,
    map_sin_exception,
)
from .parsing import parse, parse_components, valid
from .primitives import MAX_TOKEN_BYTES, VALID_SIDES, VALID_STYLES, Identifier, Side, Style

__version__ = "1.0.0"

__all__ = [
    "Identifier",
    "MAX_TOKEN_BYTES",
    "NotationError",
    "Side",
    "SinDomainError",
    "SinEmptyInputError",
    "SinInputTooLongError",
    "SinInvalidSideError",
    "SinInvalidStyleError",
    "SinMustBeLetterError",
    "Style",
    "VALID_SIDES",
    "VALID_STYLES",
    "map_sin_exception",
    "parse",
    "parse_components",
    "valid",
]
