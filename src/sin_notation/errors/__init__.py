from .mapping import map_sin_exception, validation_error
from .notation_error import NotationError
from .sin_errors import (
    EMPTY_INPUT_MESSAGE,
    INPUT_TOO_LONG_MESSAGE,
    INVALID_SIDE_MESSAGE,
    INVALID_STYLE_MESSAGE,
    MUST_BE_LETTER_MESSAGE,
    SinDomainError,
    SinEmptyInputError,
    SinInputTooLongError,
    SinInvalidSideError,
    SinInvalidStyleError,
    SinMustBeLetterError,
)

__all__ = [
    "EMPTY_INPUT_MESSAGE",
    "INPUT_TOO_LONG_MESSAGE",
    "INVALID_SIDE_MESSAGE",
    "INVALID_STYLE_MESSAGE",
    "MUST_BE_LETTER_MESSAGE",
    "NotationError",
    "SinDomainError",
    "SinEmptyInputError",
    "SinInputTooLongError",
    "SinInvalidSideError",
    "SinInvalidStyleError",
    "SinMustBeLetterError",
    "map_sin_exception",
    "validation_error",
]
