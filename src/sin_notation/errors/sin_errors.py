from __future__ import annotations

EMPTY_INPUT_MESSAGE = "empty input"
INPUT_TOO_LONG_MESSAGE = "input exceeds 1 character"
MUST_BE_LETTER_MESSAGE = "must be a letter"
INVALID_STYLE_MESSAGE = "invalid style"
INVALID_SIDE_MESSAGE = "invalid side"


class SinDomainError(ValueError):
    """
    Base deterministic validation error for SIN tokens and identifier attributes.

    Every subclass pins a stable machine-readable `code` and a fixed human-readable
    message, so callers can branch on the class or on `code` without parsing text.

    Related:
      - src/sin_notation/parsing/sin_parser.py
      - src/sin_notation/primitives/identifier.py
      - src/sin_notation/errors/mapping.py
    """

    code = "sin_error"
    default_message = "invalid SIN value"

    def __init__(self, message: str | None = None, *, value: object = None) -> None:
        """
        Build validation error carrying the rejected raw value.

        Args:
            message: Optional override for the class default message.
            value: Raw value that failed validation.
        Returns:
            None.
        Assumptions:
            Rejected value is kept only for diagnostics and is never re-validated.
        Raises:
            None.
        Side Effects:
            None.
        """
        super().__init__(message if message is not None else self.default_message)
        self._value = value

    @property
    def value(self) -> object:
        """Raw value that failed validation."""
        return self._value

    @property
    def message(self) -> str:
        """Human-readable failure message."""
        return str(self)

    def to_item(self, *, path: str) -> dict[str, str]:
        """
        Build one deterministic validation item for the canonical error payload.

        Args:
            path: Location of the offending value inside caller payload.
        Returns:
            dict[str, str]: Item with `path`, `code`, and `message` keys.
        Assumptions:
            Path is supplied by the caller that knows payload structure.
        Raises:
            None.
        Side Effects:
            None.
        """
        return {
            "path": path,
            "code": self.code,
            "message": self.message,
        }


class SinEmptyInputError(SinDomainError):
    """Raised when a zero-length string is parsed."""

    code = "empty_input"
    default_message = EMPTY_INPUT_MESSAGE


class SinInputTooLongError(SinDomainError):
    """Raised when parsed text is longer than one byte in UTF-8."""

    code = "input_too_long"
    default_message = INPUT_TOO_LONG_MESSAGE


class SinMustBeLetterError(SinDomainError):
    """Raised when parsed input is not a string or its single byte is not an ASCII letter."""

    code = "must_be_letter"
    default_message = MUST_BE_LETTER_MESSAGE


class SinInvalidStyleError(SinDomainError):
    """Raised when a style value is not one of the 26 canonical uppercase letters."""

    code = "invalid_style"
    default_message = INVALID_STYLE_MESSAGE


class SinInvalidSideError(SinDomainError):
    """Raised when a side value is neither `first` nor `second`."""

    code = "invalid_side"
    default_message = INVALID_SIDE_MESSAGE
