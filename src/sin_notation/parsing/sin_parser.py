"""
Byte-level SIN token parser.

Validation works on the UTF-8 encoding of the input, not on code points: every
non-ASCII character (accented letters, full-width or Cyrillic lookalikes, zero-width
marks, BOM) encodes to more than one byte and is rejected by the length check, so no
Unicode confusables table is needed.
"""

from __future__ import annotations

import logging

from sin_notation.errors.sin_errors import (
    SinDomainError,
    SinEmptyInputError,
    SinInputTooLongError,
    SinMustBeLetterError,
)
from sin_notation.primitives import MAX_TOKEN_BYTES, Identifier, Side, Style

log = logging.getLogger(__name__)

_UPPERCASE_FIRST = 0x41  # "A"
_UPPERCASE_LAST = 0x5A  # "Z"
_LOWERCASE_FIRST = 0x61  # "a"
_LOWERCASE_LAST = 0x7A  # "z"


def parse_components(text: object) -> tuple[Style, Side]:
    """
    Decode one SIN token into its `(Style, Side)` pair.

    Args:
        text: Raw token; only `str` values can succeed.
    Returns:
        tuple[Style, Side]: Case-folded style and case-derived side.
    Assumptions:
        Checks run in fixed order (type, empty, length, letter); the first failure wins.
    Raises:
        SinMustBeLetterError: If input is not a `str` or its byte is not an ASCII letter.
        SinEmptyInputError: If input is an empty string.
        SinInputTooLongError: If input encodes to more than one UTF-8 byte.
    Side Effects:
        None.
    """
    if not isinstance(text, str):
        raise SinMustBeLetterError(value=text)
    if not text:
        raise SinEmptyInputError(value=text)

    # surrogatepass keeps lone surrogates measurable instead of raising UnicodeEncodeError.
    raw = text.encode("utf-8", errors="surrogatepass")
    if len(raw) > MAX_TOKEN_BYTES:
        raise SinInputTooLongError(value=text)

    byte = raw[0]
    if _UPPERCASE_FIRST <= byte <= _UPPERCASE_LAST:
        return Style.from_letter(text), Side.FIRST
    if _LOWERCASE_FIRST <= byte <= _LOWERCASE_LAST:
        return Style.from_letter(text), Side.SECOND
    raise SinMustBeLetterError(value=text)


def parse(text: object) -> Identifier:
    """
    Parse one SIN token into an `Identifier`.

    Args:
        text: Raw token; only one ASCII letter succeeds.
    Returns:
        Identifier: Value whose `render()` equals the input.
    Assumptions:
        Failure order is the one of `parse_components`.
    Raises:
        SinDomainError: Any of the parse failures from `parse_components`.
    Side Effects:
        None.
    """
    style, side = parse_components(text)
    return Identifier(style=style, side=side)


def valid(text: object) -> bool:
    """
    Report whether `parse` would accept the input.

    Args:
        text: Raw candidate token of any type.
    Returns:
        bool: True for exactly one ASCII letter, False otherwise.
    Assumptions:
        Only SIN validation failures are converted; other exceptions propagate.
    Raises:
        None.
    Side Effects:
        Logs the rejection reason at DEBUG level.
    """
    try:
        parse_components(text)
    except SinDomainError as error:
        log.debug("rejected SIN token=%r code=%s", text, error.code)
        return False
    return True
