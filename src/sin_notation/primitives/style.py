from __future__ import annotations

from enum import Enum

from sin_notation.errors.sin_errors import SinInvalidStyleError


class Style(str, Enum):
    """
    Style - case-insensitive letter identity of a SIN token (`A`..`Z`).

    Canonical value is always the uppercase letter; the case of a rendered token
    belongs to `Side`, never to `Style`.

    Docs:
      - SPEC_FULL.md (section 3 Data model)
    Related:
      - src/sin_notation/primitives/identifier.py
      - src/sin_notation/parsing/sin_parser.py
    """

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    H = "H"
    I = "I"  # noqa: E741
    J = "J"
    K = "K"
    L = "L"
    M = "M"
    N = "N"
    O = "O"  # noqa: E741
    P = "P"
    Q = "Q"
    R = "R"
    S = "S"
    T = "T"
    U = "U"
    V = "V"
    W = "W"
    X = "X"
    Y = "Y"
    Z = "Z"

    @classmethod
    def coerce(cls, value: object) -> Style:
        """
        Resolve a Style member or its exact canonical uppercase value.

        Args:
            value: `Style` member or one uppercase ASCII letter string.
        Returns:
            Style: Matching enum member.
        Assumptions:
            Lowercase letters are not styles; they encode the second side of a token.
        Raises:
            SinInvalidStyleError: If value is not one of the 26 canonical styles.
        Side Effects:
            None.
        """
        if isinstance(value, Style):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        raise SinInvalidStyleError(value=value)

    @classmethod
    def from_letter(cls, letter: object) -> Style:
        """
        Case-fold one ASCII letter into its Style (`"c"` -> `Style.C`).

        Args:
            letter: One ASCII letter in either case.
        Returns:
            Style: Style whose value is the uppercase letter.
        Assumptions:
            Letter case carries the side and is discarded here.
        Raises:
            SinInvalidStyleError: If input is not exactly one ASCII letter.
        Side Effects:
            None.
        """
        if isinstance(letter, str) and len(letter) == 1 and letter.isascii():
            return cls.coerce(letter.upper())
        raise SinInvalidStyleError(value=letter)

    @property
    def uppercase(self) -> str:
        """
        Return style letter as rendered for the first player.

        Args:
            None.
        Returns:
            str: Uppercase letter (the enum value itself).
        Assumptions:
            None.
        Raises:
            None.
        Side Effects:
            None.
        """
        return self.value

    @property
    def lowercase(self) -> str:
        """
        Return style letter as rendered for the second player.

        Args:
            None.
        Returns:
            str: Lowercase letter.
        Assumptions:
            Values are ASCII, so `str.lower` maps one letter to one letter.
        Raises:
            None.
        Side Effects:
            None.
        """
        return self.value.lower()

    def __str__(self) -> str:
        """
        Return canonical uppercase letter.

        Args:
            None.
        Returns:
            str: Enum value, not the `Style.C` member name form.
        Assumptions:
            None.
        Raises:
            None.
        Side Effects:
            None.
        """
        return self.value
