from __future__ import annotations

from enum import Enum

from sin_notation.errors.sin_errors import SinInvalidSideError


class Side(str, Enum):
    """
    Side - which player owns a style instance.

    Encoded in the token by letter case: uppercase for `first`, lowercase for `second`.

    Docs:
      - SPEC_FULL.md (section 3 Data model)
    Related:
      - src/sin_notation/primitives/identifier.py
      - src/sin_notation/parsing/sin_parser.py
    """

    FIRST = "first"
    SECOND = "second"

    @classmethod
    def coerce(cls, value: object) -> Side:
        """
        Resolve a Side member or its exact value (`"first"` / `"second"`).

        Args:
            value: `Side` member or raw side literal.
        Returns:
            Side: Matching enum member.
        Assumptions:
            Literals are case-sensitive; `"FIRST"` is not a side.
        Raises:
            SinInvalidSideError: If value is not one of the two sides.
        Side Effects:
            None.
        """
        if isinstance(value, Side):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        raise SinInvalidSideError(value=value)

    def opposite(self) -> Side:
        """
        Return the other player's side.

        Args:
            None.
        Returns:
            Side: `SECOND` for `FIRST` and `FIRST` for `SECOND`.
        Assumptions:
            Exactly two sides exist.
        Raises:
            None.
        Side Effects:
            None.
        """
        return Side.SECOND if self is Side.FIRST else Side.FIRST

    def __str__(self) -> str:
        """
        Return side literal.

        Args:
            None.
        Returns:
            str: `"first"` or `"second"`.
        Assumptions:
            None.
        Raises:
            None.
        Side Effects:
            None.
        """
        return self.value
