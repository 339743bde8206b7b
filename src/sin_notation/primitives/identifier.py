from __future__ import annotations

from dataclasses import dataclass

from .side import Side
from .style import Style


@dataclass(frozen=True, slots=True)
class Identifier:
    """
    Identifier - one (style, side) pair and its single-letter token.

    Rules:
    - style is one of 26 canonical uppercase `Style` members
    - side is `Side.FIRST` or `Side.SECOND`
    - token is the style letter, uppercase iff side is first
    - immutable: every transformation returns a new value (or `self` when unchanged)

    Docs:
      - SPEC_FULL.md (section 4.1 Identifier)
    Related:
      - src/sin_notation/primitives/style.py
      - src/sin_notation/primitives/side.py
      - src/sin_notation/parsing/sin_parser.py
    """

    style: Style
    side: Side

    def __post_init__(self) -> None:
        """
        Fold raw attribute values into enum members and validate them.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Style is validated before side, so a pair of bad values reports the style.
        Raises:
            SinInvalidStyleError: If style is not one of 26 canonical letters.
            SinInvalidSideError: If side is neither `first` nor `second`.
        Side Effects:
            Replaces frozen slots `style` and `side` with enum members.
        """
        object.__setattr__(self, "style", Style.coerce(self.style))
        object.__setattr__(self, "side", Side.coerce(self.side))

    def render(self) -> str:
        """
        Return the canonical one-letter token.

        Args:
            None.
        Returns:
            str: Uppercase style letter for first player, lowercase for second.
        Assumptions:
            Attributes were validated in constructor.
        Raises:
            None.
        Side Effects:
            None.
        """
        if self.side is Side.FIRST:
            return self.style.uppercase
        return self.style.lowercase

    def flip(self) -> Identifier:
        """
        Return identifier of the same style owned by the other player.

        Args:
            None.
        Returns:
            Identifier: New value with opposite side.
        Assumptions:
            Flipping twice yields a value equal to the original.
        Raises:
            None.
        Side Effects:
            None.
        """
        return Identifier(style=self.style, side=self.side.opposite())

    def with_style(self, new_style: Style | str) -> Identifier:
        """
        Return identifier with another style and the same side.

        Args:
            new_style: Target style member or canonical uppercase letter.
        Returns:
            Identifier: `self` when style is unchanged, otherwise a new value.
        Assumptions:
            None.
        Raises:
            SinInvalidStyleError: If new_style is not a canonical style.
        Side Effects:
            None.
        """
        style = Style.coerce(new_style)
        if style is self.style:
            return self
        return Identifier(style=style, side=self.side)

    def with_side(self, new_side: Side | str) -> Identifier:
        """
        Return identifier with another side and the same style.

        Args:
            new_side: Target side member or `"first"` / `"second"`.
        Returns:
            Identifier: `self` when side is unchanged, otherwise a new value.
        Assumptions:
            None.
        Raises:
            SinInvalidSideError: If new_side is not a valid side.
        Side Effects:
            None.
        """
        side = Side.coerce(new_side)
        if side is self.side:
            return self
        return Identifier(style=self.style, side=side)

    def is_first_player(self) -> bool:
        """
        Report whether identifier belongs to the first player.

        Args:
            None.
        Returns:
            bool: True for uppercase tokens.
        Assumptions:
            Exactly one of `is_first_player` / `is_second_player` is true.
        Raises:
            None.
        Side Effects:
            None.
        """
        return self.side is Side.FIRST

    def is_second_player(self) -> bool:
        """
        Report whether identifier belongs to the second player.

        Args:
            None.
        Returns:
            bool: True for lowercase tokens.
        Assumptions:
            Exactly one of `is_first_player` / `is_second_player` is true.
        Raises:
            None.
        Side Effects:
            None.
        """
        return self.side is Side.SECOND

    def same_style(self, other: object) -> bool:
        """
        Report whether both identifiers share a style, whatever their sides.

        Args:
            other: Value to compare with.
        Returns:
            bool: True iff `other` is an Identifier with the same style.
        Assumptions:
            Non-Identifier values never share a style.
        Raises:
            None.
        Side Effects:
            None.
        """
        if not isinstance(other, Identifier):
            return False
        return self.style is other.style

    def same_side(self, other: object) -> bool:
        """
        Report whether both identifiers belong to the same player.

        Args:
            other: Value to compare with.
        Returns:
            bool: True iff `other` is an Identifier with the same side.
        Assumptions:
            Non-Identifier values never share a side.
        Raises:
            None.
        Side Effects:
            None.
        """
        if not isinstance(other, Identifier):
            return False
        return self.side is other.side

    def __str__(self) -> str:
        """
        Return the wire token.

        Args:
            None.
        Returns:
            str: Same value as `render()`.
        Assumptions:
            String form is the serialization of the identifier.
        Raises:
            None.
        Side Effects:
            None.
        """
        return self.render()

    def __repr__(self) -> str:
        """
        Return debug representation with plain attribute values.

        Args:
            None.
        Returns:
            str: Text like `Identifier(style='C', side='first')`.
        Assumptions:
            None.
        Raises:
            None.
        Side Effects:
            None.
        """
        return f"Identifier(style={self.style.value!r}, side={self.side.value!r})"
