"""
Pydantic boundary models and converters for SIN identifiers.

Request models validate through the same domain code as `parse` and `Identifier`,
and re-raise domain failures as pydantic errors whose `type` is the SIN error code.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_core import PydanticCustomError

from sin_notation.errors.sin_errors import SinDomainError
from sin_notation.parsing import parse, parse_components
from sin_notation.primitives import Identifier, Side, Style


class SinTokenRequest(BaseModel):
    """
    Request DTO carrying one SIN token (`"C"`, `"c"`, ...).
    """

    model_config = ConfigDict(extra="forbid")

    token: str

    @field_validator("token")
    @classmethod
    def _validate_token(cls, token: str) -> str:
        try:
            parse_components(token)
        except SinDomainError as error:
            raise _as_pydantic_error(error=error) from error
        return token


class SinIdentifierRequest(BaseModel):
    """
    Request DTO carrying an explicit `(style, side)` pair.
    """

    model_config = ConfigDict(extra="forbid")

    style: str
    side: str

    @field_validator("style")
    @classmethod
    def _validate_style(cls, style: str) -> str:
        try:
            return Style.coerce(style).value
        except SinDomainError as error:
            raise _as_pydantic_error(error=error) from error

    @field_validator("side")
    @classmethod
    def _validate_side(cls, side: str) -> str:
        try:
            return Side.coerce(side).value
        except SinDomainError as error:
            raise _as_pydantic_error(error=error) from error


class SinIdentifierResponse(BaseModel):
    """
    API representation of one identifier.
    """

    token: str
    style: str
    side: str
    is_first_player: bool


def build_identifier_from_token_request(*, request: SinTokenRequest) -> Identifier:
    """
    Convert validated token request into domain identifier.

    Args:
        request: Parsed token request DTO.
    Returns:
        Identifier: Domain value for the token.
    Assumptions:
        Token already passed DTO validation.
    Raises:
        SinDomainError: If request was built with `model_construct` and skipped validation.
    Side Effects:
        None.
    """
    return parse(request.token)


def build_identifier_from_request(*, request: SinIdentifierRequest) -> Identifier:
    """
    Convert validated `(style, side)` request into domain identifier.

    Args:
        request: Parsed identifier request DTO.
    Returns:
        Identifier: Domain value for the pair.
    Assumptions:
        Fields already passed DTO validation.
    Raises:
        SinDomainError: If request was built with `model_construct` and skipped validation.
    Side Effects:
        None.
    """
    return Identifier(style=request.style, side=request.side)


def build_identifier_response(*, identifier: Identifier) -> SinIdentifierResponse:
    """Build API response for one identifier."""
    return SinIdentifierResponse(
        token=identifier.render(),
        style=identifier.style.value,
        side=identifier.side.value,
        is_first_player=identifier.is_first_player(),
    )


def _as_pydantic_error(*, error: SinDomainError) -> PydanticCustomError:
    return PydanticCustomError(error.code, error.message)
