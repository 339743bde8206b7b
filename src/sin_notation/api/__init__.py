from .dto import (
    SinIdentifierRequest,
    SinIdentifierResponse,
    SinTokenRequest,
    build_identifier_from_request,
    build_identifier_from_token_request,
    build_identifier_response,
)

__all__ = [
    "SinIdentifierRequest",
    "SinIdentifierResponse",
    "SinTokenRequest",
    "build_identifier_from_request",
    "build_identifier_from_token_request",
    "build_identifier_response",
]
