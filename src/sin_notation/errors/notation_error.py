from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

_CANONICAL_CODES = ("unexpected_error", "validation_error")
_JSON_SCALARS = (str, int, float, bool, type(None))


@dataclass(frozen=True, slots=True)
class NotationError(Exception):
    """
    NotationError - serializable error for callers exposing SIN values at a boundary.

    `SinDomainError` subclasses stay precise inside the library; an outer layer turns
    them into this type with `map_sin_exception` and emits `to_payload()`.

    Docs:
      - SPEC_FULL.md (section 4.3 Errors)
    Related:
      - src/sin_notation/errors/mapping.py
      - src/sin_notation/errors/sin_errors.py
      - src/sin_notation/api/dto.py
    """

    code: str
    message: str
    details: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        """
        Check code and message, and copy details into sorted plain data.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Only `validation_error` and `unexpected_error` are produced by this library.
        Raises:
            ValueError: If `code` is not canonical or `message` is blank.
            TypeError: If `details` is given and is not a mapping.
        Side Effects:
            Replaces frozen slots `code`, `message`, `details` with stripped/copied values.
        """
        code = self.code.strip()
        message = self.message.strip()
        if code not in _CANONICAL_CODES:
            raise ValueError(f"NotationError.code must be one of {_CANONICAL_CODES}, got {code!r}")
        if not message:
            raise ValueError("NotationError.message must be non-empty")
        object.__setattr__(self, "code", code)
        object.__setattr__(self, "message", message)

        if self.details is not None:
            if not isinstance(self.details, Mapping):
                raise TypeError("NotationError.details must be a mapping when provided")
            object.__setattr__(self, "details", _plain(self.details))

    def to_payload(self) -> dict[str, Any]:
        """
        Build `{"error": {"code", "message", "details"}}` for JSON output.

        Args:
            None.
        Returns:
            dict[str, Any]: Payload; missing details become an empty dict.
        Assumptions:
            Details are already plain data after construction.
        Raises:
            None.
        Side Effects:
            None.
        """
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": dict(self.details or {}),
            }
        }

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


def _plain(value: Any) -> Any:
    """
    Copy error details into JSON-ready data with sorted mapping keys.

    Args:
        value: Detail value: mapping, list/tuple of items, scalar or anything else.
    Returns:
        Any: Dicts with string keys in sorted order, lists, JSON scalars, or `str(value)`.
    Assumptions:
        Details hold validation items and short reasons, so recursion stays shallow.
    Raises:
        None.
    Side Effects:
        None.
    """
    if isinstance(value, Mapping):
        return {str(key): _plain(value[key]) for key in sorted(value, key=str)}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    if isinstance(value, _JSON_SCALARS):
        return value
    return str(value)
