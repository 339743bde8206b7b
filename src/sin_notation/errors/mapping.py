from __future__ import annotations

import logging
from typing import Mapping, Sequence

from pydantic import ValidationError

from .notation_error import NotationError
from .sin_errors import SinDomainError

log = logging.getLogger(__name__)

_DEFAULT_PATH = "token"
_ITEM_KEYS = ("path", "code", "message")


def validation_error(
    *,
    message: str,
    errors: Sequence[Mapping[str, str]] | None = None,
) -> NotationError:
    """
    Build `validation_error` NotationError, listing items under `details.errors`.

    Docs:
      - SPEC_FULL.md (section 4.3 Errors)
    Related:
      - src/sin_notation/errors/sin_errors.py
      - src/sin_notation/errors/notation_error.py

    Args:
        message: Summary of the failure.
        errors: Optional `path/code/message` items; omitted when None.
    Returns:
        NotationError: Validation error whose items are sorted by path, code, message.
    Assumptions:
        Items come from `SinDomainError.to_item` or pydantic error conversion.
    Raises:
        KeyError: If an item lacks one of `path`, `code`, `message`.
    Side Effects:
        None.
    """
    if errors is None:
        return NotationError(code="validation_error", message=message, details={})
    items = sorted(
        ({key: str(item[key]) for key in _ITEM_KEYS} for item in errors),
        key=lambda item: tuple(item[key] for key in _ITEM_KEYS),
    )
    return NotationError(code="validation_error", message=message, details={"errors": items})


def map_sin_exception(*, error: Exception, path: str = _DEFAULT_PATH) -> NotationError:
    """
    Map SIN domain, pydantic and generic exceptions to canonical NotationError contract.

    Args:
        error: Caught exception.
        path: Payload location used for single domain error items.
    Returns:
        NotationError: Canonical mapped error.
    Assumptions:
        Unknown exceptions are mapped to generic `unexpected_error`.
    Raises:
        None.
    Side Effects:
        Logs non-validation failures at WARNING level.
    """
    if isinstance(error, NotationError):
        return error

    if isinstance(error, SinDomainError):
        return validation_error(
            message="Invalid SIN value",
            errors=(error.to_item(path=path),),
        )

    # pydantic.ValidationError is a ValueError subclass, so it must be checked first.
    if isinstance(error, ValidationError):
        return validation_error(
            message="Validation failed",
            errors=_pydantic_validation_items(error=error),
        )

    if isinstance(error, ValueError):
        return validation_error(message=str(error) or "Validation failed")

    log.warning("unexpected SIN operation error type=%s reason=%s", type(error).__name__, error)
    return NotationError(
        code="unexpected_error",
        message="Unexpected SIN operation error",
        details={"reason": str(error)},
    )


def _pydantic_validation_items(*, error: ValidationError) -> list[dict[str, str]]:
    """
    Convert pydantic error entries into `path/code/message` items.

    Args:
        error: Raised pydantic validation error.
    Returns:
        list[dict[str, str]]: Unsorted normalized items.
    Assumptions:
        Custom SIN errors keep their domain code as pydantic error `type`.
    Raises:
        None.
    Side Effects:
        None.
    """
    items: list[dict[str, str]] = []
    for raw in error.errors():
        loc = raw.get("loc", ())
        path = ".".join(str(part) for part in loc) if loc else "unknown"
        items.append(
            {
                "path": path,
                "code": str(raw.get("type", "validation_error")),
                "message": str(raw.get("msg", "Validation error")),
            }
        )
    return items
