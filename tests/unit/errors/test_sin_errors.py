from __future__ import annotations

import logging

import pytest

from sin_notation.api import SinTokenRequest
from sin_notation.errors import (
    NotationError,
    SinDomainError,
    SinEmptyInputError,
    SinInputTooLongError,
    SinInvalidSideError,
    SinInvalidStyleError,
    SinMustBeLetterError,
    map_sin_exception,
    validation_error,
)


@pytest.mark.parametrize(
    ("error_type", "code", "message"),
    [
        (SinEmptyInputError, "empty_input", "empty input"),
        (SinInputTooLongError, "input_too_long", "input exceeds 1 character"),
        (SinMustBeLetterError, "must_be_letter", "must be a letter"),
        (SinInvalidStyleError, "invalid_style", "invalid style"),
        (SinInvalidSideError, "invalid_side", "invalid side"),
    ],
)
def test_sin_errors_expose_stable_code_and_message(
    error_type: type[SinDomainError],
    code: str,
    message: str,
) -> None:
    """
    Verify each domain error pins its code, message and validation item shape.

    Args:
        error_type: Concrete SIN error class.
        code: Expected machine-readable code.
        message: Expected human-readable message.
    Returns:
        None.
    Assumptions:
        All SIN errors are `ValueError` subclasses.
    Raises:
        AssertionError: If code, message or item payload drift.
    Side Effects:
        None.
    """
    error = error_type(value="x")

    assert isinstance(error, SinDomainError)
    assert isinstance(error, ValueError)
    assert error.code == code
    assert error.message == message
    assert error.to_item(path="body.token") == {
        "path": "body.token",
        "code": code,
        "message": message,
    }


def test_notation_error_rejects_unknown_code_and_blank_message() -> None:
    """
    Verify NotationError only accepts canonical codes and non-blank messages.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        `not_found` is not produced by this library.
    Raises:
        AssertionError: If invalid contract fields are accepted.
    Side Effects:
        None.
    """
    with pytest.raises(ValueError):
        NotationError(code="not_found", message="Missing")
    with pytest.raises(ValueError):
        NotationError(code="validation_error", message="   ")


def test_notation_error_payload_is_deterministic() -> None:
    """
    Verify details mapping is normalized into sorted plain payload.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Tuples become lists and unknown scalars are stringified.
    Raises:
        AssertionError: If payload shape differs from contract.
    Side Effects:
        None.
    """
    error = NotationError(
        code=" validation_error ",
        message=" Invalid SIN value ",
        details={"zeta": ("a", 1), "alpha": {"b": None, "a": b"raw"}},
    )

    assert error.to_payload() == {
        "error": {
            "code": "validation_error",
            "message": "Invalid SIN value",
            "details": {
                "alpha": {"a": "b'raw'", "b": None},
                "zeta": ["a", 1],
            },
        }
    }
    assert list(error.to_payload()["error"]["details"]) == ["alpha", "zeta"]
    assert str(error) == "validation_error: Invalid SIN value"


def test_map_sin_exception_wraps_domain_error_with_path() -> None:
    """
    Verify domain error becomes one validation item at the caller-supplied path.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        None.
    Raises:
        AssertionError: If mapped details differ.
    Side Effects:
        None.
    """
    mapped = map_sin_exception(error=SinInputTooLongError(value="CC"), path="pieces.0")

    assert mapped.code == "validation_error"
    assert mapped.details == {
        "errors": [
            {
                "path": "pieces.0",
                "code": "input_too_long",
                "message": "input exceeds 1 character",
            }
        ]
    }


def test_map_sin_exception_passes_notation_error_through() -> None:
    error = validation_error(message="Invalid")

    assert map_sin_exception(error=error) is error


def test_validation_error_sorts_items_by_path_code_message() -> None:
    """
    Verify validation items are ordered deterministically.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Sort key is `(path, code, message)`.
    Raises:
        AssertionError: If item order depends on input order.
    Side Effects:
        None.
    """
    error = validation_error(
        message="Invalid pieces",
        errors=(
            SinMustBeLetterError().to_item(path="pieces.1"),
            SinEmptyInputError().to_item(path="pieces.0"),
            SinInputTooLongError().to_item(path="pieces.0"),
        ),
    )

    items = error.to_payload()["error"]["details"]["errors"]
    assert [(item["path"], item["code"]) for item in items] == [
        ("pieces.0", "empty_input"),
        ("pieces.0", "input_too_long"),
        ("pieces.1", "must_be_letter"),
    ]


def test_map_sin_exception_sorts_pydantic_items() -> None:
    """
    Verify pydantic errors keep SIN codes and are sorted by path.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Extra fields are forbidden on request DTOs.
    Raises:
        AssertionError: If mapped items are missing or out of order.
    Side Effects:
        None.
    """
    with pytest.raises(ValueError) as error_info:
        SinTokenRequest(token="CC", extra_field=1)  # type: ignore[call-arg]

    mapped = map_sin_exception(error=error_info.value)

    assert mapped.code == "validation_error"
    assert mapped.message == "Validation failed"
    items = mapped.to_payload()["error"]["details"]["errors"]
    assert [item["path"] for item in items] == ["extra_field", "token"]
    assert items[1] == {
        "path": "token",
        "code": "input_too_long",
        "message": "input exceeds 1 character",
    }


def test_map_sin_exception_maps_plain_value_error() -> None:
    """
    Verify generic ValueError maps to validation error without items.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Error text becomes the message.
    Raises:
        AssertionError: If mapping differs.
    Side Effects:
        None.
    """
    mapped = map_sin_exception(error=ValueError("bad token"))

    assert mapped.code == "validation_error"
    assert mapped.message == "bad token"
    assert mapped.details == {}


def test_map_sin_exception_maps_unknown_error_and_logs(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """
    Verify unknown exceptions map to unexpected_error and are logged at WARNING.

    Args:
        caplog: pytest log capture fixture.
    Returns:
        None.
    Assumptions:
        Reason is the exception text.
    Raises:
        AssertionError: If code, details or log record differ.
    Side Effects:
        None.
    """
    with caplog.at_level(logging.WARNING, logger="sin_notation.errors.mapping"):
        mapped = map_sin_exception(error=RuntimeError("boom"))

    assert mapped.code == "unexpected_error"
    assert mapped.details == {"reason": "boom"}
    assert "type=RuntimeError" in caplog.text
