"""Shared service error definitions."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ServiceError(Exception):
    code: str
    message: str
    status_code: int = 400

    def __str__(self) -> str:  # noqa: D401 override
        return f"{self.code}: {self.message}"


class EmptyInputError(ServiceError):
    """Number field left blank; callers show a neutral placeholder."""


class InvalidFormatError(ServiceError):
    """Number does not match the pattern for its payment type."""


class InvalidFieldError(ServiceError):
    """Free-text field cannot be carried in the payload."""


def err_empty_input(message: str | None = None) -> EmptyInputError:
    return EmptyInputError(
        code="ERR_EMPTY_INPUT",
        message=message or "Enter valid payment details to generate QR code",
    )


def err_invalid_format(message: str | None = None) -> InvalidFormatError:
    return InvalidFormatError(code="ERR_INVALID_FORMAT", message=message or "Please enter a valid number")


def err_invalid_field(message: str | None = None) -> InvalidFieldError:
    return InvalidFieldError(code="ERR_INVALID_FIELD", message=message or "Field cannot be encoded")


def err_bad_payload(message: str | None = None) -> ServiceError:
    return ServiceError(code="ERR_BAD_PAYLOAD", message=message or "Invalid request payload", status_code=400)
