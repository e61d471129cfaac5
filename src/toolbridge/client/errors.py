# src/toolbridge/client/errors.py

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    UNAUTHORIZED = "UNAUTHORIZED"
    PAYMENT_REQUIRED = "PAYMENT_REQUIRED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


STATUS_CODE_MAP: dict[int, ErrorCode] = {
    401: ErrorCode.UNAUTHORIZED,
    402: ErrorCode.PAYMENT_REQUIRED,
    403: ErrorCode.FORBIDDEN,
    404: ErrorCode.NOT_FOUND,
    500: ErrorCode.INTERNAL_ERROR,
    503: ErrorCode.SERVICE_UNAVAILABLE,
}

DEFAULT_ERROR_MESSAGE = "An error occurred"


class ConfigurationError(ValueError):
    """Invalid client configuration. Raised before any request is made."""


class RegistryError(Exception):
    """A registry request failed.

    Attributes:
        message: Human-readable description, taken from the response body.
        code: Symbolic error code derived from the HTTP status.
        status: HTTP status, or None when no response was received.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        status: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status = status

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"code={self.code.value!r}, status={self.status!r})"
        )


def code_for_status(status: int) -> ErrorCode:
    return STATUS_CODE_MAP.get(status, ErrorCode.UNKNOWN_ERROR)


def error_from_response(status: int, body: Any) -> RegistryError:
    """Build a RegistryError from a non-2xx status and its decoded body.

    ``message`` wins over ``error``; a body without either (or not a JSON
    object at all) gets the default message.
    """
    message = DEFAULT_ERROR_MESSAGE
    if isinstance(body, dict):
        for key in ("message", "error"):
            if body.get(key) is not None:
                message = str(body[key])
                break
    return RegistryError(message, code_for_status(status), status)
