from __future__ import annotations

from typing import Any


class LardiClientError(Exception):
    """Base client error."""

    operation: str | None = None

    def __str__(self) -> str:
        detail = super().__str__()
        if self.operation:
            return f"{self.operation} failed: {detail}"
        return detail


class ValidationError(LardiClientError):
    """Request rejected locally, before any network call."""


class SerializationError(LardiClientError):
    """Request body could not be encoded as JSON."""


class TransportError(LardiClientError):
    """Transport/network layer error."""


class DecodeError(LardiClientError):
    """Response body did not match the expected shape."""


class ApiError(LardiClientError):
    def __init__(self, status: int, error_code: str, message: str, *, status_code: int | None = None):
        super().__init__(f"API error: status={status}, error={error_code}, message={message}")
        self.status = status
        self.error_code = error_code
        self.message = message
        self.status_code = status_code if status_code is not None else status

    @classmethod
    def from_payload(cls, data: Any, status_code: int) -> "ApiError":
        if not isinstance(data, dict):
            raise DecodeError(f"failed to decode error response: expected object, got {type(data).__name__}")
        status = data.get("status")
        status = 0 if status is None else status
        error_code = data.get("error")
        error_code = "" if error_code is None else error_code
        message = data.get("message")
        message = "" if message is None else message
        if isinstance(status, bool) or not isinstance(status, int):
            raise DecodeError("failed to decode error response: 'status' is not an integer")
        if not isinstance(error_code, str) or not isinstance(message, str):
            raise DecodeError("failed to decode error response: 'error' and 'message' must be strings")
        err_cls = AuthError if status_code in (401, 403) else ApiError
        return err_cls(status, error_code, message, status_code=status_code)


class AuthError(ApiError):
    """Auth-related API error."""
