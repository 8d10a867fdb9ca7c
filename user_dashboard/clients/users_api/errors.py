from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

GENERIC_FAILURE_MESSAGE = "An error occurred"


@dataclass
class ApiError(Exception):
    code: str
    message: str
    details: dict[str, Any] | list[Any] | str | None = None
    status_code: int | None = None

    def __str__(self) -> str:
        status = f" status={self.status_code}" if self.status_code is not None else ""
        return f"{self.code}: {self.message}{status}"


class TransportFailure(ApiError):
    """Network/transport failure before an HTTP response was returned."""


class ResponseFailure(ApiError):
    """Non-2xx status or a body that is not a user list."""

    @classmethod
    def from_http_response(cls, response: httpx.Response) -> "ResponseFailure":
        return cls(
            code="HTTP_ERROR",
            message=f"HTTP error! status: {response.status_code}",
            details=response.text or None,
            status_code=response.status_code,
        )

    @classmethod
    def invalid_payload(cls, details: Any = None, status_code: int | None = None) -> "ResponseFailure":
        message = "Malformed user list payload"
        if status_code is not None:
            message = f"{message} (status: {status_code})"
        return cls(code="INVALID_PAYLOAD", message=message, details=details, status_code=status_code)


def transport_failure(exc: httpx.RequestError) -> TransportFailure:
    if isinstance(exc, httpx.TimeoutException):
        return TransportFailure(
            code="TIMEOUT_ERROR",
            message="The request timed out",
            details=str(exc) or type(exc).__name__,
        )
    return TransportFailure(
        code="NETWORK_ERROR",
        message=GENERIC_FAILURE_MESSAGE,
        details=str(exc) or type(exc).__name__,
    )
