from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from user_dashboard.clients.users_api.errors import ApiError, ResponseFailure, TransportFailure


def build_error_payload(error: Exception) -> dict[str, Any]:
    if isinstance(error, ApiError):
        return {
            "category": _classify_api_error(error),
            "code": error.code,
            "message": error.message,
            "status_code": error.status_code,
            "action": "retry",
        }
    return {
        "category": "internal",
        "code": "INTERNAL_ERROR",
        "message": str(error),
        "status_code": None,
        "action": "retry",
    }


def print_error_banner(
    payload: Mapping[str, Any],
    dictionary: Mapping[str, str],
    output: Callable[[str], None] = print,
) -> None:
    status = payload.get("status_code")
    output(f"[ERROR] {dictionary['error']}")
    output(
        f"code={payload.get('code')} "
        f"message={payload.get('message')} "
        f"status={status if status is not None else 'n/a'} "
        f"category={payload.get('category')}"
    )


def _classify_api_error(error: ApiError) -> str:
    if isinstance(error, TransportFailure):
        return "timeout" if error.code == "TIMEOUT_ERROR" else "network"
    if isinstance(error, ResponseFailure) and error.code == "INVALID_PAYLOAD":
        return "payload"
    if error.status_code and error.status_code >= 500:
        return "server"
    if error.status_code and error.status_code >= 400:
        return "client"
    return "api"
