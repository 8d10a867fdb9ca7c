from __future__ import annotations

from typing import Any

import httpx

from user_dashboard.clients.users_api.config import ClientConfig, load_config
from user_dashboard.clients.users_api.errors import ResponseFailure, transport_failure


class HttpClient:
    """Issues single GET requests; retries are left to the caller."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or load_config()
        self._transport = transport

    def build_url(self, path: str) -> str:
        normalized_path = path if path.startswith("/") else f"/{path}"
        return f"{self.config.base_url}{normalized_path}"

    async def get_json(self, path: str) -> Any:
        url = self.build_url(path)
        try:
            async with httpx.AsyncClient(
                timeout=self.config.timeout_seconds,
                verify=self.config.verify_ssl,
                transport=self._transport,
            ) as client:
                response = await client.get(url, headers={"Accept": "application/json"})
        except httpx.DecodingError as exc:
            raise ResponseFailure.invalid_payload(details=f"response body could not be decoded: {exc}") from exc
        except httpx.RequestError as exc:
            raise transport_failure(exc) from exc

        if not response.is_success:
            raise ResponseFailure.from_http_response(response)

        try:
            return response.json()
        except ValueError as exc:
            raise ResponseFailure.invalid_payload(
                details="response body is not valid JSON",
                status_code=response.status_code,
            ) from exc
