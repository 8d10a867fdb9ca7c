from __future__ import annotations

from pydantic import ValidationError

from user_dashboard.clients.users_api.errors import ResponseFailure
from user_dashboard.clients.users_api.http_client import HttpClient
from user_dashboard.clients.users_api.models import User, UserList

USERS_PATH = "/users"


class UsersClient:
    def __init__(self, http_client: HttpClient) -> None:
        self.http_client = http_client

    async def list_users(self) -> tuple[User, ...]:
        payload = await self.http_client.get_json(USERS_PATH)
        if not isinstance(payload, list):
            raise ResponseFailure.invalid_payload(details=f"expected a JSON array, got {type(payload).__name__}")
        try:
            return tuple(UserList.validate_python(payload))
        except ValidationError as exc:
            raise ResponseFailure.invalid_payload(details=exc.errors(include_url=False)) from exc
