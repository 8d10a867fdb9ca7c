from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from user_dashboard.clients.users_api.errors import ApiError
from user_dashboard.clients.users_api.models import User


class FetchStatus(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    READY = "ready"


@dataclass(frozen=True)
class FetchState:
    status: FetchStatus = FetchStatus.LOADING
    users: tuple[User, ...] = ()
    error: str | None = None
    failure: ApiError | None = None

    @property
    def loading(self) -> bool:
        return self.status is FetchStatus.LOADING

    @property
    def ready(self) -> bool:
        return self.status is FetchStatus.READY

    @property
    def visible_users(self) -> tuple[User, ...]:
        # The last list survives loading/error but is only shown once ready.
        return self.users if self.ready else ()

    def start_loading(self) -> "FetchState":
        return replace(self, status=FetchStatus.LOADING, error=None, failure=None)

    def succeed(self, users: tuple[User, ...]) -> "FetchState":
        return FetchState(status=FetchStatus.READY, users=tuple(users))

    def fail(self, failure: ApiError) -> "FetchState":
        return replace(self, status=FetchStatus.ERROR, error=failure.message, failure=failure)


@dataclass
class ViewState:
    search_query: str = ""
    current_page: int = 1

    def reset(self) -> None:
        self.search_query = ""
        self.current_page = 1
