from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from user_dashboard.app.state import FetchState, FetchStatus, ViewState
from user_dashboard.app.ui.filters import filter_users
from user_dashboard.app.ui.pagination import USERS_PER_PAGE, PageSlice, clamp_page, compute_page, next_page, page_count, prev_page
from user_dashboard.clients.users_api.models import User


@dataclass(frozen=True)
class DashboardView:
    status: FetchStatus
    error: str | None
    search_query: str
    page: PageSlice[User]
    filtered_count: int
    total_count: int

    @property
    def rows(self) -> tuple[User, ...]:
        return self.page.items if self.status is FetchStatus.READY else ()


class ViewComposer:
    """Derives the filtered and paginated view from the fetched list.

    ``current_page`` is clamped to ``[1, max(1, page_count)]`` every time the
    filtered list can change (new users or a new query), so narrowing a search
    never leaves the viewer on a page past the end.
    """

    def __init__(self, view_state: ViewState | None = None, page_size: int = USERS_PER_PAGE) -> None:
        if page_size <= 0:
            raise ValueError("page_size must be > 0")
        self.view_state = view_state or ViewState()
        self.page_size = page_size
        self._users: Sequence[User] = ()
        self._memo: tuple[Sequence[User], str, Sequence[User]] | None = None

    @property
    def current_page(self) -> int:
        return self.view_state.current_page

    @property
    def search_query(self) -> str:
        return self.view_state.search_query

    def set_users(self, users: Sequence[User]) -> None:
        self._users = users
        self._clamp()

    def set_query(self, query: str) -> None:
        self.view_state.search_query = query
        self._clamp()

    def clear_search(self) -> None:
        self.view_state.reset()
        self._clamp()

    def filtered_users(self) -> Sequence[User]:
        query = self.view_state.search_query
        if self._memo is not None and self._memo[0] is self._users and self._memo[1] == query:
            return self._memo[2]
        filtered = filter_users(self._users, query)
        self._memo = (self._users, query, filtered)
        return filtered

    def page_count(self) -> int:
        return page_count(len(self.filtered_users()), self.page_size)

    def page(self) -> PageSlice[User]:
        return compute_page(self.filtered_users(), self.page_size, self.view_state.current_page)

    def go_next(self) -> int:
        self.view_state.current_page = next_page(self.view_state.current_page, self.page_count())
        return self.view_state.current_page

    def go_prev(self) -> int:
        self.view_state.current_page = prev_page(self.view_state.current_page, self.page_count())
        return self.view_state.current_page

    def compose(self, fetch_state: FetchState) -> DashboardView:
        if fetch_state.users is not self._users:
            self.set_users(fetch_state.users)
        filtered = self.filtered_users()
        return DashboardView(
            status=fetch_state.status,
            error=fetch_state.error,
            search_query=self.view_state.search_query,
            page=self.page(),
            filtered_count=len(filtered),
            total_count=len(fetch_state.users),
        )

    def _clamp(self) -> None:
        self.view_state.current_page = clamp_page(self.view_state.current_page, self.page_count())
