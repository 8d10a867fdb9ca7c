from __future__ import annotations

import asyncio
from collections.abc import Callable

from user_dashboard.app.coordinator import UsersCoordinator
from user_dashboard.app.dictionaries import get_dictionary, resolve_lang, toggle_lang
from user_dashboard.app.error_presenter import build_error_payload, print_error_banner
from user_dashboard.app.state import FetchState, FetchStatus
from user_dashboard.app.ui.table_printer import print_table
from user_dashboard.app.ui.view_composer import DashboardView, ViewComposer
from user_dashboard.clients.users_api.models import User


def company_cell(user: User) -> str:
    return f"{user.company.name} ({user.company.catch_phrase})"


def address_cell(user: User) -> str:
    address = user.address
    return (
        f"{address.city}, {address.street}, {address.suite}, {address.zipcode} "
        f"(lat {address.geo.lat}, lng {address.geo.lng})"
    )


# (column key, dictionary key for the header)
TABLE_COLUMNS = (
    ("name", "name"),
    ("email", "email"),
    ("username", "username"),
    ("phone", "phone"),
    ("website", "website"),
    (company_cell, "company"),
    (address_cell, "address"),
)


class DashboardConsole:
    def __init__(
        self,
        coordinator: UsersCoordinator,
        composer: ViewComposer | None = None,
        *,
        lang: str = "en",
        input_fn: Callable[[str], str] | None = None,
        output: Callable[[str], None] | None = None,
    ) -> None:
        self.coordinator = coordinator
        self.composer = composer or ViewComposer()
        self.lang = resolve_lang(lang)
        self._input = input_fn or input
        self._output = output or print
        self._unsubscribe = coordinator.subscribe(self._on_state_change)

    @property
    def dictionary(self):
        return get_dictionary(self.lang)

    async def run(self) -> None:
        try:
            while True:
                view = self.composer.compose(self.coordinator.state)
                self.render(view)
                command = await self._prompt("cmd: ")
                if not await self.handle_command(command, view):
                    return
        finally:
            self._unsubscribe()

    async def handle_command(self, command: str, view: DashboardView) -> bool:
        command = command.strip().lower()
        if command == "q":
            return False
        if command == "r":
            await self.coordinator.retry()
        elif command == "l":
            self.lang = toggle_lang(self.lang)
        elif view.status is not FetchStatus.READY:
            # Only retry, language switch and quit are offered outside ready.
            return True
        elif command == "n":
            self.composer.go_next()
        elif command == "p":
            self.composer.go_prev()
        elif command == "s":
            self.composer.set_query(await self._prompt(f"{self.dictionary['search']} "))
        elif command == "c":
            self.composer.clear_search()
        return True

    def render(self, view: DashboardView) -> None:
        dictionary = self.dictionary
        self._output(f"\n== {dictionary['title']} ==")
        if view.status is FetchStatus.LOADING:
            self._output(dictionary["loading"])
            return
        if view.status is FetchStatus.ERROR:
            failure = self.coordinator.state.failure
            payload = build_error_payload(failure) if failure is not None else {"message": view.error}
            print_error_banner(payload, dictionary, output=self._output)
            self._output(f"r={dictionary['retry']}, l=lang ({self.lang}), q=quit")
            return

        self._output(f"{dictionary['showing']} {view.filtered_count} {dictionary['of']} {view.total_count}")
        if view.search_query.strip():
            self._output(f"q='{view.search_query}'")
        columns = [(key, dictionary[label]) for key, label in TABLE_COLUMNS]
        print_table(dictionary["title"], view.rows, columns, dictionary["no_results"], output=self._output)
        if view.filtered_count:
            self._output(f"{dictionary['page']} {view.page.page} {dictionary['of']} {view.page.page_count}")
        self._output(
            f"n={dictionary['next']}, p={dictionary['prev']}, s=search, c=clear, "
            f"r=refresh, l=lang ({self.lang}), q=quit"
        )

    async def _prompt(self, label: str) -> str:
        try:
            return await asyncio.to_thread(self._input, label)
        except EOFError:
            return "q"

    def _on_state_change(self, state: FetchState) -> None:
        if state.loading:
            self._output(self.dictionary["loading"])
