"""Fetch-state coordinator for the user list.

The coordinator owns a single :class:`FetchState` and replaces it on every
transition. Overlapping fetches follow a latest-issued-wins policy: each call
takes a ticket and a response is only applied while its ticket is still the
most recent one, so a slow earlier response can never overwrite the result of
a later call.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from typing import Protocol

from user_dashboard.app.infrastructure.logging.logger import get_logger, log_action
from user_dashboard.app.state import FetchState
from user_dashboard.clients.users_api.errors import ApiError
from user_dashboard.clients.users_api.models import User

Subscriber = Callable[[FetchState], None]

MODULE = "users"
ACTION = "fetch_users"


class UsersSource(Protocol):
    async def list_users(self) -> tuple[User, ...]: ...


class UsersCoordinator:
    def __init__(self, users_client: UsersSource, *, logger: logging.Logger | None = None) -> None:
        self._users_client = users_client
        self._logger = logger or get_logger("user_dashboard.coordinator")
        self._state = FetchState()
        self._subscribers: list[Subscriber] = []
        self._latest_ticket = 0

    @classmethod
    async def create(cls, users_client: UsersSource, *, logger: logging.Logger | None = None) -> "UsersCoordinator":
        """Build a coordinator and run its one automatic fetch.

        A failed initial fetch is not retried; the coordinator stays in the
        error state until :meth:`retry` is called.
        """
        coordinator = cls(users_client, logger=logger)
        await coordinator.fetch()
        return coordinator

    @property
    def state(self) -> FetchState:
        return self._state

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    async def fetch(self) -> FetchState:
        self._latest_ticket += 1
        ticket = self._latest_ticket
        self._publish(self._state.start_loading())
        log_action(self._logger, MODULE, ACTION, "started", request_id=ticket, level=logging.DEBUG)

        started = time.monotonic()
        try:
            users = await self._users_client.list_users()
        except ApiError as error:
            if self._is_stale(ticket):
                self._log_stale(ticket, started)
                return self._state
            log_action(
                self._logger,
                MODULE,
                ACTION,
                "error",
                request_id=ticket,
                status_code=error.status_code,
                error_code=error.code,
                duration_ms=_elapsed_ms(started),
                level=logging.WARNING,
            )
            self._publish(self._state.fail(error))
            return self._state

        if self._is_stale(ticket):
            self._log_stale(ticket, started)
            return self._state
        log_action(self._logger, MODULE, ACTION, "success", request_id=ticket, duration_ms=_elapsed_ms(started))
        self._publish(self._state.succeed(users))
        return self._state

    async def retry(self) -> FetchState:
        return await self.fetch()

    def schedule_retry(self) -> "asyncio.Task[FetchState]":
        return asyncio.get_running_loop().create_task(self.retry())

    def _is_stale(self, ticket: int) -> bool:
        return ticket != self._latest_ticket

    def _log_stale(self, ticket: int, started: float) -> None:
        log_action(
            self._logger,
            MODULE,
            ACTION,
            "stale",
            request_id=ticket,
            duration_ms=_elapsed_ms(started),
            level=logging.DEBUG,
        )

    def _publish(self, state: FetchState) -> None:
        if state == self._state:
            return
        self._state = state
        for callback in list(self._subscribers):
            callback(state)


def _elapsed_ms(started: float) -> int:
    return int((time.monotonic() - started) * 1000)
