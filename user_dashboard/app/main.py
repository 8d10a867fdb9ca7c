from __future__ import annotations

import asyncio

from user_dashboard.app.coordinator import UsersCoordinator
from user_dashboard.app.dashboard_console import DashboardConsole
from user_dashboard.app.infrastructure.logging.logger import get_logger
from user_dashboard.app.ui.view_composer import ViewComposer
from user_dashboard.clients.users_api.config import ClientConfig, load_config
from user_dashboard.clients.users_api.http_client import HttpClient
from user_dashboard.clients.users_api.users_client import UsersClient


def _print_runtime_config(config: ClientConfig) -> None:
    print("USER DASHBOARD")
    print(f"Base URL: {config.base_url}")
    print(f"Timeout: {config.timeout_seconds}s")
    print(f"Verify SSL: {config.verify_ssl}")
    print(f"Lang: {config.lang}")


async def run_dashboard(config: ClientConfig, http_client: HttpClient | None = None) -> None:
    logger = get_logger("user_dashboard", config.log_level)
    users_client = UsersClient(http_client or HttpClient(config=config))
    coordinator = await UsersCoordinator.create(users_client, logger=logger.getChild("coordinator"))
    console = DashboardConsole(coordinator, ViewComposer(), lang=config.lang)
    await console.run()


def main() -> None:
    config = load_config()
    _print_runtime_config(config)
    try:
        asyncio.run(run_dashboard(config))
    except KeyboardInterrupt:
        print("\nbye")


if __name__ == "__main__":
    main()
