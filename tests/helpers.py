from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx

from user_dashboard.clients.users_api.config import ClientConfig
from user_dashboard.clients.users_api.http_client import HttpClient
from user_dashboard.clients.users_api.models import User

BASE_URL = "https://users.example.test"


def user_payload(
    user_id: int,
    name: str,
    *,
    username: str | None = None,
    email: str | None = None,
    phone: str = "1-770-736-8031",
) -> dict[str, Any]:
    slug = name.lower().replace(" ", ".")
    return {
        "id": user_id,
        "name": name,
        "username": username or slug.replace(".", ""),
        "email": email or f"{slug}@example.com",
        "phone": phone,
        "website": f"{slug}.example.org",
        "address": {
            "street": "Kulas Light",
            "suite": "Apt. 556",
            "city": "Gwenborough",
            "zipcode": "92998-3874",
            "geo": {"lat": "-37.3159", "lng": "81.1496"},
        },
        "company": {
            "name": "Romaguera-Crona",
            "catchPhrase": "Multi-layered client-server neural-net",
            "bs": "harness real-time e-markets",
        },
    }


def build_payloads(count: int, prefix: str = "User") -> list[dict[str, Any]]:
    return [user_payload(index, f"{prefix} {index}", phone=f"555-01{index:02d}") for index in range(1, count + 1)]


def build_users(count: int, prefix: str = "User") -> tuple[User, ...]:
    return tuple(User.model_validate(payload) for payload in build_payloads(count, prefix))


def make_http_client(handler: Callable[[httpx.Request], httpx.Response]) -> HttpClient:
    config = ClientConfig(base_url=BASE_URL, timeout_seconds=2.0)
    return HttpClient(config=config, transport=httpx.MockTransport(handler))
