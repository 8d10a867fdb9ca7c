from __future__ import annotations

from collections.abc import Sequence

from user_dashboard.clients.users_api.models import User

SEARCH_FIELDS = ("name", "email", "username", "phone")


def is_blank_query(query: str | None) -> bool:
    return not (query or "").strip()


def matches_query(user: User, normalized_query: str) -> bool:
    return any(normalized_query in str(getattr(user, field)).lower() for field in SEARCH_FIELDS)


def filter_users(users: Sequence[User], query: str | None) -> Sequence[User]:
    """Return the users whose searchable fields contain ``query``.

    A blank query returns ``users`` itself. Otherwise the match is a
    case-insensitive substring test and a new list is returned in the
    original order.
    """
    if is_blank_query(query):
        return users
    normalized_query = (query or "").lower()
    return [user for user in users if matches_query(user, normalized_query)]
