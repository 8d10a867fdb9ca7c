from user_dashboard.app.ui.filters import filter_users
from user_dashboard.clients.users_api.models import User

from tests.helpers import build_users, user_payload


def _users() -> tuple[User, ...]:
    return (
        User.model_validate(user_payload(1, "John Smith", username="jsmith", email="john@acme.io", phone="555-1000")),
        User.model_validate(user_payload(2, "Jane Doe", username="jdoe", email="jane@acme.io", phone="555-2000 x12")),
        User.model_validate(user_payload(3, "Ervin Howell", username="Antonette", email="Shanna@melissa.tv", phone="010-692-6593")),
    )


def test_query_john_keeps_only_john_smith() -> None:
    result = filter_users(_users(), "john")

    assert [user.name for user in result] == ["John Smith"]


def test_blank_query_returns_input_unchanged() -> None:
    users = _users()

    assert filter_users(users, "") is users
    assert filter_users(users, "   \t") is users
    assert filter_users(users, None) is users


def test_match_is_case_insensitive_on_every_search_field() -> None:
    users = _users()

    assert [user.id for user in filter_users(users, "ANTONETTE")] == [3]
    assert [user.id for user in filter_users(users, "shanna@")] == [3]
    assert [user.id for user in filter_users(users, "x12")] == [2]
    assert [user.id for user in filter_users(users, "acme.io")] == [1, 2]


def test_website_and_company_are_not_searched() -> None:
    users = _users()

    assert filter_users(users, "romaguera") == []
    assert filter_users(users, "example.org") == []


def test_filter_preserves_order_and_does_not_mutate_input() -> None:
    users = list(build_users(8))
    snapshot = list(users)

    result = filter_users(users, "user 1")

    assert users == snapshot
    assert result is not users
    assert [user.id for user in result] == [1]


def test_filter_is_idempotent() -> None:
    users = build_users(12)

    once = filter_users(users, "555-010")
    twice = filter_users(once, "555-010")

    assert list(twice) == list(once)
    assert [user.id for user in once] == list(range(1, 10))


def test_every_result_matches_the_query() -> None:
    users = _users() + build_users(6)

    for query in ["j", "doe", "555", "@", "user 4", "nobody"]:
        result = filter_users(users, query)
        for user in result:
            haystacks = [user.name, user.email, user.username, user.phone]
            assert any(query.lower() in value.lower() for value in haystacks)
        excluded = [user for user in users if user not in result]
        for user in excluded:
            haystacks = [user.name, user.email, user.username, user.phone]
            assert not any(query.lower() in value.lower() for value in haystacks)
