from user_dashboard.app.ui.table_printer import EMPTY_VALUE, normalize_value, print_table, resolve_field

from tests.helpers import build_users


def test_normalize_value_handles_blank_and_none() -> None:
    assert normalize_value(None) == EMPTY_VALUE
    assert normalize_value("  ") == EMPTY_VALUE
    assert normalize_value(" Bret ") == "Bret"
    assert normalize_value(7) == "7"


def test_resolve_field_follows_dotted_paths() -> None:
    user = build_users(1)[0]

    assert resolve_field(user, "company.name") == "Romaguera-Crona"
    assert resolve_field(user, "address.geo.lng") == "81.1496"
    assert resolve_field(user, "company.missing") is None


def test_print_table_renders_header_and_rows() -> None:
    lines: list[str] = []

    print_table("Users", build_users(2), [("name", "Name"), ("company.name", "Company")], "none", output=lines.append)

    assert lines[0] == "\nUsers"
    assert lines[1].startswith("Name")
    assert "Company" in lines[1]
    assert set(lines[2]) <= {"-", "+"}
    assert lines[3].startswith("User 1")
    assert "Romaguera-Crona" in lines[4]


def test_print_table_empty_message() -> None:
    lines: list[str] = []

    print_table("Users", [], [("name", "Name")], "No users found", output=lines.append)

    assert lines == ["\nUsers", "(No users found)"]


def test_resolve_field_accepts_a_callable_key() -> None:
    user = build_users(1)[0]

    assert resolve_field(user, lambda row: row.address.city.upper()) == "GWENBOROUGH"
