from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Union

EMPTY_VALUE = "—"

ColumnKey = Union[str, Callable[[Any], Any]]


def normalize_value(value: Any) -> str:
    if value is None:
        return EMPTY_VALUE
    if isinstance(value, str):
        clean = value.strip()
        return clean or EMPTY_VALUE
    return str(value)


def resolve_field(row: Any, key: ColumnKey) -> Any:
    if callable(key):
        return key(row)
    value = row
    for part in key.split("."):
        value = getattr(value, part, None)
        if value is None:
            return None
    return value


def print_table(
    title: str,
    rows: Sequence[Any],
    columns: Sequence[tuple[ColumnKey, str]],
    empty_message: str,
    output: Callable[[str], None] = print,
) -> None:
    output(f"\n{title}")
    if not rows:
        output(f"({empty_message})")
        return

    widths = []
    for key, header in columns:
        max_cell = max(len(normalize_value(resolve_field(row, key))) for row in rows)
        widths.append(max(len(header), max_cell))

    header_line = " | ".join(header.ljust(widths[idx]) for idx, (_, header) in enumerate(columns))
    separator = "-+-".join("-" * width for width in widths)
    output(header_line)
    output(separator)

    for row in rows:
        output(" | ".join(normalize_value(resolve_field(row, key)).ljust(widths[idx]) for idx, (key, _) in enumerate(columns)))
