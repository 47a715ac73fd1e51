"""Merge policy for config-file and command-line options.

Lists are unioned (earlier sources first, duplicates dropped), scalars take
the first non-None value in priority order.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T")


def union(*sources: Iterable[T] | None) -> list[T]:
    """Concatenate sequences, keeping the first occurrence of each item.

    Args:
        *sources: Iterables in priority order. None entries are ignored.

    Returns:
        A new list with duplicates removed.
    """
    seen: set[T] = set()
    result: list[T] = []
    for source in sources:
        if not source:
            continue
        for item in source:
            if item not in seen:
                seen.add(item)
                result.append(item)
    return result


def first_set(*values: T | None, default: T) -> T:
    """Return the first value that is not None, else the default."""
    for value in values:
        if value is not None:
            return value
    return default


def merge_options(file_options: dict[str, Any], cli_options: dict[str, Any]) -> dict[str, Any]:
    """Merge config-file options with command-line options.

    Rules:
    - ``skip`` lists are unioned, command-line entries first
    - Any other key uses the command-line value unless it is None
    - None values never override

    Args:
        file_options: Options read from the config file.
        cli_options: Options given on the command line.

    Returns:
        A new dictionary with merged values.
    """
    result = {k: v for k, v in file_options.items() if v is not None}

    for key, cli_value in cli_options.items():
        if key == "skip":
            result["skip"] = union(cli_value, file_options.get("skip"))
        elif cli_value is not None:
            result[key] = cli_value

    return result
