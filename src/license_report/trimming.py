from __future__ import annotations

from typing import Any, Mapping


def is_empty(value: Any) -> bool:
    """Return True for values that must never reach the report.

    None, blank strings, empty collections, ``False`` and numeric zero all
    count as empty.
    """

    if isinstance(value, str):
        return not value.strip()
    return not value


def trim_and_remove_null_entries(mapping: Mapping[str, Any]) -> dict[str, Any]:
    trimmed: dict[str, Any] = {}
    for key, value in mapping.items():
        if is_empty(value):
            continue
        trimmed[key] = value.strip() if isinstance(value, str) else value
    return trimmed
