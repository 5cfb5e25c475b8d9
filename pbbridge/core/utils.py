"""Shared helpers."""

from typing import Any


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Overlay ``override`` onto a copy of ``base``.

    Nested objects merge key by key. Anything else in ``override``, lists
    included, replaces the base value outright, so a local
    ``adapter.command`` never extends the global one.
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            value = deep_merge(current, value)
        merged[key] = value
    return merged
