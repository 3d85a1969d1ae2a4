from __future__ import annotations

from typing import Any

from .models import UserPreferences


def parse_preferences(data: dict[str, Any] | None) -> UserPreferences:
    """Validate untyped preference arguments (camelCase or snake_case keys)."""
    return UserPreferences.model_validate(data or {})


def merge_preferences(
    current: UserPreferences | None,
    update: dict[str, Any],
) -> UserPreferences:
    """
    Overlay the keys present in *update* onto *current*.

    Only keys that appear in the update replace existing values, the same
    way successive filter updates accumulate across a conversation. The
    nested vibe object is merged key by key.
    """
    base = current.model_dump(exclude_unset=True) if current else {}
    incoming = parse_preferences(update).model_dump(exclude_unset=True)

    merged = dict(base)
    for key, value in incoming.items():
        if key == "vibe" and isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = {**merged[key], **value}
        else:
            merged[key] = value

    return UserPreferences.model_validate(merged)
