"""Module-level settings for hookshot."""

from __future__ import annotations

import os


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


# Lower runs earlier; handlers added without a priority land here.
PRIORITY_NEUTRAL = _int_from_env("HOOKSHOT_DEFAULT_PRIORITY", 50)

# Handlers on this tag are called before the handlers of every fired tag.
WILDCARD_TAG = "all"

ATTRS_FILTER_PREFIX = "shortcodeAttrs_"
