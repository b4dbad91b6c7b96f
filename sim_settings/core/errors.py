"""Typed error taxonomy for the settings registry.

Every fatal condition raised while loading a settings document is a
`ConfigError`; callers that only want to know "did the load fail" can catch
`SettingsError`.
"""

from __future__ import annotations

__all__ = [
    "ConfigError",
    "SettingsError",
    "SettingsFrozenError",
    "format_error",
]


class SettingsError(Exception):
    """Base class for all operator-facing settings errors."""
    pass


class ConfigError(SettingsError):
    """Invalid document: unknown token, malformed value, unparseable file, etc."""
    pass


class SettingsFrozenError(SettingsError):
    """Mutation or re-load of a registry that has already been loaded."""
    pass


def format_error(e: BaseException) -> str:
    """One-line report of a failed load, e.g. ``ConfigError: Unknown temperature method: hot``.

    The exception type is kept so the command line can tell a bad document
    apart from a missing file.
    """
    detail = str(e).strip()
    kind = type(e).__name__
    if not detail:
        return kind
    return f"{kind}: {detail}"
