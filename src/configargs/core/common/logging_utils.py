"""
Logging utilities for configargs.

Property values end up in debug output and resolution reports; values of
secret properties are masked before they are logged.
"""

import re

# Property name segments whose values must never reach the logs
SECRET_KEY_SEGMENTS = {
    "password",
    "secret",
    "token",
    "credential",
    "credentials",
}

_KEY_SEGMENT_SPLIT = re.compile(r"[.\-_]")


def redact(value: str, mask: str = "***") -> str:
    """Redact a sensitive value.

    Args:
        value: The value to redact
        mask: The mask to use

    Returns:
        The redacted value
    """
    if not value:
        return value

    # Keep first and last two characters
    if len(value) > 6:
        return f"{value[0:2]}{mask}{value[-2:]}"
    else:
        return mask


def is_secret_property(name: str) -> bool:
    """Tell whether a property name designates a secret value.

    ``kc.db-password`` and ``KC_HTTPS_KEY_STORE_PASSWORD`` are secrets,
    ``kc.db-url`` is not.
    """
    segments = _KEY_SEGMENT_SPLIT.split(name.lower())
    return any(segment in SECRET_KEY_SEGMENTS for segment in segments)


def redact_property_value(name: str, value: str | None, mask: str = "***") -> str | None:
    """Redact ``value`` when ``name`` designates a secret property."""
    if value is None or not is_secret_property(name):
        return value
    return redact(value, mask)
