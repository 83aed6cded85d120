"""
Common exception classes for configargs.

This module defines the exceptions raised while building configuration
sources from command-line arguments.
"""

from __future__ import annotations


class ConfigArgsError(Exception):
    """Base exception class for all configargs errors."""

    def __init__(
        self,
        message: str,
        details: dict | None = None,
        **kwargs,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        for key, value in (kwargs or {}).items():
            setattr(self, key, value)

    def to_dict(self) -> dict:
        error_dict = {
            "message": self.message,
            "type": self.__class__.__name__,
            "details": self.details,
        }

        for attr_name in dir(self):
            if (
                not attr_name.startswith("_")
                and attr_name not in ["message", "details", "args"]
                and not callable(getattr(self, attr_name))
            ):
                error_dict[attr_name] = getattr(self, attr_name)

        return {"error": error_dict}


class ConfigurationError(ConfigArgsError):
    """Raised when there's a configuration issue."""

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, **kwargs)


class MalformedArgumentError(ConfigurationError):
    """Raised when a command-line argument cannot be mapped to a property."""

    def __init__(
        self,
        message: str = "Invalid argument",
        token: str | None = None,
        position: int | None = None,
        details: dict | None = None,
        **kwargs,
    ):
        details = dict(details or {})
        if token is not None:
            details.setdefault("token", token)
        if position is not None:
            details.setdefault("position", position)
        super().__init__(message, details, **kwargs)
        self.token = token
        self.position = position
