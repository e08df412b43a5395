"""Exception classes for fsf.

The markup builder and route resolution never raise. These exceptions
cover the surrounding glue: configuration, build manifests and the
HTTP server.
"""

from __future__ import annotations


class FsfError(Exception):
    """Base exception for all fsf errors."""

    pass


class ConfigError(FsfError):
    """Invalid configuration value.

    Raised when an environment variable or config entry cannot be
    converted to the field's type.
    """

    def __init__(self, key: str, value: object, message: str) -> None:
        """Initialize config error.

        Args:
            key: Configuration key (e.g., "port")
            value: Offending raw value
            message: Description of the problem
        """
        self.key = key
        self.value = value
        super().__init__(f"Config '{key}'={value!r}: {message}")


class ManifestError(FsfError):
    """Build manifest could not be read.

    Raised for malformed JSON or route entries missing required keys.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        """Initialize manifest error.

        Args:
            message: Error description
            path: Manifest file path (optional)
        """
        self.message = message
        self.path = path
        location = f"{path}: " if path else ""
        super().__init__(f"{location}{message}")


class ServeError(FsfError):
    """The HTTP server failed to start or stopped abnormally."""

    pass
