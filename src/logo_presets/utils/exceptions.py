"""
Custom exceptions for logo_presets.

This module defines all custom exceptions used throughout the library.
A preset that is not found is not an error: lookups return None.
"""


class LogoPresetsError(Exception):
    """Base exception for all logo_presets errors."""

    pass


class PresetFormatError(LogoPresetsError):
    """Raised when a preset file's top-level envelope fails validation."""

    def __init__(self, message: str, field: str = "", path: str = "") -> None:
        """
        Initialize format error.

        Args:
            message: Error message
            field: Envelope field that failed validation ("version" or "presets")
            path: Path of the preset file (if known)
        """
        self.field = field
        self.path = path
        super().__init__(message)


class PresetReadError(LogoPresetsError, OSError):
    """Raised when a preset file cannot be read or is not valid JSON.

    Subclasses OSError so callers catching IOError/OSError keep working.
    """

    def __init__(
        self, message: str, path: str = "", original_error: Exception | None = None
    ) -> None:
        """
        Initialize read error.

        Args:
            message: Error message
            path: Path of the preset file
            original_error: The underlying exception that caused this error
        """
        self.path = path
        self.original_error = original_error
        super().__init__(message)


class ConfigurationError(LogoPresetsError):
    """Raised when there is a configuration problem."""

    pass
