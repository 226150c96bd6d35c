"""Custom exceptions for CpGDiscord."""


class CpGDiscordError(Exception):
    """Base exception for all CpGDiscord errors."""

    pass


class ConfigurationError(CpGDiscordError):
    """Raised when configuration is invalid or missing."""

    pass


class InputFileError(CpGDiscordError):
    """Raised when an input file is missing or cannot be opened."""

    def __init__(self, message="", path=None):
        """Initialize InputFileError.

        Args:
            message: Error message (should name the offending path)
            path: Path of the input that failed
        """
        super().__init__(message)
        self.path = path


class FileFormatError(CpGDiscordError):
    """Raised when an input file or record is malformed."""

    pass


class OutputWriteError(CpGDiscordError):
    """Raised when the output destination cannot be written."""

    def __init__(self, message="", path=None):
        super().__init__(message)
        self.path = path


class ValidationError(CpGDiscordError):
    """Raised when data validation fails."""

    pass


class WindowBoundsError(CpGDiscordError, ValueError):
    """Raised when a read does not fit the encoding window of an anchor site."""

    pass
