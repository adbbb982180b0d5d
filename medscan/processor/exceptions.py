ERROR_CODE = -2


class ScanToolError(Exception):
    """Base exception for every fatal error of a scan run."""

    code: int = ERROR_CODE


class UsageError(ScanToolError):
    """Raised when the command line names no input files."""


class UnsupportedFormatError(ScanToolError):
    """Raised when a format tag is outside the supported set."""


class ConfigurationError(ScanToolError):
    """Raised when settings or command-line options are invalid."""
