"""
Custom exception hierarchy for clipdeps.

Fatal conditions raise these; the CLI turns them into a message and a non-zero exit.
"""

class ClipdepsError(Exception):
    """Base exception for all clipdeps errors."""
    def __init__(self, message: str, context: dict = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self):
        return self.message


class ConfigurationError(ClipdepsError):
    """Raised when clipdeps.yaml cannot be loaded or fails validation."""
    pass


class EntryFileError(ClipdepsError):
    """Raised when the entry file does not exist."""
    pass


class SinkError(ClipdepsError):
    """Raised when the aggregated document cannot be published."""
    pass
