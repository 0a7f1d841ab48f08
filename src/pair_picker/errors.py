"""
Exception types for programming and configuration errors.

Ordinary pick outcomes (too few elements, user cancellation, inconsistent
host answers) are reported through PairResult, never raised.
"""


class PairPickerError(Exception):
    """Base class for all pair-picker errors."""


class HostConfigurationError(PairPickerError):
    """Raised when a picker is wired to an unusable host session."""


class ModelFileError(PairPickerError):
    """Raised when a document model file cannot be read or validated."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid document model '{path}': {reason}")
