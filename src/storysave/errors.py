class SaveError(Exception):
    """Base exception for save/load errors."""


class SaveValidationError(SaveError):
    """Raised when stored save data cannot be decoded into a SaveHistory."""


class StorageError(SaveError):
    """Raised when the key-value store cannot be read from or written to."""
