class StorageError(Exception):
    """Base exception for persisted session state and log files."""


class StateLoadError(StorageError):
    """Raised when the saved session state cannot be read or decoded."""


class StateSaveError(StorageError):
    """Raised when the session state cannot be written."""


class JournalWriteError(StorageError):
    """Raised when an append-only log file cannot be written."""
