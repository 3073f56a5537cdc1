"""Persistence for session state and the append-only journals."""

from .errors import JournalWriteError, StateLoadError, StateSaveError, StorageError
from .journal import TodoArchive, WorkJournal
from .state_store import SessionSnapshot, StateStore

__all__ = [
    "JournalWriteError",
    "SessionSnapshot",
    "StateLoadError",
    "StateSaveError",
    "StateStore",
    "StorageError",
    "TodoArchive",
    "WorkJournal",
]
