"""Application-level exceptions raised by repository adapters."""


class PersistenceError(RuntimeError):
    """Raised when the data store rejects or fails an operation."""


class EntryNotFoundError(PersistenceError):
    """Raised when an entry does not exist or belongs to another user."""


__all__ = ["PersistenceError", "EntryNotFoundError"]
