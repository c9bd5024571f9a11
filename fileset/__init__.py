from .errors import AlreadyExists, EmptyEntry, EntryStoreError, IOFailure, NotFound
from .store import EntryStore

__all__ = ["EntryStore", "EntryStoreError", "EmptyEntry", "AlreadyExists", "NotFound", "IOFailure"]
