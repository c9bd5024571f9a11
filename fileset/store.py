import os
from threading import RLock

import attr
from attr import attrib, attrs

from .common import clean, normalize, parse_lines, printf
from .errors import AlreadyExists, EmptyEntry, IOFailure, NotFound


@attrs(slots=True, eq=False)
class EntryStore:
    """Set of case-insensitive entries mirrored to a newline-separated text file.

    Additions are appended to the file as given (trimmed, case kept), removals
    rewrite the whole file from memory in lowercase. If a file operation fails
    after memory was changed, the change is kept and IOFailure is raised; call
    reload() to resync from disk.
    """

    _path = attrib()
    encoding = attrib(default="utf-8")
    verbose = attrib(default=False)
    _entries = attrib(default=attr.Factory(set), init=False, repr=False)
    _lock = attrib(default=attr.Factory(RLock), init=False, repr=False)

    @classmethod
    def open(cls, path, encoding="utf-8", verbose=False):
        store = cls(path, encoding=encoding, verbose=verbose)
        store.reload()
        return store

    @property
    def path(self):
        return self._path

    def reload(self):
        with self._lock:
            self._entries = self._load()
            if self.verbose:
                printf("Loaded {} entries from {}", len(self._entries), self.path)

    def add(self, item):
        with self._lock:
            item = clean(item)
            if not item:
                raise EmptyEntry("add")
            if self._contains(item):
                raise AlreadyExists(item)

            # memory first, then disk
            self._entries.add(item.lower())
            self._append(item)

    def remove(self, item):
        with self._lock:
            item = clean(item)
            if not item:
                raise EmptyEntry("remove")
            if not self._contains(item):
                raise NotFound(item)

            self._entries.discard(item.lower())
            self._rewrite()

    def contains(self, item):
        with self._lock:
            return self._contains(item)

    def items(self):
        with self._lock:
            snapshot = list(self._entries)
        return iter(snapshot)

    def __contains__(self, item):
        return self.contains(item)

    def __iter__(self):
        return self.items()

    def __len__(self):
        with self._lock:
            return len(self._entries)

    def _contains(self, item):
        item = normalize(item)
        if not item:
            return False
        return item in self._entries

    def _load(self):
        try:
            with open(self.path, encoding=self.encoding, newline="", errors="surrogateescape") as f:
                text = f.read()
        except FileNotFoundError:
            if self.verbose:
                printf("Creating empty entry file {}", self.path)
            self._write("")
            return set()
        except (OSError, UnicodeError) as e:
            raise IOFailure(self.path, e) from e
        return set(parse_lines(text))

    def _append(self, item):
        try:
            with open(self.path, "a", encoding=self.encoding, newline="", errors="surrogateescape") as f:
                if os.fstat(f.fileno()).st_size > 0:
                    f.write("\n")
                f.write(item)
        except (OSError, UnicodeError) as e:
            raise IOFailure(self.path, e) from e

    def _rewrite(self):
        self._write("\n".join(sorted(self._entries)))

    def _write(self, content):
        # plain overwrite, a crash mid-write can truncate the file
        try:
            with open(self.path, "w", encoding=self.encoding, newline="", errors="surrogateescape") as f:
                f.write(content)
        except (OSError, UnicodeError) as e:
            raise IOFailure(self.path, e) from e
