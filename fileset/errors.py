class EntryStoreError(Exception):

    def __init__(self, message, item=None):
        super().__init__(message)
        self.item = item


class EmptyEntry(EntryStoreError):

    def __init__(self, action):
        super().__init__("cannot {} empty entry".format(action))


class AlreadyExists(EntryStoreError):

    def __init__(self, item):
        super().__init__("entry {!r} already exists".format(item), item)


class NotFound(EntryStoreError):

    def __init__(self, item):
        super().__init__("entry {!r} not found".format(item), item)


class IOFailure(EntryStoreError):

    def __init__(self, path, cause):
        super().__init__("I/O failure on {}: {}".format(path, cause))
        self.path = path
        self.cause = cause
