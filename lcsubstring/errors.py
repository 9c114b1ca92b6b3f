class LCSError(Exception):
    """Base class of the errors raised by lcsubstring"""


class InputUnavailable(LCSError, OSError):
    """A document could not be read"""

    def __init__(self, path, reason=None):
        self.path = path
        self.reason = reason
        if reason is None or isinstance(reason, FileNotFoundError):
            message = f"The file {path} was not found."
        else:
            message = f"The file {path} could not be read: {reason}"
        super().__init__(message)

    def __str__(self):
        return self.args[0]


class DelimiterCollision(LCSError, ValueError):
    """The sentinel character appears inside one of the documents"""

    def __init__(self, tag, sentinel):
        self.tag = tag
        self.sentinel = sentinel
        super().__init__(
            f"document {tag} contains the sentinel {sentinel!r} (U+{ord(sentinel):04X}),"
            " choose another one with --sentinel"
        )


class EmptyDocumentWarning(UserWarning):
    pass
