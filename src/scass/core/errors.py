class ScassError(RuntimeError):
    """Base class for failures that abort a search run."""


class RootAccessError(ScassError):
    def __init__(self, root: str, cause: BaseException):
        super().__init__(f"cannot access search root {root!r}: {cause}")
        self.root = root
        self.cause = cause


class OutputSinkError(ScassError):
    def __init__(self, path: str, cause: BaseException):
        super().__init__(f"cannot write report {path!r}: {cause}")
        self.path = path
        self.cause = cause


class TermSourceError(ScassError):
    def __init__(self, path: str, cause: BaseException):
        super().__init__(f"cannot read search terms from {path!r}: {cause}")
        self.path = path
        self.cause = cause


class ChannelClosedError(Exception):
    """Raised by ResultChannel.put once the channel no longer accepts items."""
