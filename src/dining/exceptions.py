"""Domain errors that have no Protean counterpart.

Missing records surface as ``protean.exceptions.ObjectNotFoundError`` and
malformed input as ``protean.exceptions.ValidationError``.
"""


class DiningError(Exception):
    def __init__(self, messages):
        self.messages = messages
        super().__init__(messages)


class ForbiddenError(DiningError):
    """The requester is authenticated but not permitted to do this."""


class ShareCodeConflictError(DiningError):
    """No free share code could be generated within the attempt budget."""
