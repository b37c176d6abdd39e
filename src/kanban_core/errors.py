"""Error kinds reported by the board store and its handlers."""


class BoardError(Exception):
    """Base class for rejected board operations.

    The class name is the error kind sent back across the request boundary.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def kind(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict:
        return {"kind": self.kind, "message": self.message}


class NotFound(BoardError):
    """A referenced column or card does not exist."""


class InvalidArgument(BoardError):
    """A required field is missing, malformed or empty."""


class Conflict(BoardError):
    """An id collision, or a card that is not where the caller claims."""
