"""Exceptions for the KPT board backend.

Partial ticket failures are not exceptions: they travel as data on the
summaries returned by the board service.
"""


class BoardServiceError(Exception):
    """Base class for errors surfaced to API callers."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def with_prefix(self, prefix: str) -> "BoardServiceError":
        """Return an error of the same kind with a prefixed message."""
        return type(self)(f"{prefix}: {self.message}")


class InvalidInputError(BoardServiceError):
    """Raised when a request carries an unparseable identifier."""
    pass


class NotFoundError(BoardServiceError):
    """Raised when a board or ticket is absent or invisible to the caller."""
    pass


class UnauthorizedError(BoardServiceError):
    """Raised when the caller does not own the board being mutated."""
    pass


class StorageFailureError(BoardServiceError):
    """Raised when an underlying persistence call fails."""
    pass


class AccountExistsError(BoardServiceError):
    """Raised when signing up with a display name that is already taken."""
    pass
