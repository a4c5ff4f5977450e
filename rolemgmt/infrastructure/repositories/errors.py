"""Errors raised by the persistence layer."""


class DataAccessError(RuntimeError):
    """Error raised when a statement against the database fails.

    ``operation`` names the repository call that failed; the driver error is
    available through ``__cause__``.
    """

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(message)
        self.operation = operation


__all__ = ["DataAccessError"]
