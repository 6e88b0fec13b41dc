"""
Application Exceptions

Errors raised by the service layer. Routers do not catch these; the
handlers registered in main.py turn them into HTTP responses.
"""


class BibliothecaError(Exception):
    """Base class for all application errors."""


class DataAccessError(BibliothecaError):
    """
    The data store could not answer a query.

    Raised when the database is unreachable, times out, or rejects the
    statement. The original SQLAlchemy exception is available as
    __cause__.
    """

    def __init__(self, message: str = "The data store is unavailable") -> None:
        super().__init__(message)
        self.message = message
