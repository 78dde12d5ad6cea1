"""
Application Exceptions
"""


class ApplicationException(Exception):
    """Base application error."""
    pass


class UnauthorizedError(ApplicationException):
    """Caller is not an authenticated administrator."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)
