"""
Infrastructure Exceptions

Errors raised by storage and external collaborators.
"""


class InfrastructureException(Exception):
    """Base infrastructure error."""
    pass


class DatabaseError(InfrastructureException):
    """Storage failure."""
    pass


class InternalError(DatabaseError):
    """Persistence failed at a durability checkpoint; surfaced to the caller."""
    pass


class ExternalServiceError(InfrastructureException):
    """A collaborator call (LLM, stock photos, product catalog) failed."""

    def __init__(self, service: str, message: str):
        super().__init__(f"[{service}] {message}")
        self.service = service
