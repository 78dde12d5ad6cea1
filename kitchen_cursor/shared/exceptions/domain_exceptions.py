"""
Domain Exceptions

Errors raised by the domain layer.
"""


class DomainException(Exception):
    """Base domain error."""
    pass


class DomainValidationError(DomainException):
    """Invalid input shape or range (empty topic, bad rating, unknown status)."""
    pass


class InvalidStatusTransition(DomainValidationError):
    """Status change not allowed by the transition table."""

    def __init__(self, entity: str, current: str, requested: str):
        super().__init__(f"{entity} cannot move from {current} to {requested}")
        self.entity = entity
        self.current = current
        self.requested = requested


class EntityNotFoundError(DomainException):
    """Referenced entity does not exist."""

    def __init__(self, entity: str, key: object):
        super().__init__(f"{entity} not found: {key}")
        self.entity = entity
        self.key = key


class DuplicateEntityError(DomainException):
    """Unique key already taken."""
    pass
