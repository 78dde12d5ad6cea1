"""
Shared exceptions.

Domain errors describe invalid input or missing entities, infrastructure
errors describe failing collaborators and storage, application errors cover
authorization.
"""

from kitchen_cursor.shared.exceptions.domain_exceptions import (
    DomainException,
    DomainValidationError,
    InvalidStatusTransition,
    EntityNotFoundError,
    DuplicateEntityError,
)
from kitchen_cursor.shared.exceptions.infrastructure_exceptions import (
    InfrastructureException,
    DatabaseError,
    InternalError,
    ExternalServiceError,
)
from kitchen_cursor.shared.exceptions.application_exceptions import (
    ApplicationException,
    UnauthorizedError,
)

__all__ = [
    'DomainException',
    'DomainValidationError',
    'InvalidStatusTransition',
    'EntityNotFoundError',
    'DuplicateEntityError',
    'InfrastructureException',
    'DatabaseError',
    'InternalError',
    'ExternalServiceError',
    'ApplicationException',
    'UnauthorizedError',
]
