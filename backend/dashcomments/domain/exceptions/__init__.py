"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain and application logic and caught by
the presentation layer, which maps them to HTTP status codes.
"""

from dashcomments.domain.exceptions.entity_not_found import EntityNotFoundError
from dashcomments.domain.exceptions.forbidden import ForbiddenError
from dashcomments.domain.exceptions.validation_error import DomainValidationError

__all__ = [
    "EntityNotFoundError",
    "ForbiddenError",
    "DomainValidationError",
]
