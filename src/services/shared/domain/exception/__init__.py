from .exceptions import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    InsufficientSeatsException,
    ResourceNotFoundException,
)

__all__ = [
    "DomainException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
    "InsufficientSeatsException",
    "DuplicateResourceException",
]
