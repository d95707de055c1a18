"""Common domain types and utilities."""

from .exceptions import SquadInputError
from .result import DomainError, ErrorType, Result

__all__ = [
    "Result",
    "DomainError",
    "ErrorType",
    "SquadInputError",
]
