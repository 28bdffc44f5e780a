"""Exceptions raised by rule predicates, the compiler and validated resolvers."""

from .common_exceptions import (
    ValidationRuleException,
    DirectiveConfigurationException,
)
from .validation_exceptions import (
    AggregateValidationError,
    ERROR_CODE,
    ERROR_MESSAGE,
)


__all__ = [
    "ValidationRuleException",
    "DirectiveConfigurationException",
    "AggregateValidationError",
    "ERROR_CODE",
    "ERROR_MESSAGE",
]
