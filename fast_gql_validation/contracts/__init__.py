"""Contracts implemented by rule families."""

from .rule_predicate import RulePredicate

__all__ = [
    "RulePredicate",
]
