"""Built-in rule families.

Each factory returns a `RuleFamily` that can be registered under its default
directive name or a custom one.
"""

from .valid_list import valid_list
from .valid_number import valid_float, valid_int
from .valid_object import valid_object
from .valid_string import valid_string


def default_families() -> list:
    return [valid_string(), valid_float(), valid_int(), valid_list(), valid_object()]


__all__ = [
    "valid_string",
    "valid_float",
    "valid_int",
    "valid_list",
    "valid_object",
    "default_families",
]
