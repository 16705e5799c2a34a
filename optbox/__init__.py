from .optional import Optional
from .err import (
    OptboxError,
    InvalidValueError,
    NoValueError,
    ArgTypeError,
    ReturnTypeError,
)
from .seq import present_values, present_list, first_present

empty = Optional.empty
of = Optional.of
of_nullable = Optional.of_nullable

__all__ = [
    "Optional",
    "empty",
    "of",
    "of_nullable",
    "present_values",
    "present_list",
    "first_present",
    "OptboxError",
    "InvalidValueError",
    "NoValueError",
    "ArgTypeError",
    "ReturnTypeError",
]
