"""throwif: fluent precondition checks that return the value or raise.

Public API:
    - throw_if_null_or_empty / throw_if_null_or_whitespace: text checks
    - throw_if_null_or_default: absent or zero-state values
    - throw_if_undefined: enumeration membership
    - throw_if_out_of_range: inclusive range checks
    - throw_if / throw_if_not: caller-supplied predicates
    - guard(): method-chaining over the same checks
"""

from __future__ import annotations

import logging

from throwif.constants import UNSPECIFIED_ARGUMENT
from throwif.defaults import NO_ZERO_VALUE, register_zero_value, zero_value_for
from throwif.errors import ArgumentOutOfRangeError, InvalidArgumentError, ThrowIfError
from throwif.fluent import Guard, guard
from throwif.guards import (
    throw_if,
    throw_if_not,
    throw_if_null_or_default,
    throw_if_null_or_empty,
    throw_if_null_or_whitespace,
    throw_if_out_of_range,
    throw_if_undefined,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("throwif")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("throwif").addHandler(logging.NullHandler())

__all__ = [
    "NO_ZERO_VALUE",
    "UNSPECIFIED_ARGUMENT",
    "ArgumentOutOfRangeError",
    "Guard",
    "InvalidArgumentError",
    "ThrowIfError",
    "guard",
    "register_zero_value",
    "throw_if",
    "throw_if_not",
    "throw_if_null_or_default",
    "throw_if_null_or_empty",
    "throw_if_null_or_whitespace",
    "throw_if_out_of_range",
    "throw_if_undefined",
    "zero_value_for",
]
