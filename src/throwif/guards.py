"""Guard functions: check a value, return it unchanged or raise.

Every function has two call shapes:

- ``check(value, ..., argument_name="x")`` raises the library's default
  failure naming the argument (``"unspecified"`` when no name is given).
- ``check(value, ..., exception=MyError(...))`` raises that exception
  verbatim instead.

The shapes are alternatives; passing both is a ``TypeError``. On success the
argument itself is returned, so checks compose by nesting or through
``throwif.fluent.guard``.

Example:
    def rename(user_id: int, new_name: str) -> None:
        throw_if_out_of_range(user_id, 1, MAX_USER_ID, "user_id")
        name = throw_if_null_or_whitespace(new_name, "new_name")
"""

from __future__ import annotations

from enum import Enum
import logging
from typing import TYPE_CHECKING, Any, NoReturn, Protocol, TypeVar, overload

from throwif._dev_flags import trace_failures_enabled
from throwif._validation import _require, _require_callable, _require_exclusive_signal
from throwif.constants import (
    DEFAULT_STATE_MESSAGE,
    INVALID_ARGUMENT_MESSAGE,
    NULL_MESSAGE,
    NULL_OR_EMPTY_MESSAGE,
    NULL_OR_WHITESPACE_MESSAGE,
    UNSPECIFIED_ARGUMENT,
)
from throwif.defaults import NO_ZERO_VALUE, zero_value_for
from throwif.errors import ArgumentOutOfRangeError, InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


class SupportsOrdering(Protocol):
    def __le__(self, other: Any, /) -> bool: ...

    def __ge__(self, other: Any, /) -> bool: ...


T = TypeVar("T")
E = TypeVar("E", bound=Enum)
C = TypeVar("C", bound=SupportsOrdering)


def _name(argument_name: str | None) -> str:
    return argument_name if argument_name is not None else UNSPECIFIED_ARGUMENT


def _fail(
    check: str,
    exception: BaseException | None,
    default: Callable[[], BaseException],
) -> NoReturn:
    """Single raise point for every guard."""
    failure = exception if exception is not None else default()
    if trace_failures_enabled():
        logger.debug(
            "%s failed for argument %s",
            check,
            getattr(failure, "argument_name", UNSPECIFIED_ARGUMENT),
        )
    raise failure


# --- Text checks ---


@overload
def throw_if_null_or_empty(argument: str | None, argument_name: str | None = ...) -> str: ...
@overload
def throw_if_null_or_empty(argument: str | None, *, exception: BaseException) -> str: ...
def throw_if_null_or_empty(
    argument: str | None,
    argument_name: str | None = None,
    *,
    exception: BaseException | None = None,
) -> str:
    """Ensure a string is not ``None`` and has at least one character."""
    _require_exclusive_signal(argument_name, exception)
    if argument is None or len(argument) == 0:
        _fail(
            "throw_if_null_or_empty",
            exception,
            lambda: InvalidArgumentError(NULL_OR_EMPTY_MESSAGE, _name(argument_name)),
        )
    return argument


@overload
def throw_if_null_or_whitespace(
    argument: str | None, argument_name: str | None = ...
) -> str: ...
@overload
def throw_if_null_or_whitespace(
    argument: str | None, *, exception: BaseException
) -> str: ...
def throw_if_null_or_whitespace(
    argument: str | None,
    argument_name: str | None = None,
    *,
    exception: BaseException | None = None,
) -> str:
    """Ensure a string is not ``None``, empty, or made only of whitespace."""
    _require_exclusive_signal(argument_name, exception)
    if argument is None or len(argument) == 0 or argument.isspace():
        _fail(
            "throw_if_null_or_whitespace",
            exception,
            lambda: InvalidArgumentError(NULL_OR_WHITESPACE_MESSAGE, _name(argument_name)),
        )
    return argument


# --- Absence and default state ---


@overload
def throw_if_null_or_default(argument: T | None, argument_name: str | None = ...) -> T: ...
@overload
def throw_if_null_or_default(argument: T | None, *, exception: BaseException) -> T: ...
def throw_if_null_or_default(
    argument: T | None,
    argument_name: str | None = None,
    *,
    exception: BaseException | None = None,
) -> T:
    """Ensure a value is not ``None`` nor, for value-like types, its zero value.

    Which types are value-like is decided by ``throwif.defaults``; the
    default message says whether the value was absent or equal to the zero
    value.
    """
    _require_exclusive_signal(argument_name, exception)
    if argument is None:
        _fail(
            "throw_if_null_or_default",
            exception,
            lambda: InvalidArgumentError(NULL_MESSAGE, _name(argument_name)),
        )
    zero = zero_value_for(argument)
    if zero is not NO_ZERO_VALUE and bool(argument == zero):
        _fail(
            "throw_if_null_or_default",
            exception,
            lambda: InvalidArgumentError(
                DEFAULT_STATE_MESSAGE.format(zero=zero), _name(argument_name)
            ),
        )
    return argument


# --- Membership and ranges ---


@overload
def throw_if_undefined(
    argument: E, enum_type: type[E] | None = ..., argument_name: str | None = ...
) -> E: ...
@overload
def throw_if_undefined(
    argument: E, enum_type: type[E] | None = ..., *, exception: BaseException
) -> E: ...
def throw_if_undefined(
    argument: E,
    enum_type: type[E] | None = None,
    argument_name: str | None = None,
    *,
    exception: BaseException | None = None,
) -> E:
    """Ensure a value is one of an enumeration's declared members.

    ``enum_type`` defaults to the argument's own type. Membership is by
    identity, so raw values are rejected and ``Flag`` combinations pass only
    when the enumeration declares them.
    """
    _require_exclusive_signal(argument_name, exception)
    if enum_type is None:
        _require(
            condition=isinstance(argument, Enum),
            message="required when the argument is not an Enum member",
            field_name="enum_type",
        )
        enum_type = type(argument)
    _require(
        condition=isinstance(enum_type, type) and issubclass(enum_type, Enum),
        message="must be an Enum subclass",
        field_name="enum_type",
    )
    if not any(argument is member for member in enum_type.__members__.values()):
        _fail(
            "throw_if_undefined",
            exception,
            lambda: ArgumentOutOfRangeError(
                argument_name=_name(argument_name), actual_value=argument
            ),
        )
    return argument


@overload
def throw_if_out_of_range(
    argument: C, min_value: C, max_value: C, argument_name: str | None = ...
) -> C: ...
@overload
def throw_if_out_of_range(
    argument: C, min_value: C, max_value: C, *, exception: BaseException
) -> C: ...
def throw_if_out_of_range(
    argument: C,
    min_value: C,
    max_value: C,
    argument_name: str | None = None,
    *,
    exception: BaseException | None = None,
) -> C:
    """Ensure ``min_value <= argument <= max_value`` (both bounds inclusive)."""
    _require_exclusive_signal(argument_name, exception)
    # Unordered values such as NaN fail both comparisons and are rejected.
    if not (min_value <= argument <= max_value):
        _fail(
            "throw_if_out_of_range",
            exception,
            lambda: ArgumentOutOfRangeError(
                argument_name=_name(argument_name), actual_value=argument
            ),
        )
    return argument


# --- Caller-supplied conditions ---


@overload
def throw_if(
    argument: T, condition: Callable[[T], object], argument_name: str | None = ...
) -> T: ...
@overload
def throw_if(
    argument: T, condition: Callable[[T], object], *, exception: BaseException
) -> T: ...
def throw_if(
    argument: T,
    condition: Callable[[T], object],
    argument_name: str | None = None,
    *,
    exception: BaseException | None = None,
) -> T:
    """Raise when ``condition(argument)`` is true."""
    _require_exclusive_signal(argument_name, exception)
    _require_callable(condition, "condition")
    if condition(argument):
        _fail(
            "throw_if",
            exception,
            lambda: InvalidArgumentError(INVALID_ARGUMENT_MESSAGE, _name(argument_name)),
        )
    return argument


@overload
def throw_if_not(
    argument: T, condition: Callable[[T], object], argument_name: str | None = ...
) -> T: ...
@overload
def throw_if_not(
    argument: T, condition: Callable[[T], object], *, exception: BaseException
) -> T: ...
def throw_if_not(
    argument: T,
    condition: Callable[[T], object],
    argument_name: str | None = None,
    *,
    exception: BaseException | None = None,
) -> T:
    """Raise when ``condition(argument)`` is false."""
    _require_exclusive_signal(argument_name, exception)
    _require_callable(condition, "condition")
    if not condition(argument):
        _fail(
            "throw_if_not",
            exception,
            lambda: InvalidArgumentError(INVALID_ARGUMENT_MESSAGE, _name(argument_name)),
        )
    return argument


__all__ = [
    "SupportsOrdering",
    "throw_if",
    "throw_if_not",
    "throw_if_null_or_default",
    "throw_if_null_or_empty",
    "throw_if_null_or_whitespace",
    "throw_if_out_of_range",
    "throw_if_undefined",
]
