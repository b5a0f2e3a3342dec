"""Zero/default-state resolution for value-like types.

Python does not split types into value and reference kinds, so the zero
state is looked up per type: numbers, temporal and UUID values, frozen
dataclasses and NamedTuples that can be built without arguments are
value-like. Everything else (including ``str`` and ``Enum`` members) is
reference-like and only ``None`` counts as its absent state.
"""

from __future__ import annotations

import dataclasses
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from fractions import Fraction
import logging
from typing import TYPE_CHECKING, Any, Final
import uuid

from throwif._validation import _require, _require_callable

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


class _NoZeroValue:
    __slots__ = ()

    def __repr__(self) -> str:
        return "NO_ZERO_VALUE"


NO_ZERO_VALUE: Final = _NoZeroValue()


def _construct(tp: type[Any]) -> Any:
    return tp()


_FACTORIES: dict[type[Any], Callable[[type[Any]], Any]] = {
    bool: _construct,
    int: _construct,
    float: _construct,
    complex: _construct,
    Decimal: _construct,
    Fraction: _construct,
    timedelta: _construct,
    # datetime subclasses date, the MRO walk picks the closer entry.
    datetime: lambda tp: tp.min,
    date: lambda tp: tp.min,
    time: _construct,
    uuid.UUID: lambda tp: tp(int=0),
}


def register_zero_value(tp: type[Any], factory: Callable[[type[Any]], Any]) -> None:
    """Declare ``tp`` (and its subclasses) value-like.

    ``factory`` receives the concrete type of the argument being checked and
    returns that type's zero value. Registering a type again replaces the
    previous factory. Registration is meant for import time.
    """
    _require(
        condition=isinstance(tp, type),
        message=f"must be a type, got {type(tp).__name__}",
        field_name="tp",
    )
    _require_callable(factory, "factory")
    _FACTORIES[tp] = factory
    logger.debug("Registered zero value factory for %s", tp.__qualname__)


def _is_zero_constructible_dataclass(tp: type[Any]) -> bool:
    if not dataclasses.is_dataclass(tp):
        return False
    params = getattr(tp, "__dataclass_params__", None)
    if params is None or not params.frozen:
        return False
    return all(
        not f.init
        or f.default is not dataclasses.MISSING
        or f.default_factory is not dataclasses.MISSING
        for f in dataclasses.fields(tp)
    )


def _is_zero_constructible_namedtuple(tp: type[Any]) -> bool:
    fields = getattr(tp, "_fields", None)
    defaults = getattr(tp, "_field_defaults", None)
    return (
        issubclass(tp, tuple)
        and isinstance(fields, tuple)
        and isinstance(defaults, dict)
        and len(defaults) == len(fields)
    )


def zero_value_for(argument: Any) -> Any:
    """Return the zero value of ``argument``'s type, or ``NO_ZERO_VALUE``.

    Example:
        >>> zero_value_for(42)
        0
        >>> zero_value_for("text")
        NO_ZERO_VALUE
    """
    tp = type(argument)
    if issubclass(tp, Enum):
        return NO_ZERO_VALUE
    for klass in tp.__mro__:
        factory = _FACTORIES.get(klass)
        if factory is not None:
            return factory(tp)
    if _is_zero_constructible_dataclass(tp) or _is_zero_constructible_namedtuple(tp):
        try:
            return tp()
        except Exception:
            # A type whose own defaults fail its validation has no zero state.
            return NO_ZERO_VALUE
    return NO_ZERO_VALUE


def has_zero_value(argument: Any) -> bool:
    """Return True when ``argument``'s type is value-like."""
    return zero_value_for(argument) is not NO_ZERO_VALUE


__all__ = ["NO_ZERO_VALUE", "has_zero_value", "register_zero_value", "zero_value_for"]
