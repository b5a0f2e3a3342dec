"""Method-chaining surface over the guard functions.

Example:
    name = (
        guard(raw_name, "name")
        .throw_if_null_or_whitespace()
        .throw_if(lambda s: len(s) > 64)
        .value
    )
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from throwif import guards

if TYPE_CHECKING:
    from collections.abc import Callable
    from enum import Enum

T = TypeVar("T")


class Guard(Generic[T]):
    """Holds one argument and its name while checks run against it.

    Each method delegates to the function of the same name in
    ``throwif.guards`` and returns this guard. Passing ``exception=``
    replaces the default failure for that one check.
    """

    __slots__ = ("_argument_name", "_value")

    def __init__(self, value: T, argument_name: str | None = None) -> None:
        self._value = value
        self._argument_name = argument_name

    @property
    def value(self) -> T:
        """The guarded argument, exactly as it was passed in."""
        return self._value

    @property
    def argument_name(self) -> str | None:
        return self._argument_name

    def _signal(self, exception: BaseException | None) -> dict[str, Any]:
        if exception is not None:
            return {"exception": exception}
        return {"argument_name": self._argument_name}

    def throw_if_null_or_empty(self, *, exception: BaseException | None = None) -> Guard[T]:
        guards.throw_if_null_or_empty(self._value, **self._signal(exception))  # type: ignore[arg-type]
        return self

    def throw_if_null_or_whitespace(
        self, *, exception: BaseException | None = None
    ) -> Guard[T]:
        guards.throw_if_null_or_whitespace(self._value, **self._signal(exception))  # type: ignore[arg-type]
        return self

    def throw_if_null_or_default(self, *, exception: BaseException | None = None) -> Guard[T]:
        guards.throw_if_null_or_default(self._value, **self._signal(exception))
        return self

    def throw_if_undefined(
        self,
        enum_type: type[Enum] | None = None,
        *,
        exception: BaseException | None = None,
    ) -> Guard[T]:
        guards.throw_if_undefined(self._value, enum_type, **self._signal(exception))  # type: ignore[arg-type]
        return self

    def throw_if_out_of_range(
        self,
        min_value: Any,
        max_value: Any,
        *,
        exception: BaseException | None = None,
    ) -> Guard[T]:
        guards.throw_if_out_of_range(
            self._value, min_value, max_value, **self._signal(exception)
        )
        return self

    def throw_if(
        self,
        condition: Callable[[T], object],
        *,
        exception: BaseException | None = None,
    ) -> Guard[T]:
        guards.throw_if(self._value, condition, **self._signal(exception))
        return self

    def throw_if_not(
        self,
        condition: Callable[[T], object],
        *,
        exception: BaseException | None = None,
    ) -> Guard[T]:
        guards.throw_if_not(self._value, condition, **self._signal(exception))
        return self

    def __repr__(self) -> str:
        return f"Guard({self._value!r}, argument_name={self._argument_name!r})"


def guard(value: T, argument_name: str | None = None) -> Guard[T]:
    """Start a chain of checks on ``value``."""
    return Guard(value, argument_name)


__all__ = ["Guard", "guard"]
