"""Exception hierarchy for throwif.

Failures raised by the guard functions are plain exceptions carrying enough
structure (kind, message, argument name) for a host to report them as data.
"""

from __future__ import annotations

from typing import Any, ClassVar

from throwif.constants import INVALID_ARGUMENT_MESSAGE, OUT_OF_RANGE_MESSAGE


class ThrowIfError(Exception):
    """Base exception for all throwif errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint

    def __str__(self) -> str:
        """Return the message followed by the hint, when present."""
        msg = self._describe()
        if not self.hint:
            return msg
        return f"{msg.removesuffix('.')}. {self.hint}"

    def _describe(self) -> str:
        return self.message


class InvalidArgumentError(ThrowIfError, ValueError):
    """An argument failed a precondition check.

    Subclasses ``ValueError`` so callers (and libraries such as pydantic)
    that expect the builtin keep working.
    """

    kind: ClassVar[str] = "invalid_argument"

    def __init__(
        self,
        message: str | None = None,
        argument_name: str | None = None,
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(message or INVALID_ARGUMENT_MESSAGE, hint=hint)
        self.argument_name = argument_name

    def _describe(self) -> str:
        if self.argument_name is None:
            return self.message
        return f"{self.message} (Parameter '{self.argument_name}')"

    def to_dict(self) -> dict[str, Any]:
        """Return the failure as a plain mapping."""
        return {
            "kind": self.kind,
            "message": self.message,
            "argument_name": self.argument_name,
        }


_NOT_SET: Any = object()


class ArgumentOutOfRangeError(InvalidArgumentError):
    """An argument lies outside an allowed range or enumeration."""

    kind: ClassVar[str] = "out_of_range"

    def __init__(
        self,
        message: str | None = None,
        argument_name: str | None = None,
        *,
        actual_value: Any = _NOT_SET,
        hint: str | None = None,
    ) -> None:
        super().__init__(message or OUT_OF_RANGE_MESSAGE, argument_name, hint=hint)
        self._actual_value = actual_value

    @property
    def has_actual_value(self) -> bool:
        return self._actual_value is not _NOT_SET

    @property
    def actual_value(self) -> Any:
        """The rejected value, or ``None`` when it was not recorded."""
        return self._actual_value if self.has_actual_value else None

    def _describe(self) -> str:
        msg = super()._describe()
        if self.has_actual_value:
            return f"{msg} Actual value was {self._actual_value!r}."
        return msg
