"""Internal checks on the guard functions' own parameters.

These catch misuse of the library (wrong parameter types, conflicting call
shapes) and always raise ``TypeError``; they never touch the argument under
test.
"""

from __future__ import annotations

import typing


def _require(
    *,
    condition: bool,
    message: str,
    exc: type[Exception] = TypeError,
    field_name: str | None = None,
) -> None:
    """Centralized validation with optional field context for clearer errors."""
    if not condition:
        if field_name:
            raise exc(f"{field_name}: {message}")
        raise exc(message)


def _require_exclusive_signal(
    argument_name: str | None, exception: BaseException | None
) -> None:
    """The name and the custom exception are alternative call shapes."""
    _require(
        condition=argument_name is None or exception is None,
        message="argument_name and exception are mutually exclusive",
    )
    _require(
        condition=exception is None or isinstance(exception, BaseException),
        message=f"must be an exception instance, got {type(exception).__name__}",
        field_name="exception",
    )


def _require_callable(func: typing.Any, field_name: str) -> None:
    _require(condition=callable(func), message="must be callable", field_name=field_name)
