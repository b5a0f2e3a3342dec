"""Pydantic integration: run guard functions as field validators.

Failures raised by the guards subclass ``ValueError``, so pydantic reports
them as regular ``value_error`` entries of a ``ValidationError``.

Example:
    class Signup(BaseModel):
        email: Annotated[str, as_validator(throw_if_null_or_whitespace)]
        age: Annotated[int, as_validator(throw_if_out_of_range, 13, 130)]
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any

from pydantic import AfterValidator

from throwif._validation import _require, _require_callable

if TYPE_CHECKING:
    from collections.abc import Callable

    from pydantic import ValidationInfo


def _binds_argument_name(check: Callable[..., Any], args: tuple[Any, ...]) -> bool:
    """Return True when ``args`` would fill ``check``'s ``argument_name`` slot.

    Raises ``TypeError`` when ``check`` cannot accept that many positionals.
    """
    try:
        sig = inspect.signature(check)
    except (ValueError, TypeError):
        # Some callables have no introspectable signature; defer to call time.
        return False
    bound = sig.bind_partial(None, *args)
    return "argument_name" in bound.arguments


def as_validator(check: Callable[..., Any], /, *args: Any, **kwargs: Any) -> AfterValidator:
    """Wrap ``check`` so pydantic calls it after core validation.

    Extra positional and keyword arguments are forwarded to ``check`` after
    the value. The field name becomes ``argument_name`` unless an
    ``exception`` is supplied.
    """
    _require_callable(check, "check")
    _require(
        condition="argument_name" not in kwargs,
        message="is taken from the field name",
        field_name="argument_name",
    )
    _require(
        condition=not _binds_argument_name(check, args),
        message="is taken from the field name; do not pass it positionally",
        field_name="argument_name",
    )

    def _validate(value: Any, info: ValidationInfo) -> Any:
        if "exception" in kwargs:
            return check(value, *args, **kwargs)
        return check(value, *args, argument_name=info.field_name, **kwargs)

    return AfterValidator(_validate)


__all__ = ["as_validator"]
