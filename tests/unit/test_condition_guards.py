"""Caller-supplied predicate checks."""

from __future__ import annotations

import pytest

from tests.helpers import CustomFailure
from throwif.constants import INVALID_ARGUMENT_MESSAGE
from throwif.errors import InvalidArgumentError
from throwif.guards import throw_if, throw_if_not

pytestmark = pytest.mark.unit


def test_throw_if_raises_when_condition_holds() -> None:
    with pytest.raises(InvalidArgumentError) as exc:
        throw_if("catdog", lambda s: "dog" in s, "pet")

    assert exc.value.message == INVALID_ARGUMENT_MESSAGE
    assert exc.value.argument_name == "pet"


def test_throw_if_returns_value_when_condition_fails() -> None:
    items = [1, 2, 3]
    assert throw_if(items, lambda xs: len(xs) > 3) is items


def test_throw_if_not_raises_when_condition_fails() -> None:
    with pytest.raises(InvalidArgumentError):
        throw_if_not("catdog", lambda s: s.startswith("dog"))


def test_throw_if_not_returns_value_when_condition_holds() -> None:
    assert throw_if_not("catdog", lambda s: "cat" in s) == "catdog"


def test_condition_result_uses_truthiness() -> None:
    assert throw_if("", len) == ""
    with pytest.raises(InvalidArgumentError):
        throw_if("x", len)
    with pytest.raises(InvalidArgumentError):
        throw_if_not([], list)


def test_condition_is_evaluated_exactly_once() -> None:
    calls: list[str] = []

    def condition(value: str) -> bool:
        calls.append(value)
        return False

    throw_if("once", condition)
    assert calls == ["once"]


def test_condition_errors_propagate_unchanged() -> None:
    def explode(_: object) -> bool:
        raise KeyError("missing")

    with pytest.raises(KeyError):
        throw_if(1, explode)


def test_condition_must_be_callable() -> None:
    with pytest.raises(TypeError, match="condition: must be callable"):
        throw_if_not(1, True)  # type: ignore[call-overload]


def test_custom_exceptions() -> None:
    failure = CustomFailure("nope")
    with pytest.raises(CustomFailure) as exc:
        throw_if(1, lambda n: n == 1, exception=failure)
    assert exc.value is failure

    with pytest.raises(CustomFailure):
        throw_if_not(1, lambda n: n == 2, exception=failure)
