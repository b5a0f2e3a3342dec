"""Opt-in tracing of failing checks."""

from __future__ import annotations

import logging

import pytest

from throwif._dev_flags import trace_failures_enabled
from throwif.errors import InvalidArgumentError
from throwif.guards import throw_if, throw_if_null_or_empty

pytestmark = pytest.mark.unit


def test_trace_disabled_by_default() -> None:
    assert trace_failures_enabled() is False


@pytest.mark.parametrize(("raw", "expected"), [("1", True), ("0", False), ("true", False)])
def test_trace_reads_environment(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("THROWIF_TRACE_FAILURES", raw)
    assert trace_failures_enabled() is expected


def test_override_takes_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("THROWIF_TRACE_FAILURES", "1")
    assert trace_failures_enabled(override=False) is False
    monkeypatch.delenv("THROWIF_TRACE_FAILURES")
    assert trace_failures_enabled(override=True) is True


def test_failures_are_silent_by_default(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="throwif"), pytest.raises(InvalidArgumentError):
        throw_if_null_or_empty("", "title")

    assert caplog.records == []


@pytest.mark.usefixtures("trace_failures")
def test_traced_failure_emits_one_debug_record(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="throwif"), pytest.raises(InvalidArgumentError):
        throw_if(3, lambda n: n > 2, "limit")

    assert len(caplog.records) == 1
    record = caplog.records[0]
    assert record.levelno == logging.DEBUG
    assert record.getMessage() == "throw_if failed for argument limit"


@pytest.mark.usefixtures("trace_failures")
def test_traced_success_emits_nothing(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="throwif"):
        throw_if(1, lambda n: n > 2, "limit")

    assert caplog.records == []
