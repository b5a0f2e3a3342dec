"""Test helpers (small, reusable doubles).

Keep this file tiny: enumerations and value types shared by several suites.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, Flag, IntEnum, auto
from typing import NamedTuple


class Color(Enum):
    RED = 1
    GREEN = 2
    BLUE = 3
    CRIMSON = 1  # alias of RED


class Priority(IntEnum):
    LOW = 0
    HIGH = 10


class Permission(Flag):
    READ = auto()
    WRITE = auto()
    EXECUTE = auto()
    READ_WRITE = READ | WRITE


@dataclass(frozen=True)
class Point:
    """Frozen and constructible without arguments: a value type."""

    x: int = 0
    y: int = 0


@dataclass
class MutablePoint:
    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class Named:
    """Frozen but needs a name, so it has no zero value."""

    name: str
    size: int = 0


class Size(NamedTuple):
    width: int = 0
    height: int = 0


class Pair(NamedTuple):
    left: int
    right: int = 0


class CustomFailure(RuntimeError):
    """Caller-supplied failure used to check verbatim raising."""
