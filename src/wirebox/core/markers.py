"""Singleton marker for types the container should construct only once."""

from typing import TypeVar

T = TypeVar("T", bound=type)

SINGLETON_FLAG = "__wirebox_singleton__"


class Singleton:
    """Marker base class.

    Subclasses are constructed once per container; later requests get the
    stored instance back.
    """

    __wirebox_singleton__ = True


def singleton(cls: T) -> T:
    """Class decorator with the same effect as inheriting from Singleton."""
    setattr(cls, SINGLETON_FLAG, True)
    return cls


def has_singleton_flag(cls: type) -> bool:
    """Check the class-level singleton flag."""
    return bool(getattr(cls, SINGLETON_FLAG, False))
