"""Data models for the container."""

import inspect
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Binding:
    """A concrete type registered in place of an abstract one."""

    abstract: type
    concrete: type

    def __str__(self) -> str:
        return f"{self.abstract.__qualname__} -> {self.concrete.__qualname__}"


@dataclass(frozen=True)
class ParameterDescriptor:
    """One parameter of a callable, as seen by the resolver."""

    name: str
    annotation: type | None = None
    kind: inspect._ParameterKind = inspect.Parameter.POSITIONAL_OR_KEYWORD
    has_default: bool = False
    default: Any = None

    @property
    def is_typed(self) -> bool:
        """Whether the parameter can be resolved from the container."""
        return self.annotation is not None

    @property
    def is_variadic(self) -> bool:
        return self.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)

    @property
    def is_keyword_only(self) -> bool:
        return self.kind is inspect.Parameter.KEYWORD_ONLY

    @property
    def is_positional_only(self) -> bool:
        return self.kind is inspect.Parameter.POSITIONAL_ONLY
