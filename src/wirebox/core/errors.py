"""Errors raised by the container."""

from typing import Any


def _name(obj: Any) -> str:
    return getattr(obj, "__qualname__", None) or getattr(obj, "__name__", None) or repr(obj)


class ContainerError(Exception):
    """Base class for all container errors."""


class InvalidBindingError(ContainerError, TypeError):
    """Raised when a concrete type does not satisfy the abstract it is bound to."""

    def __init__(self, abstract: Any, concrete: Any, reason: str = "") -> None:
        self.abstract = abstract
        self.concrete = concrete
        message = f"Cannot bind {_name(concrete)} to {_name(abstract)}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnresolvableDependencyError(ContainerError):
    """Raised when a typed parameter or a requested type cannot be produced."""

    def __init__(
        self,
        dependency: Any,
        parameter: str | None = None,
        owner: Any = None,
        reason: str = "",
    ) -> None:
        self.dependency = dependency
        self.parameter = parameter
        self.owner = owner
        if parameter is not None:
            message = (
                f"Cannot resolve parameter '{parameter}' of {_name(owner)}"
                f" (type {_name(dependency)})"
            )
        else:
            message = f"Cannot resolve {_name(dependency)}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class CircularDependencyError(UnresolvableDependencyError):
    """Raised when constructing a type requires constructing itself again."""

    def __init__(self, cycle: list[type]) -> None:
        self.cycle = list(cycle)
        path = " -> ".join(_name(cls) for cls in self.cycle)
        super().__init__(self.cycle[-1], reason=f"circular dependency {path}")


class MissingArgumentError(UnresolvableDependencyError, TypeError):
    """Raised when fewer explicit arguments are given than untyped parameters need."""

    def __init__(self, parameter: str, owner: Any, expected: int, received: int) -> None:
        self.dependency = None
        self.parameter = parameter
        self.owner = owner
        self.expected = expected
        self.received = received
        # Skips UnresolvableDependencyError.__init__, which formats a type-based message
        Exception.__init__(
            self,
            f"{_name(owner)} is missing a value for parameter '{parameter}'"
            f" ({received} explicit argument(s) given, {expected} required)",
        )


class TooManyArgumentsError(ContainerError, TypeError):
    """Raised when explicit arguments remain after all parameters are filled."""

    def __init__(self, owner: Any, expected: int, received: int, unexpected: list[str] | None = None) -> None:
        self.owner = owner
        self.expected = expected
        self.received = received
        self.unexpected = list(unexpected or [])
        if self.unexpected:
            message = f"{_name(owner)} got unexpected keyword argument(s): {', '.join(self.unexpected)}"
        else:
            message = (
                f"{_name(owner)} takes {expected} explicit argument(s)"
                f" but {received} were given"
            )
        super().__init__(message)


class StaticCallOnInstanceMethodError(ContainerError, TypeError):
    """Raised when an instance method is referenced through its class."""

    def __init__(self, owner: type, method: str) -> None:
        self.owner = owner
        self.method = method
        super().__init__(
            f"{_name(owner)}.{method} is an instance method and needs an instance, not the class"
        )


class InvalidCallableError(ContainerError, TypeError):
    """Raised when a tap target cannot be turned into a callable."""

    def __init__(self, target: Any, reason: str) -> None:
        self.target = target
        super().__init__(f"Cannot call {target!r}: {reason}")
