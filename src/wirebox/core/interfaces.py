"""Protocol interfaces for the container's collaborators."""

from typing import Any, Callable, Protocol

from wirebox.core.models import ParameterDescriptor


class ITypeInspector(Protocol):
    """Interface for runtime type introspection."""

    def parameters(self, target: Callable[..., Any]) -> list[ParameterDescriptor]:
        """List the parameters of a callable or of a class constructor."""
        ...

    def satisfies(self, concrete: type, abstract: type) -> bool:
        """Check whether a concrete type can stand in for an abstract one."""
        ...

    def is_instantiable(self, cls: Any) -> bool:
        """Check whether a type can be constructed directly."""
        ...


class ITypeRegistry(Protocol):
    """Interface for per-type metadata such as the singleton flag."""

    def mark_singleton(self, cls: type) -> None:
        """Flag a type so the container keeps its first instance."""
        ...

    def unmark_singleton(self, cls: type) -> None:
        """Remove an explicit singleton flag."""
        ...

    def is_singleton(self, cls: type) -> bool:
        """Check whether instances of a type are shared once created."""
        ...

    def find(self, name: str) -> type | None:
        """Find a known type by its name."""
        ...

    def remember(self, cls: type) -> None:
        """Record a type so it can later be found by name."""
        ...

    def clear(self) -> None:
        """Forget all flags and known types."""
        ...
