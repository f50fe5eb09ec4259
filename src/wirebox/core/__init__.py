"""Core container components."""

from wirebox.core.errors import (
    CircularDependencyError,
    ContainerError,
    InvalidBindingError,
    InvalidCallableError,
    MissingArgumentError,
    StaticCallOnInstanceMethodError,
    TooManyArgumentsError,
    UnresolvableDependencyError,
)
from wirebox.core.models import Binding, ParameterDescriptor
from wirebox.core.interfaces import ITypeInspector, ITypeRegistry
from wirebox.core.markers import Singleton, singleton
from wirebox.core.container import Container

__all__ = [
    "Binding",
    "CircularDependencyError",
    "Container",
    "ContainerError",
    "ITypeInspector",
    "ITypeRegistry",
    "InvalidBindingError",
    "InvalidCallableError",
    "MissingArgumentError",
    "ParameterDescriptor",
    "Singleton",
    "StaticCallOnInstanceMethodError",
    "TooManyArgumentsError",
    "UnresolvableDependencyError",
    "singleton",
]
