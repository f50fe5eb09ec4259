"""Inversion-of-control container with type-directed parameter injection."""

from wirebox.core import (
    Binding,
    CircularDependencyError,
    Container,
    ContainerError,
    InvalidBindingError,
    InvalidCallableError,
    MissingArgumentError,
    ParameterDescriptor,
    Singleton,
    StaticCallOnInstanceMethodError,
    TooManyArgumentsError,
    UnresolvableDependencyError,
    singleton,
)
from wirebox.utils.config import Config
from wirebox.app import create_container

__version__ = "0.1.0"

__all__ = [
    "Binding",
    "CircularDependencyError",
    "Config",
    "Container",
    "ContainerError",
    "InvalidBindingError",
    "InvalidCallableError",
    "MissingArgumentError",
    "ParameterDescriptor",
    "Singleton",
    "StaticCallOnInstanceMethodError",
    "TooManyArgumentsError",
    "UnresolvableDependencyError",
    "create_container",
    "singleton",
]
