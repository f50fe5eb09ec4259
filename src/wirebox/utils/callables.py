"""Turning tap targets into plain callables."""

import importlib
import inspect
from typing import Any, Callable

from wirebox.core.errors import InvalidCallableError, StaticCallOnInstanceMethodError
from wirebox.core.interfaces import ITypeRegistry

STATIC_SEPARATOR = "::"


def load_type(path: str, registry: ITypeRegistry) -> type:
    """Find a type by bare name in the registry or import it by dotted path."""
    cls = registry.find(path)
    if cls is not None:
        return cls

    module_name, _, attr = path.rpartition(".")
    if module_name:
        try:
            module = importlib.import_module(module_name)
        except ImportError as exc:
            raise InvalidCallableError(path, f"cannot import module {module_name!r}") from exc
        cls = getattr(module, attr, None)
        if inspect.isclass(cls):
            return cls

    raise InvalidCallableError(path, "unknown type")


def method_of(owner: Any, name: str) -> Callable[..., Any]:
    """Get a method from an instance or a static/class method from a type.

    Raises:
        StaticCallOnInstanceMethodError: If ``owner`` is a class and ``name``
            is a plain instance method
        InvalidCallableError: If there is no such callable attribute
    """
    if inspect.isclass(owner):
        try:
            attr = inspect.getattr_static(owner, name)
        except AttributeError as exc:
            raise InvalidCallableError((owner, name), "no such attribute") from exc
        if isinstance(attr, (staticmethod, classmethod)):
            return getattr(owner, name)
        if inspect.isfunction(attr):
            raise StaticCallOnInstanceMethodError(owner, name)
    elif not hasattr(owner, name):
        raise InvalidCallableError((owner, name), "no such attribute")

    method = getattr(owner, name)
    if not callable(method):
        raise InvalidCallableError((owner, name), "attribute is not callable")
    return method


def to_callable(target: Any, registry: ITypeRegistry) -> Callable[..., Any]:
    """Normalise a tap target.

    Accepts a callable, an ``(owner, "method")`` pair or a
    ``"Type::method"`` string.
    """
    if isinstance(target, str):
        type_name, separator, name = target.partition(STATIC_SEPARATOR)
        if not separator or not type_name or not name:
            raise InvalidCallableError(target, f"expected 'Type{STATIC_SEPARATOR}method'")
        return method_of(load_type(type_name, registry), name)

    if isinstance(target, (tuple, list)):
        if len(target) != 2 or not isinstance(target[1], str):
            raise InvalidCallableError(target, "expected an (owner, 'method') pair")
        return method_of(target[0], target[1])

    if callable(target):
        return target

    raise InvalidCallableError(target, "not callable")
