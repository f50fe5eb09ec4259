"""Runtime type introspection built on inspect and typing."""

import enum
import functools
import inspect
import logging
import types
from typing import Any, Callable, Protocol, Union, get_args, get_origin, get_type_hints

from wirebox.core.models import ParameterDescriptor

logger = logging.getLogger(__name__)

_NONE_TYPE = type(None)
_PROTOCOL_BASES = {object, Protocol}


def is_protocol(cls: Any) -> bool:
    """Check whether a class is a typing.Protocol definition."""
    return inspect.isclass(cls) and bool(getattr(cls, "_is_protocol", False))


def protocol_members(proto: type) -> set[str]:
    """Public attribute and method names a Protocol declares."""
    members: set[str] = set()
    for base in proto.__mro__:
        if base in _PROTOCOL_BASES or not is_protocol(base):
            continue
        names = set(vars(base)) | set(inspect.get_annotations(base))
        members.update(name for name in names if not name.startswith("_"))
    return members


class TypeInspector:
    """Default ITypeInspector implementation."""

    def parameters(self, target: Callable[..., Any]) -> list[ParameterDescriptor]:
        """List the parameters of a callable.

        For a class, the constructor parameters are returned without ``self``.

        Raises:
            ValueError: If no signature can be read for the target
            TypeError: If the target is not callable
        """
        signature = inspect.signature(target)
        hints = self._type_hints(target)

        descriptors = []
        for param in signature.parameters.values():
            annotation = hints.get(param.name, param.annotation)
            has_default = param.default is not inspect.Parameter.empty
            descriptors.append(
                ParameterDescriptor(
                    name=param.name,
                    annotation=self.recognise(annotation),
                    kind=param.kind,
                    has_default=has_default,
                    default=param.default if has_default else None,
                )
            )
        return descriptors

    def recognise(self, annotation: Any) -> type | None:
        """Reduce an annotation to an injectable class, or None when untyped.

        ``Optional[T]`` and ``T | None`` count as ``T``. Builtins, enums,
        generics, other unions and unevaluated strings count as untyped.
        """
        if annotation is inspect.Parameter.empty or isinstance(annotation, str):
            return None

        origin = get_origin(annotation)
        if origin is Union or origin is types.UnionType:
            members = [arg for arg in get_args(annotation) if arg is not _NONE_TYPE]
            if len(members) != 1:
                return None
            annotation = members[0]
            origin = get_origin(annotation)

        if origin is not None or annotation is Any or not inspect.isclass(annotation):
            return None
        if annotation.__module__ == "builtins" or issubclass(annotation, enum.Enum):
            return None
        return annotation

    def satisfies(self, concrete: type, abstract: type) -> bool:
        """Check whether concrete implements, extends or equals abstract.

        A Protocol is satisfied when every member it declares exists on the
        concrete class, either as a class attribute or as an annotation
        somewhere in its MRO. Attributes only assigned in ``__init__``
        without a class-level annotation are not visible here.
        """
        if not inspect.isclass(concrete) or not inspect.isclass(abstract):
            return False
        if concrete is abstract or abstract in concrete.__mro__:
            return True
        if is_protocol(abstract):
            declared = _annotated_names(concrete)
            return all(
                hasattr(concrete, name) or name in declared for name in protocol_members(abstract)
            )
        try:
            return issubclass(concrete, abstract)
        except TypeError:
            return False

    def is_instantiable(self, cls: Any) -> bool:
        return inspect.isclass(cls) and not inspect.isabstract(cls) and not is_protocol(cls)

    def _type_hints(self, target: Callable[..., Any]) -> dict[str, Any]:
        if isinstance(target, functools.partial):
            source = target.func
        elif inspect.isclass(target):
            source = target.__init__
        elif inspect.isroutine(target):
            source = target
        else:
            source = getattr(type(target), "__call__", target)
        try:
            return get_type_hints(source)
        except (NameError, TypeError, AttributeError):
            return self._evaluate_each(source)

    def _evaluate_each(self, source: Any) -> dict[str, Any]:
        """Evaluate annotations one by one, leaving out those that fail."""
        try:
            raw = inspect.get_annotations(source)
        except (NameError, TypeError, AttributeError):
            return {}

        function = inspect.unwrap(getattr(source, "__func__", source))
        globalns = getattr(function, "__globals__", {})
        hints = {}
        for name, annotation in raw.items():
            if not isinstance(annotation, str):
                hints[name] = annotation
                continue
            try:
                hints[name] = eval(annotation, globalns)
            except (NameError, AttributeError, SyntaxError, TypeError):
                logger.debug(f"Cannot evaluate annotation {annotation!r} of parameter '{name}'")
        return hints


def _annotated_names(cls: type) -> set[str]:
    names: set[str] = set()
    for base in cls.__mro__:
        try:
            names.update(inspect.get_annotations(base))
        except (NameError, TypeError):
            continue
    return names
