"""Dependency injection container."""

import inspect
import logging
from typing import Any, Callable, TypeVar

from wirebox.core.errors import (
    CircularDependencyError,
    InvalidBindingError,
    InvalidCallableError,
    MissingArgumentError,
    TooManyArgumentsError,
    UnresolvableDependencyError,
)
from wirebox.core.interfaces import ITypeInspector, ITypeRegistry
from wirebox.core.models import Binding, ParameterDescriptor
from wirebox.services.inspector import TypeInspector
from wirebox.services.registry import TypeRegistry
from wirebox.utils.callables import to_callable
from wirebox.utils.config import Config

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Container:
    """
    Inversion-of-control container.

    Binds abstract types to concrete ones, keeps shared instances keyed by
    type, and calls constructors and other callables with their typed
    parameters resolved from what it holds.

    The container is not thread-safe. Pass it explicitly to whatever needs
    it; a parameter annotated with ``Container`` receives the container.
    """

    def __init__(
        self,
        config: Config | None = None,
        inspector: ITypeInspector | None = None,
        registry: ITypeRegistry | None = None,
    ) -> None:
        self._config = config or Config()
        self._inspector = inspector or TypeInspector()
        self._registry = registry or TypeRegistry()
        self._bindings: dict[type, type] = {}
        self._shared: dict[Any, Any] = {}
        self._constructing: list[type] = []
        self._config.apply_logging()

    @property
    def config(self) -> Config:
        return self._config

    # Bindings

    def bind(self, abstract: type, concrete: type) -> None:
        """Register a concrete type to be constructed in place of an abstract one.

        Raises:
            InvalidBindingError: If concrete does not implement or extend abstract
        """
        if not inspect.isclass(concrete):
            raise InvalidBindingError(abstract, concrete, "concrete must be a class")
        if not self._inspector.satisfies(concrete, abstract):
            raise InvalidBindingError(
                abstract, concrete, "it does not implement, extend or equal the abstract type"
            )

        self._bindings[abstract] = concrete
        self._registry.remember(abstract)
        self._registry.remember(concrete)
        logger.debug(f"Bound {abstract.__qualname__} -> {concrete.__qualname__}")

    def unbind(self, abstract: type) -> None:
        """Remove a binding if there is one."""
        if self._bindings.pop(abstract, None) is not None:
            logger.debug(f"Unbound {abstract.__qualname__}")

    def is_bound(self, abstract: type) -> bool:
        return abstract in self._bindings

    def binding(self, abstract: type) -> Binding | None:
        """Get the binding registered for an abstract type."""
        concrete = self._bindings.get(abstract)
        if concrete is None:
            return None
        return Binding(abstract, concrete)

    # Shared instances

    def share(self, instance: Any, key: Any = None) -> None:
        """Store an instance for reuse under key, or under its own type."""
        if key is None:
            key = type(instance)
        self._shared[key] = instance
        if inspect.isclass(key):
            self._registry.remember(key)
        logger.debug(f"Shared {type(instance).__qualname__} instance under {key!r}")

    def get(self, key: Any, default: Any = None) -> Any:
        """Get a shared instance without ever constructing one."""
        return self._shared.get(key, default)

    def is_shared(self, key: Any) -> bool:
        return key in self._shared

    def remove(self, key: Any) -> None:
        """Drop a shared instance if there is one."""
        if self._shared.pop(key, None) is not None:
            logger.debug(f"Removed shared instance under {key!r}")

    # Singleton flags

    def mark_singleton(self, cls: type) -> None:
        """Keep the first instance the container constructs of cls."""
        self._registry.mark_singleton(cls)

    def is_singleton(self, cls: type) -> bool:
        return inspect.isclass(cls) and self._registry.is_singleton(cls)

    def clear(self) -> None:
        """Drop all bindings, shared instances and singleton flags."""
        self._bindings.clear()
        self._shared.clear()
        self._registry.clear()
        logger.debug("Container cleared")

    # Resolution

    def new(self, type_: type[T], *args: Any, **kwargs: Any) -> T:
        """
        Construct an instance, resolving constructor parameters.

        Typed parameters are resolved from the container. Untyped parameters
        take the explicit positional arguments in order, keyword arguments
        fill parameters by name.

        Args:
            type_: The type to construct, or an abstract type with a binding
            *args: Values for untyped constructor parameters
            **kwargs: Values for constructor parameters by name

        Returns:
            The new instance, or the stored one for a singleton type

        Raises:
            UnresolvableDependencyError: If a required parameter can't be produced
            TooManyArgumentsError: If explicit arguments are left over
        """
        target = self._target(type_)
        singleton = self.is_singleton(target)
        if singleton and target in self._shared:
            return self._shared[target]

        if not self._inspector.is_instantiable(target):
            reason = "no binding and the type can't be instantiated"
            if target is not type_:
                reason = f"bound to {target!r}, which can't be instantiated"
            raise UnresolvableDependencyError(type_, reason=reason)

        if self._config.detect_cycles and target in self._constructing:
            start = self._constructing.index(target)
            raise CircularDependencyError(self._constructing[start:] + [target])

        try:
            parameters = self._inspector.parameters(target)
        except (TypeError, ValueError) as exc:
            raise UnresolvableDependencyError(type_, reason=str(exc)) from exc

        self._constructing.append(target)
        try:
            call_args, call_kwargs = self._arguments(target, parameters, args, kwargs)
        finally:
            self._constructing.pop()

        instance = target(*call_args, **call_kwargs)
        logger.debug(f"Constructed {target.__qualname__}")

        if singleton:
            self._shared[target] = instance
            logger.debug(f"Stored singleton instance of {target.__qualname__}")
        return instance

    def resolve(self, type_: type[T]) -> T:
        """Get the shared instance of a type, or construct one."""
        if type_ in self._shared:
            return self._shared[type_]
        if inspect.isclass(type_) and issubclass(type_, Container) and isinstance(self, type_):
            return self  # type: ignore[return-value]
        return self.new(type_)

    def tap(self, target: Any, *args: Any, **kwargs: Any) -> Any:
        """
        Call a function or method with its typed parameters injected.

        Args:
            target: A callable, an ``(instance, "method")`` or
                ``(Type, "static_method")`` pair, or a ``"Type::method"``
                string. A class is constructed as with ``new``.
            *args: Values for untyped parameters, in order
            **kwargs: Values for parameters by name

        Returns:
            Whatever the callable returns

        Raises:
            MissingArgumentError: If too few explicit arguments were given
            TooManyArgumentsError: If explicit arguments are left over
            StaticCallOnInstanceMethodError: If an instance method is
                referenced through its class
            UnresolvableDependencyError: If a typed parameter can't be produced
            InvalidCallableError: If target can't be turned into a callable
        """
        if inspect.isclass(target):
            return self.new(target, *args, **kwargs)

        func = to_callable(target, self._registry)
        try:
            parameters = self._inspector.parameters(func)
        except (TypeError, ValueError) as exc:
            raise InvalidCallableError(target, str(exc)) from exc

        call_args, call_kwargs = self._arguments(func, parameters, args, kwargs)
        return func(*call_args, **call_kwargs)

    def _target(self, type_: type) -> type:
        target = self._bindings.get(type_, type_)
        if self._config.follow_binding_chains:
            seen = {type_}
            while target in self._bindings and target not in seen:
                seen.add(target)
                target = self._bindings[target]
        return target

    def _arguments(
        self,
        owner: Callable[..., Any],
        parameters: list[ParameterDescriptor],
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> tuple[list[Any], dict[str, Any]]:
        """Assemble positional and keyword arguments for a call to owner."""
        pool = list(args)
        named = dict(kwargs)
        required = sum(
            1
            for p in parameters
            if not p.is_typed and not p.is_variadic and not p.has_default and p.name not in named
        )

        positional: list[Any] = []
        keywords: dict[str, Any] = {}
        consumed = 0

        for param in parameters:
            if param.kind is inspect.Parameter.VAR_POSITIONAL:
                positional.extend(pool[consumed:])
                consumed = len(pool)
                continue
            if param.kind is inspect.Parameter.VAR_KEYWORD:
                keywords.update(named)
                named.clear()
                continue

            if param.name in named and not param.is_positional_only:
                value = named.pop(param.name)
            elif param.is_typed:
                value = self._resolve_parameter(owner, param)
            elif consumed < len(pool):
                value = pool[consumed]
                consumed += 1
            elif param.has_default:
                value = param.default
            else:
                raise MissingArgumentError(param.name, owner, expected=required, received=len(pool))

            if param.is_keyword_only:
                keywords[param.name] = value
            else:
                positional.append(value)

        if consumed < len(pool):
            raise TooManyArgumentsError(owner, expected=consumed, received=len(pool))
        if named:
            raise TooManyArgumentsError(owner, expected=consumed, received=len(pool), unexpected=sorted(named))
        return positional, keywords

    def _resolve_parameter(self, owner: Callable[..., Any], param: ParameterDescriptor) -> Any:
        try:
            return self.resolve(param.annotation)
        except CircularDependencyError:
            raise
        except UnresolvableDependencyError as exc:
            if param.has_default:
                logger.debug(f"Using default for parameter '{param.name}': {exc}")
                return param.default
            raise UnresolvableDependencyError(
                param.annotation, param.name, owner, reason=str(exc)
            ) from exc

    def __repr__(self) -> str:
        return f"Container(bindings={len(self._bindings)}, shared={len(self._shared)})"
