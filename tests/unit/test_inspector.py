"""Tests for runtime type introspection."""

from __future__ import annotations

import enum
import functools
import inspect
from abc import ABC, abstractmethod
from typing import Any, Optional, Protocol, Union

import pytest

from wirebox.core.container import Container
from wirebox.services.inspector import TypeInspector, is_protocol, protocol_members


class Engine:
    pass


class Wheel:
    pass


class Color(enum.Enum):
    RED = "red"


class Car:
    def __init__(self, engine: Engine, name: str, wheels: int = 4, *, color=None):
        self.engine = engine


class Vehicle(ABC):
    @abstractmethod
    def drive(self) -> None:
        ...


class Readable(Protocol):
    size: int

    def read(self) -> bytes:
        ...


class Seekable(Readable, Protocol):
    def seek(self, offset: int) -> None:
        ...


class File:
    size = 0

    def read(self) -> bytes:
        return b""

    def seek(self, offset: int) -> None:
        pass


class Stream:
    def read(self) -> bytes:
        return b""


class Callback:
    def __call__(self, engine: Engine, label):
        return engine, label


class TestParameters:
    """Tests for reading parameter descriptors."""

    def test_class_constructor_parameters(self, inspector):
        """Test that a class yields its constructor parameters without self."""
        params = inspector.parameters(Car)

        assert [p.name for p in params] == ["engine", "name", "wheels", "color"]

    def test_class_parameter_details(self, inspector):
        """Test annotations, defaults and kinds."""
        engine, name, wheels, color = inspector.parameters(Car)

        assert engine.annotation is Engine
        assert engine.is_typed
        assert not engine.has_default
        assert name.annotation is None
        assert wheels.has_default and wheels.default == 4
        assert color.is_keyword_only
        assert color.default is None

    def test_function_parameters(self, inspector):
        """Test reading a plain function."""

        def handler(engine: Engine, label) -> None:
            pass

        params = inspector.parameters(handler)

        assert [(p.name, p.annotation) for p in params] == [("engine", Engine), ("label", None)]

    def test_bound_method_skips_self(self, inspector):
        """Test that bound methods do not list self."""

        class Garage:
            def park(self, car: Car) -> None:
                pass

        params = inspector.parameters(Garage().park)

        assert [p.name for p in params] == ["car"]
        assert params[0].annotation is Car

    def test_callable_object(self, inspector):
        """Test reading the parameters of an object with __call__."""
        params = inspector.parameters(Callback())

        assert [(p.name, p.annotation) for p in params] == [("engine", Engine), ("label", None)]

    def test_partial(self, inspector):
        """Test reading a functools.partial."""

        def handler(engine: Engine, label, extra) -> None:
            pass

        params = inspector.parameters(functools.partial(handler, extra=1))

        assert params[0].annotation is Engine
        assert params[2].has_default

    def test_string_annotations_are_evaluated(self, inspector):
        """Test that forward references are resolved to classes."""

        def handler(engine: Engine) -> None:
            pass

        assert inspector.parameters(handler)[0].annotation is Engine

    def test_unresolvable_string_annotation_is_untyped(self, inspector):
        """Test that an unknown forward reference counts as untyped."""

        def handler(thing: DoesNotExist) -> None:  # noqa: F821
            pass

        assert inspector.parameters(handler)[0].annotation is None

    def test_variadic_parameters(self, inspector):
        """Test *args and **kwargs kinds."""

        def handler(*args, **kwargs) -> None:
            pass

        args, kwargs = inspector.parameters(handler)

        assert args.kind is inspect.Parameter.VAR_POSITIONAL
        assert kwargs.kind is inspect.Parameter.VAR_KEYWORD
        assert args.is_variadic and kwargs.is_variadic

    def test_class_without_init(self, inspector):
        """Test a class with no constructor parameters."""
        assert inspector.parameters(Engine) == []


class TestRecognise:
    """Tests for reducing annotations to injectable classes."""

    @pytest.mark.parametrize("annotation", [str, int, float, bool, bytes, list, dict])
    def test_builtins_are_untyped(self, inspector, annotation):
        """Test that builtin types are filled from explicit arguments."""
        assert inspector.recognise(annotation) is None

    @pytest.mark.parametrize(
        "annotation",
        [list[Engine], dict[str, Engine], Any, Union[Engine, Wheel], Engine | Wheel, Color, "Engine"],
    )
    def test_non_injectable_annotations(self, inspector, annotation):
        """Test generics, Any, unions, enums and strings."""
        assert inspector.recognise(annotation) is None

    @pytest.mark.parametrize("annotation", [Optional[Engine], Engine | None, Union[None, Engine]])
    def test_optional_unwraps(self, inspector, annotation):
        """Test that optional annotations resolve to the wrapped class."""
        assert inspector.recognise(annotation) is Engine

    def test_empty_is_untyped(self, inspector):
        """Test a missing annotation."""
        assert inspector.recognise(inspect.Parameter.empty) is None

    def test_class_is_recognised(self, inspector):
        """Test a plain user-defined class."""
        assert inspector.recognise(Engine) is Engine


class TestSatisfies:
    """Tests for assignability checks."""

    def test_same_type(self, inspector):
        assert inspector.satisfies(Engine, Engine)

    def test_subclass(self, inspector):
        """Test nominal subclassing."""

        class TurboEngine(Engine):
            pass

        assert inspector.satisfies(TurboEngine, Engine)
        assert not inspector.satisfies(Engine, TurboEngine)

    def test_registered_virtual_subclass(self, inspector):
        """Test ABC.register based subclassing."""

        class Bike:
            def drive(self) -> None:
                pass

        Vehicle.register(Bike)

        assert inspector.satisfies(Bike, Vehicle)

    def test_protocol_structural(self, inspector):
        """Test structural conformance to a Protocol."""
        assert inspector.satisfies(File, Readable)
        assert inspector.satisfies(File, Seekable)
        assert not inspector.satisfies(Stream, Readable)
        assert not inspector.satisfies(Stream, Seekable)

    def test_non_classes(self, inspector):
        """Test that instances never satisfy anything."""
        assert not inspector.satisfies(Engine(), Engine)
        assert not inspector.satisfies(Engine, "Engine")


class TestInstantiable:
    """Tests for instantiability checks."""

    def test_plain_class(self, inspector):
        assert inspector.is_instantiable(Engine)

    def test_abstract_class(self, inspector):
        assert not inspector.is_instantiable(Vehicle)

    def test_protocol(self, inspector):
        assert not inspector.is_instantiable(Readable)

    def test_instance(self, inspector):
        assert not inspector.is_instantiable(Engine())


class TestProtocolHelpers:
    """Tests for Protocol helpers."""

    def test_is_protocol(self):
        assert is_protocol(Readable)
        assert not is_protocol(File)
        assert not is_protocol(Vehicle)

    def test_protocol_members_include_bases(self):
        """Test that inherited protocol members are collected."""
        assert protocol_members(Seekable) == {"size", "read", "seek"}


class Named(Protocol):
    name: str


class Person:
    name: str

    def __init__(self, name: str = "anon"):
        self.name = name


class Anonymous:
    def __init__(self):
        self.name = "set late"


class TestDataMembers:
    """Tests for Protocol data members."""

    def test_annotated_attribute_satisfies(self, inspector):
        """Test that a class-level annotation counts as the member."""
        assert inspector.satisfies(Person, Named)

    def test_attribute_only_set_in_init_is_not_seen(self, inspector):
        """Test that undeclared instance attributes are not visible."""
        assert not inspector.satisfies(Anonymous, Named)


class TestPostponedAnnotations:
    """Tests for callables whose hints can only be evaluated in part."""

    def test_unevaluable_hint_keeps_the_others(self, inspector):
        """Test that a local-class hint does not hide module-level ones."""

        class Local:
            pass

        def handler(engine: Engine, other: Local | None = None, param: str = "x") -> None:
            pass

        engine, other, param = inspector.parameters(handler)

        assert engine.annotation is Engine
        assert other.annotation is None
        assert param.annotation is None

    def test_typed_parameter_is_injected_not_filled(self):
        """Test that explicit arguments go to untyped parameters only."""

        class Local:
            pass

        def handler(engine: Engine, other: Local | None = None, param: str = "x") -> tuple:
            return engine, other, param

        engine, other, param = Container().tap(handler, "given")

        assert isinstance(engine, Engine)
        assert other == "given"
        assert param == "x"

    def test_unevaluable_constructor_hint(self, inspector):
        """Test partial evaluation for class constructors."""

        class Local:
            pass

        class Holder:
            def __init__(self, engine: Engine, local: Local | None = None):
                self.engine = engine

        engine, local = inspector.parameters(Holder)

        assert engine.annotation is Engine
        assert local.annotation is None
