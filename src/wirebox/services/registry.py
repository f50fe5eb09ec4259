"""Per-type metadata kept by a container."""

import logging

from wirebox.core.markers import has_singleton_flag

logger = logging.getLogger(__name__)


class TypeRegistry:
    """Default ITypeRegistry implementation.

    Holds explicit singleton flags and the types a container has seen, so
    that ``"Name::method"`` references can be looked up by name.
    """

    def __init__(self) -> None:
        self._singletons: set[type] = set()
        self._known: dict[str, type] = {}

    def mark_singleton(self, cls: type) -> None:
        self._singletons.add(cls)
        self.remember(cls)

    def unmark_singleton(self, cls: type) -> None:
        self._singletons.discard(cls)

    def is_singleton(self, cls: type) -> bool:
        """Explicitly flagged, decorated with @singleton, or a Singleton subclass."""
        return cls in self._singletons or has_singleton_flag(cls)

    def remember(self, cls: type) -> None:
        """Record a type under its qualified and its dotted module path."""
        qualname = getattr(cls, "__qualname__", None)
        if qualname is None:
            return
        self._known[qualname] = cls
        self._known[f"{cls.__module__}.{qualname}"] = cls

    def find(self, name: str) -> type | None:
        cls = self._known.get(name)
        if cls is None:
            # Bare class names match nested types by their last segment
            matches = {known for key, known in self._known.items() if key.rsplit(".", 1)[-1] == name}
            if len(matches) == 1:
                cls = matches.pop()
            elif matches:
                logger.debug(f"Ambiguous type name {name!r}: {len(matches)} candidates")
        return cls

    def clear(self) -> None:
        self._singletons.clear()
        self._known.clear()
