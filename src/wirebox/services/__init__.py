"""Default introspection and type registry services."""

from wirebox.services.inspector import TypeInspector
from wirebox.services.registry import TypeRegistry

__all__ = [
    "TypeInspector",
    "TypeRegistry",
]
