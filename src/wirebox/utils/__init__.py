"""Utility modules for the container."""

from wirebox.utils.config import Config
from wirebox.utils.callables import load_type, method_of, to_callable

__all__ = [
    "Config",
    "load_type",
    "method_of",
    "to_callable",
]
