"""
Type Registry
Per-dialect widget descriptors
"""

from functools import lru_cache

from gridforge.dialect import Dialect
from .types import (
    ESSENTIAL_PROPERTIES,
    TypeRegistry,
    WidgetTypeDescriptor,
    lower_first,
    setter_name,
)
from . import basalt, pixelui, primeui

_BUILDERS = {
    Dialect.BASALT: basalt.build_registry,
    Dialect.PIXELUI: pixelui.build_registry,
    Dialect.PRIMEUI: primeui.build_registry,
}


def get_registry(dialect: Dialect | str) -> TypeRegistry:
    """Registry for a dialect, built once."""
    return _build(Dialect(dialect))


@lru_cache
def _build(dialect: Dialect) -> TypeRegistry:
    return _BUILDERS[dialect]()


__all__ = [
    "ESSENTIAL_PROPERTIES",
    "TypeRegistry",
    "WidgetTypeDescriptor",
    "get_registry",
    "lower_first",
    "setter_name",
]
