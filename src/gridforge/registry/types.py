"""
Widget Type Definitions
Per-dialect descriptors mapping type names to defaults and emitted names
"""

import copy
from collections.abc import Callable, Iterable
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from gridforge.core import get_logger, UnknownWidgetType
from gridforge.dialect import Dialect

logger = get_logger(__name__)

ESSENTIAL_PROPERTIES: Tuple[str, ...] = ("x", "y", "width", "height")


class WidgetTypeDescriptor(BaseModel):
    """Immutable description of one widget type in one dialect."""

    model_config = ConfigDict(frozen=True)

    type_name: str
    default_properties: Dict[str, Any] = Field(default_factory=dict)
    emission_keys: Dict[str, str] = Field(default_factory=dict, description="Overrides of the key transform")
    constructor: Optional[str] = Field(default=None, description="Constructor identifier (table/positional)")
    parameters: Optional[Tuple[str, ...]] = Field(default=None, description="Positional order")

    def defaults(self) -> Dict[str, Any]:
        """Fresh copy of the default property table."""
        return copy.deepcopy(self.default_properties)

    @property
    def parameter_order(self) -> Tuple[str, ...]:
        if self.parameters is not None:
            return self.parameters
        return tuple(self.default_properties)


def setter_name(key: str) -> str:
    """``text`` -> ``setText``"""
    return "set" + key[:1].upper() + key[1:]


def identity(key: str) -> str:
    return key


def lower_first(name: str) -> str:
    return name[:1].lower() + name[1:]


class TypeRegistry:
    """
    Descriptor set for one dialect.

    Emission keys not overridden on a descriptor use the dialect's key
    transform; the reverse mapping strips the transform's prefix.
    """

    def __init__(
        self,
        dialect: Dialect,
        descriptors: Iterable[WidgetTypeDescriptor],
        key_transform: Callable[[str], str] = identity,
        reverse_prefix: str = "",
    ) -> None:
        self.dialect = dialect
        self.key_transform = key_transform
        self.reverse_prefix = reverse_prefix
        self._descriptors: Dict[str, WidgetTypeDescriptor] = {}
        self._constructors: Dict[str, str] = {}

        for descriptor in descriptors:
            self._descriptors[descriptor.type_name] = descriptor
            self._constructors[self.constructor_for(descriptor.type_name)] = descriptor.type_name

        logger.debug("registry_built", dialect=dialect.value, types=len(self._descriptors))

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._descriptors

    def __len__(self) -> int:
        return len(self._descriptors)

    @property
    def type_names(self) -> List[str]:
        return list(self._descriptors)

    def get(self, type_name: str) -> Optional[WidgetTypeDescriptor]:
        return self._descriptors.get(type_name)

    def require(self, type_name: str) -> WidgetTypeDescriptor:
        """Descriptor for a type name, or UnknownWidgetType."""
        descriptor = self._descriptors.get(type_name)
        if descriptor is None:
            raise UnknownWidgetType(type_name, self.dialect.value)
        return descriptor

    def constructor_for(self, type_name: str) -> str:
        """Constructor identifier, e.g. ``CheckBox`` -> ``checkBox``."""
        descriptor = self.require(type_name)
        return descriptor.constructor or lower_first(type_name)

    def type_for_constructor(self, constructor: str) -> str:
        """Inverse of constructor_for; raises UnknownWidgetType."""
        type_name = self._constructors.get(constructor)
        if type_name is None:
            raise UnknownWidgetType(constructor, self.dialect.value)
        return type_name

    def emission_key(self, type_name: str, key: str) -> str:
        descriptor = self.require(type_name)
        return descriptor.emission_keys.get(key) or self.key_transform(key)

    def property_key(self, type_name: str, emitted: str) -> Optional[str]:
        """
        Map an emitted setter/field name back to a property key.

        Returns None when the name is neither an override nor carries the
        dialect's prefix (e.g. an event binding like ``onClick``).
        """
        descriptor = self.require(type_name)
        for key, name in descriptor.emission_keys.items():
            if name == emitted:
                return key
        if self.reverse_prefix:
            if not emitted.startswith(self.reverse_prefix) or len(emitted) == len(self.reverse_prefix):
                return None
            emitted = emitted[len(self.reverse_prefix):]
        return lower_first(emitted)
