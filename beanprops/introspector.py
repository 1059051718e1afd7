"""Bean property introspection.

Turns a list of method signatures into property descriptors: classify the
methods into per-property candidates, resolve each property's getter and
setter, and keep the properties that resolved.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from beanprops.classifier import classify_methods
from beanprops.config import IntrospectionConfig, get_default_config
from beanprops.resolver import resolve_bucket
from beanprops.signatures import MethodSignature, format_type, signatures_from_class
from beanprops.source_reader import read_class_signatures

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PropertyDescriptor:
    """A resolved property: its name, accessor, mutator and type."""

    name: str
    read_method: Optional[MethodSignature]
    write_method: Optional[MethodSignature]
    property_type: Any

    @property
    def is_readable(self) -> bool:
        return self.read_method is not None

    @property
    def is_writable(self) -> bool:
        return self.write_method is not None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-friendly dict."""
        return {
            "name": self.name,
            "type": format_type(self.property_type),
            "read_method": self.read_method.name if self.read_method else None,
            "write_method": self.write_method.name if self.write_method else None,
        }


@dataclass(frozen=True)
class BeanInfo:
    """Properties of one bean type."""

    bean_type: Any
    property_descriptors: tuple[PropertyDescriptor, ...]

    def property_names(self) -> list[str]:
        return [p.name for p in self.property_descriptors]

    def get_property(self, name: str) -> Optional[PropertyDescriptor]:
        """Look up a descriptor by property name."""
        for descriptor in self.property_descriptors:
            if descriptor.name == name:
                return descriptor
        return None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-friendly dict."""
        bean = self.bean_type if isinstance(self.bean_type, str) else format_type(self.bean_type)
        return {
            "bean": bean,
            "property_count": len(self.property_descriptors),
            "properties": [p.to_dict() for p in self.property_descriptors],
        }


def introspect_properties(
    methods: Iterable[MethodSignature],
    config: Optional[IntrospectionConfig] = None,
) -> tuple[PropertyDescriptor, ...]:
    """Derive property descriptors from method signatures.

    Properties appear in the order their name was first seen among the
    methods. Properties that cannot be resolved to a getter or setter are
    left out.

    Args:
        methods: Method signatures in enumeration order.
        config: Introspection configuration. Defaults to get_default_config().

    Returns:
        Tuple of PropertyDescriptor, one per resolved property name.
    """
    config = config or get_default_config()
    buckets = classify_methods(methods, config.reserved_names)

    descriptors = []
    for name, bucket in buckets.items():
        resolved = resolve_bucket(bucket)
        if not resolved.valid:
            logger.debug(f"Dropping property {name}: no usable getter or setter")
            continue
        descriptors.append(
            PropertyDescriptor(
                name=name,
                read_method=resolved.getter,
                write_method=resolved.setter,
                property_type=resolved.property_type,
            )
        )

    return tuple(descriptors)


def get_bean_info(cls: type, config: Optional[IntrospectionConfig] = None) -> BeanInfo:
    """Introspect the properties of a live class.

    Args:
        cls: The bean class.
        config: Introspection configuration.

    Returns:
        A new BeanInfo for the class.
    """
    return BeanInfo(
        bean_type=cls,
        property_descriptors=introspect_properties(signatures_from_class(cls), config),
    )


def get_source_bean_info(
    file_path: Path | str,
    class_name: str,
    config: Optional[IntrospectionConfig] = None,
) -> BeanInfo:
    """Introspect the properties of a class defined in a Python file.

    Raises:
        SourceReadError: If the file or class cannot be read.
    """
    signatures = read_class_signatures(file_path, class_name)
    return BeanInfo(
        bean_type=class_name,
        property_descriptors=introspect_properties(signatures, config),
    )
