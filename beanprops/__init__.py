"""Bean-style property introspection.

Derives properties from ``getX``/``isX``/``setX`` methods:

- Method classification into per-property candidates
- Getter/setter conflict resolution
- Property descriptor assembly for live classes and Python source
- Naming convention conversions (camelCase, hyphenated, underscored)
"""

from beanprops.config import ConfigError, IntrospectionConfig, get_default_config, load_config
from beanprops.introspector import (
    BeanInfo,
    PropertyDescriptor,
    get_bean_info,
    get_source_bean_info,
    introspect_properties,
)
from beanprops.signatures import VOID, MethodSignature, signatures_from_class
from beanprops.source_reader import SourceReadError, read_class_signatures, signatures_from_source

__version__ = "0.1.0"

__all__ = [
    "BeanInfo",
    "ConfigError",
    "IntrospectionConfig",
    "MethodSignature",
    "PropertyDescriptor",
    "SourceReadError",
    "VOID",
    "get_bean_info",
    "get_default_config",
    "get_source_bean_info",
    "introspect_properties",
    "load_config",
    "read_class_signatures",
    "signatures_from_class",
    "signatures_from_source",
]
