"""Method classification into per-property getter and setter candidates."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from beanprops.config import ALWAYS_RESERVED_NAMES, DEFAULT_RESERVED_NAMES
from beanprops.naming import decapitalize
from beanprops.signatures import BOOLEAN, INDEX, MethodSignature

logger = logging.getLogger(__name__)

PREFIX_GET = "get"
PREFIX_IS = "is"
PREFIX_SET = "set"


@dataclass
class PropertyCandidateBucket:
    """Candidate accessors and mutators collected for one property name."""

    name: str
    getters: list[MethodSignature] = field(default_factory=list)
    setters: list[MethodSignature] = field(default_factory=list)


def _is_valid_property(property_name: str, reserved_names: frozenset[str]) -> bool:
    """Check that a derived property name is non-empty and not reserved."""
    return (
        bool(property_name)
        and property_name not in ALWAYS_RESERVED_NAMES
        and property_name not in reserved_names
    )


def _get_bucket(
    buckets: dict[str, PropertyCandidateBucket], property_name: str
) -> PropertyCandidateBucket:
    """Get the bucket for a property, creating it on first use."""
    bucket = buckets.get(property_name)
    if bucket is None:
        bucket = PropertyCandidateBucket(name=property_name)
        buckets[property_name] = bucket
    return bucket


def _classify_accessor(
    method: MethodSignature,
    buckets: dict[str, PropertyCandidateBucket],
    reserved_names: frozenset[str],
) -> None:
    """Record a method as a getter candidate if it looks like one."""
    name = method.name
    if name.startswith(PREFIX_GET):
        prefix = PREFIX_GET
    elif name.startswith(PREFIX_IS):
        prefix = PREFIX_IS
    else:
        return

    property_name = decapitalize(name[len(prefix):])
    if not _is_valid_property(property_name, reserved_names):
        logger.debug(f"Skipping accessor {name}: invalid property name {property_name!r}")
        return

    if method.return_type is None or method.is_void:
        logger.debug(f"Skipping accessor {name}: no return type")
        return

    if prefix == PREFIX_IS and method.return_type is not BOOLEAN:
        logger.debug(f"Skipping accessor {name}: 'is' accessor must return bool")
        return

    # Indexed getters get(int) are collected but never chosen
    if method.parameter_count > 1 or (
        method.parameter_count == 1 and method.parameter_types[0] is not INDEX
    ):
        logger.debug(f"Skipping accessor {name}: takes {method.parameter_count} parameters")
        return

    _get_bucket(buckets, property_name).getters.append(method)


def _classify_mutator(
    method: MethodSignature,
    buckets: dict[str, PropertyCandidateBucket],
    reserved_names: frozenset[str],
) -> None:
    """Record a method as a setter candidate if it looks like one."""
    name = method.name
    if not method.is_void or not name.startswith(PREFIX_SET):
        return

    property_name = decapitalize(name[len(PREFIX_SET):])
    if not _is_valid_property(property_name, reserved_names):
        logger.debug(f"Skipping mutator {name}: invalid property name {property_name!r}")
        return

    if method.parameter_count != 1:
        logger.debug(f"Skipping mutator {name}: takes {method.parameter_count} parameters")
        return

    _get_bucket(buckets, property_name).setters.append(method)


def classify_methods(
    methods: Iterable[MethodSignature],
    reserved_names: frozenset[str] = DEFAULT_RESERVED_NAMES,
) -> dict[str, PropertyCandidateBucket]:
    """Sort methods into getter and setter candidates per property name.

    Every method is checked as an accessor and then as a mutator. Methods
    that fit neither role are dropped silently. Buckets are keyed in the
    order their property name was first seen and candidates keep input
    order.

    Args:
        methods: Method signatures in enumeration order.
        reserved_names: Property names that are never collected, in
            addition to "class", which is always reserved.

    Returns:
        Mapping of property name to its candidate bucket.
    """
    buckets: dict[str, PropertyCandidateBucket] = {}

    for method in methods:
        if not method.name:
            logger.debug("Skipping method without a name")
            continue
        _classify_accessor(method, buckets, reserved_names)
        _classify_mutator(method, buckets, reserved_names)

    return buckets
