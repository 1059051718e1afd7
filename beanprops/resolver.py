"""Conflict resolution for property candidate buckets.

A bucket may hold several getter and setter candidates for the same
property name: overloads, or both ``getX`` and ``isX`` accessors. The rules
below pick at most one of each.

1. Getter: the first zero-parameter candidate, unless an ``is`` candidate
   follows, in which case the last ``is`` candidate wins.
2. Setter, when a getter was chosen: the first candidate whose parameter
   type equals the getter's return type. No match leaves the property
   read-only.
3. Setter, when no getter was chosen: the last single-parameter candidate.
4. Type: the getter's return type, else the setter's parameter type.

A bucket that yields neither a getter nor a setter is invalid.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from beanprops.classifier import PREFIX_IS, PropertyCandidateBucket
from beanprops.signatures import MethodSignature


@dataclass(frozen=True)
class ResolvedProperty:
    """Outcome of resolving one bucket."""

    valid: bool
    getter: Optional[MethodSignature] = None
    setter: Optional[MethodSignature] = None
    property_type: Any = None


INVALID = ResolvedProperty(valid=False)


def choose_getter(candidates: list[MethodSignature]) -> Optional[MethodSignature]:
    """Pick the canonical getter among getter candidates."""
    chosen = None
    for candidate in candidates:
        if candidate.parameter_count != 0:
            continue
        if chosen is None or candidate.name.startswith(PREFIX_IS):
            chosen = candidate
    return chosen


def choose_setter(
    candidates: list[MethodSignature], getter: Optional[MethodSignature]
) -> Optional[MethodSignature]:
    """Pick the canonical setter, pairing it with the getter if there is one."""
    if getter is not None:
        for candidate in candidates:
            if candidate.parameter_count == 1 and candidate.parameter_types[0] == getter.return_type:
                return candidate
        return None

    chosen = None
    for candidate in candidates:
        if candidate.parameter_count == 1:
            chosen = candidate
    return chosen


def resolve_bucket(bucket: PropertyCandidateBucket) -> ResolvedProperty:
    """Resolve a bucket to a single getter/setter pair.

    Args:
        bucket: Candidates collected by the classifier.

    Returns:
        ResolvedProperty; ``INVALID`` when nothing could be chosen.
    """
    getter = choose_getter(bucket.getters)
    setter = choose_setter(bucket.setters, getter)

    if getter is not None:
        property_type = getter.return_type
    elif setter is not None:
        property_type = setter.parameter_types[0]
    else:
        return INVALID

    return ResolvedProperty(
        valid=True,
        getter=getter,
        setter=setter,
        property_type=property_type,
    )
