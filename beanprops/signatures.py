"""Method signatures consumed by property introspection.

A signature carries a method name, a declared return type and the declared
parameter types. Types are plain Python objects compared with ``==``: real
classes when a live class is introspected, builtin classes or annotation
text when signatures are read from source.

Two markers matter to the introspection rules:

- ``VOID`` (``NoneType``) is a declared ``-> None`` return.
- ``None`` means the type was not declared at all.
"""

from __future__ import annotations

import builtins
import inspect
import logging
import typing
from dataclasses import dataclass
from typing import Any, Optional

logger = logging.getLogger(__name__)

VOID = type(None)
BOOLEAN = bool
INDEX = int


@dataclass(frozen=True)
class MethodSignature:
    """Name, return type and parameter types of one public method."""

    name: str
    return_type: Any = None
    parameter_types: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameter_types", tuple(self.parameter_types))

    @property
    def parameter_count(self) -> int:
        return len(self.parameter_types)

    @property
    def is_void(self) -> bool:
        return self.return_type is VOID

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-friendly dict."""
        return {
            "name": self.name,
            "return_type": format_type(self.return_type),
            "parameter_types": [format_type(t) for t in self.parameter_types],
        }


def resolve_annotation(annotation: Any) -> Any:
    """Turn an annotation into the type identity used by introspection.

    Args:
        annotation: A class, typing construct, annotation string, ``None``,
            or ``inspect.Parameter.empty`` for a missing annotation.

    Returns:
        None for a missing annotation, VOID for ``None``/``"None"``, the
        builtin class for builtin names such as ``"int"``, the stripped text
        for any other string, and the annotation itself otherwise.
    """
    if annotation is inspect.Parameter.empty:
        return None
    if annotation is None or annotation is VOID:
        return VOID
    if isinstance(annotation, str):
        text = annotation.strip()
        if text == "None":
            return VOID
        candidate = getattr(builtins, text, None)
        if isinstance(candidate, type):
            return candidate
        return text
    return annotation


def format_type(type_identity: Any) -> Optional[str]:
    """Render a type identity for display or JSON output."""
    if type_identity is None:
        return None
    if type_identity is VOID:
        return "None"
    if isinstance(type_identity, str):
        return type_identity
    if isinstance(type_identity, type):
        if type_identity.__module__ == "builtins":
            return type_identity.__qualname__
        return f"{type_identity.__module__}.{type_identity.__qualname__}"
    return str(type_identity)


def _get_hints(func: Any) -> dict[str, Any]:
    """Evaluate a function's annotations, falling back to the raw ones."""
    try:
        return typing.get_type_hints(func)
    except (NameError, TypeError) as e:
        logger.debug(f"Unresolvable annotations on {func.__qualname__}: {e}")
        return dict(getattr(func, "__annotations__", {}))


def _declares_none(annotation: Any) -> bool:
    """Check whether an annotation as written admits None."""
    if isinstance(annotation, str):
        return "None" in annotation or "Optional" in annotation
    return annotation is None or VOID in typing.get_args(annotation)


def _parameter_hint(func: Any, hints: dict[str, Any], parameter: inspect.Parameter) -> Any:
    """Get a parameter's evaluated annotation as it was written.

    Before Python 3.11, ``typing.get_type_hints`` widens ``x: str = None``
    to ``Optional[str]``. That widening is undone so the declared type
    still matches the getter's return type.
    """
    hint = hints.get(parameter.name, inspect.Parameter.empty)
    if parameter.default is not None or VOID not in typing.get_args(hint):
        return hint
    raw = getattr(func, "__annotations__", {}).get(parameter.name, inspect.Parameter.empty)
    if raw is inspect.Parameter.empty or _declares_none(raw):
        return hint
    args = tuple(arg for arg in typing.get_args(hint) if arg is not VOID)
    return args[0] if len(args) == 1 else typing.Union[args]


def signature_of(func: Any) -> MethodSignature:
    """Build a MethodSignature for a function defined in a class body.

    The first (bound) parameter is dropped; every other parameter counts,
    including ``*args`` and ``**kwargs``.
    """
    hints = _get_hints(func)
    parameters = list(inspect.signature(func).parameters.values())[1:]
    return MethodSignature(
        name=func.__name__,
        return_type=resolve_annotation(hints.get("return", inspect.Signature.empty)),
        parameter_types=tuple(
            resolve_annotation(_parameter_hint(func, hints, p)) for p in parameters
        ),
    )


def signatures_from_class(cls: type) -> list[MethodSignature]:
    """Enumerate the public instance methods of a class.

    Classes are visited in MRO order (``object`` excluded) and each class's
    attributes in definition order. A name defined in a more-derived class
    hides the same name further up the MRO, whatever it is bound to.
    Static methods, class methods and properties are not instance methods
    and are skipped.

    Args:
        cls: The class to enumerate.

    Returns:
        Signatures in discovery order.
    """
    seen: set[str] = set()
    signatures: list[MethodSignature] = []

    for klass in cls.__mro__:
        if klass is object:
            continue
        for name, attr in vars(klass).items():
            if name.startswith("_") or name in seen:
                continue
            seen.add(name)
            if not inspect.isfunction(attr):
                continue
            signatures.append(signature_of(attr))

    return signatures
