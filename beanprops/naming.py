"""Naming convention utilities for property and class names."""

from __future__ import annotations

from typing import Optional


def decapitalize(name: Optional[str]) -> Optional[str]:
    """Convert a capitalized name to its property form.

    The first character is lower-cased unless the second character is also
    upper case, in which case the name is returned unchanged ("URL" stays
    "URL", "Name" becomes "name").

    Args:
        name: The name to decapitalize. None is passed through.

    Returns:
        The decapitalized name, or None if name was None.
    """
    if name is None:
        return None
    if not name or (len(name) > 1 and name[1].isupper()):
        return name
    return name[0].lower() + name[1:]


def capitalize(name: str) -> str:
    """Convert a property name to its capitalized (class name) form.

    Names like "pNAME" are returned unchanged so that the accessor
    "getpNAME" still maps back to the same property.

    Args:
        name: A non-empty property name.

    Returns:
        The capitalized name.

    Raises:
        ValueError: If name is empty.
    """
    if not name:
        raise ValueError("Cannot capitalize an empty name")

    rest = name[1:]
    if name[0].islower() and rest and rest[0].isupper():
        return name
    return name[0].upper() + rest


def trim_suffix(string: str, *suffixes: str) -> str:
    """Remove the first of the given suffixes that the string ends with."""
    for suffix in suffixes:
        if string.endswith(suffix):
            return string[: len(string) - len(suffix)]
    return string


def decapitalize_without_suffix(name: str, *suffixes: str) -> str:
    """Decapitalize a class name and strip a role suffix.

    Example: ``decapitalize_without_suffix("BookController", "Controller")``
    returns ``"book"``.
    """
    return trim_suffix(decapitalize(name), *suffixes)


def _separate_lower_case(name: str, separator: str) -> str:
    out = []
    previous = ""
    at_start = True
    for char in name:
        if char.islower() or not char.isalpha():
            at_start = False
            out.append(char)
        elif at_start:
            at_start = False
            out.append(char.lower())
        elif previous.isupper() or previous == ".":
            out.append(char.lower())
        else:
            out.append(separator + char.lower())
        previous = char
    return "".join(out)


def _separate_preserving_case(name: str, separator: str) -> str:
    out = []
    previous = ""
    segment_start = True
    for char in name:
        if segment_start:
            segment_start = False
            out.append(char)
        elif char.isupper() and not previous.isupper():
            out.append(separator + char)
        else:
            # A '.' starts a new segment; its next character is never split.
            if char == ".":
                segment_start = True
            out.append(char)
        previous = char
    return "".join(out)


def _separate_camel_case(name: str, lower_case: bool, separator: str) -> str:
    if lower_case:
        return _separate_lower_case(name, separator)
    return _separate_preserving_case(name, separator)


def hyphenate(name: str, lower_case: bool = True) -> str:
    """Convert a camel case name to hyphenated form.

    Args:
        name: The camel case name.
        lower_case: Lower-case the result (default). When False the original
            case is kept and a hyphen is inserted before each upper-case
            character that does not follow another upper-case character.

    Returns:
        The hyphenated name, e.g. "fooBar" -> "foo-bar".
    """
    return _separate_camel_case(name, lower_case, "-")


def underscore_separate(name: str, lower_case: bool = True) -> str:
    """Convert a camel case name to underscore separated form.

    Uses the same boundary rules as :func:`hyphenate`.
    """
    return _separate_camel_case(name, lower_case, "_")


def dehyphenate(name: str) -> str:
    """Convert a hyphenated name to camel case form.

    Each segment that starts with a letter has that letter upper-cased; the
    rest of the segment is left alone. This is not an inverse of
    :func:`hyphenate`: "foo-bar" becomes "FooBar", not "fooBar".
    """
    segments = []
    for segment in name.split("-"):
        if segment and segment[0].isalpha():
            segment = segment[0].upper() + segment[1:]
        segments.append(segment)
    return "".join(segments)


def get_package_name(qualified_name: str) -> str:
    """Return everything before the last '.', or "" for an unqualified name."""
    package, dot, _ = qualified_name.rpartition(".")
    return package if dot else ""


def get_simple_name(qualified_name: str) -> str:
    """Return everything after the last '.'."""
    return qualified_name.rpartition(".")[2]


def is_setter_name(method_name: str) -> bool:
    """Check if a method name is a setter name like "setName"."""
    return len(method_name) > 3 and method_name.startswith("set") and method_name[3].isupper()


def get_property_name_for_setter(setter_name: str) -> str:
    """Return the property name for a setter, or the name itself if it is not one.

    Args:
        setter_name: A method name such as "setName".

    Returns:
        The property name ("name"), or setter_name unchanged.
    """
    if is_setter_name(setter_name):
        return decapitalize(setter_name[3:])
    return setter_name
