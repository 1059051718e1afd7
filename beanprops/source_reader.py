"""Read method signatures from Python source without importing it."""

from __future__ import annotations

import ast
import logging
from pathlib import Path
from typing import Any, Optional

from beanprops.signatures import MethodSignature, resolve_annotation

logger = logging.getLogger(__name__)

# Decorators that make a function something other than an instance method
_NON_METHOD_DECORATORS = {
    "staticmethod",
    "classmethod",
    "property",
    "cached_property",
    "functools.cached_property",
}
_PROPERTY_ACCESSOR_SUFFIXES = (".setter", ".getter", ".deleter")


class SourceReadError(Exception):
    """Error reading a class from Python source."""

    def __init__(
        self,
        message: str,
        file: Optional[str] = None,
        error_type: str = "source_invalid",
    ):
        super().__init__(message)
        self.message = message
        self.file = file
        self.error_type = error_type

    def to_json(self) -> dict[str, Any]:
        """Serialize error to JSON format for machine parsing."""
        result: dict[str, Any] = {
            "error": self.error_type,
            "message": self.message,
        }
        if self.file:
            result["file"] = self.file
        return result

    def __str__(self) -> str:
        if self.file:
            return f"{self.message} | file: {self.file}"
        return self.message


def _get_dotted_name(node: ast.expr) -> str:
    """Extract a dotted name from a Name/Attribute/Call/Subscript node."""
    if isinstance(node, ast.Name):
        return node.id
    elif isinstance(node, ast.Attribute):
        parts = []
        current = node
        while isinstance(current, ast.Attribute):
            parts.append(current.attr)
            current = current.value
        if isinstance(current, ast.Name):
            parts.append(current.id)
        return ".".join(reversed(parts))
    elif isinstance(node, ast.Call):
        return _get_dotted_name(node.func)
    elif isinstance(node, ast.Subscript):
        return _get_dotted_name(node.value)
    return ""


def _is_instance_method(node: ast.FunctionDef | ast.AsyncFunctionDef) -> bool:
    """Check that no decorator turns the function into a non-method."""
    for decorator in node.decorator_list:
        name = _get_dotted_name(decorator)
        if name in _NON_METHOD_DECORATORS or name.endswith(_PROPERTY_ACCESSOR_SUFFIXES):
            return False
    return True


def _annotation_type(annotation: Optional[ast.expr]) -> Any:
    """Resolve an annotation node to a type identity."""
    if annotation is None:
        return None
    # Quoted forward references: "Order" -> Order
    if isinstance(annotation, ast.Constant) and isinstance(annotation.value, str):
        return resolve_annotation(annotation.value)
    return resolve_annotation(ast.unparse(annotation))


def _signature_from_node(node: ast.FunctionDef | ast.AsyncFunctionDef) -> MethodSignature:
    """Build a MethodSignature from a function definition in a class body."""
    args = node.args
    positional = list(args.posonlyargs) + list(args.args)
    parameters = positional[1:]
    if args.vararg:
        parameters.append(args.vararg)
    parameters.extend(args.kwonlyargs)
    if args.kwarg:
        parameters.append(args.kwarg)

    return MethodSignature(
        name=node.name,
        return_type=_annotation_type(node.returns),
        parameter_types=tuple(_annotation_type(p.annotation) for p in parameters),
    )


def _collect_methods(
    class_node: ast.ClassDef,
    classes: dict[str, ast.ClassDef],
    seen: set[str],
    visited: set[str],
    signatures: list[MethodSignature],
) -> None:
    """Collect methods from a class and its same-module bases, depth first."""
    if class_node.name in visited:
        return
    visited.add(class_node.name)

    for stmt in class_node.body:
        if not isinstance(stmt, (ast.FunctionDef, ast.AsyncFunctionDef)):
            continue
        if stmt.name in seen:
            continue
        seen.add(stmt.name)
        if stmt.name.startswith("_") or not _is_instance_method(stmt):
            continue
        signatures.append(_signature_from_node(stmt))

    for base in class_node.bases:
        base_node = classes.get(_get_dotted_name(base))
        if base_node is None:
            # Bases from other modules are not followed
            continue
        _collect_methods(base_node, classes, seen, visited, signatures)


def signatures_from_source(
    source: str,
    class_name: str,
    filename: str = "<source>",
) -> list[MethodSignature]:
    """Enumerate the public instance methods of a class defined in source.

    Methods of the class come first in source order, followed by methods
    inherited from base classes defined in the same module. A name defined
    closer to the class hides the same name in its bases.

    Args:
        source: Python source text.
        class_name: Name of a top-level class in the source.
        filename: File name used in error messages.

    Returns:
        Signatures in discovery order.

    Raises:
        SourceReadError: If the source cannot be parsed or the class is missing.
    """
    try:
        tree = ast.parse(source, filename=filename)
    except SyntaxError as e:
        raise SourceReadError(
            f"Cannot parse source: {e.msg} (line {e.lineno})",
            file=filename,
            error_type="source_invalid",
        )

    classes = {node.name: node for node in tree.body if isinstance(node, ast.ClassDef)}
    class_node = classes.get(class_name)
    if class_node is None:
        raise SourceReadError(
            f"Class '{class_name}' not found",
            file=filename,
            error_type="class_not_found",
        )

    signatures: list[MethodSignature] = []
    _collect_methods(class_node, classes, set(), set(), signatures)
    logger.debug(f"Read {len(signatures)} methods from {class_name} in {filename}")
    return signatures


def read_class_signatures(file_path: Path | str, class_name: str) -> list[MethodSignature]:
    """Enumerate the public instance methods of a class in a Python file.

    Raises:
        SourceReadError: If the file cannot be read or parsed, or the class is missing.
    """
    file_path = Path(file_path)
    try:
        content = file_path.read_text(encoding="utf-8")
    except (IOError, OSError, UnicodeDecodeError) as e:
        raise SourceReadError(
            f"Cannot read file: {e}",
            file=str(file_path),
            error_type="file_unreadable",
        )
    return signatures_from_source(content, class_name, filename=str(file_path))
