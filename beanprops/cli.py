"""Command-line interface for bean property introspection."""

from __future__ import annotations

import argparse
import importlib
import json
import logging
import sys
from enum import IntEnum
from pathlib import Path
from typing import Callable, Optional

from beanprops.config import (
    load_config,
    ConfigError,
    IntrospectionConfig,
    DEFAULT_CONFIG_PATH,
)
from beanprops.introspector import BeanInfo, get_bean_info, get_source_bean_info
from beanprops.naming import (
    capitalize,
    decapitalize,
    dehyphenate,
    get_package_name,
    get_property_name_for_setter,
    get_simple_name,
    hyphenate,
    underscore_separate,
)
from beanprops.signatures import format_type
from beanprops.source_reader import SourceReadError


class ExitCode(IntEnum):
    """Process exit codes."""

    SUCCESS = 0
    CONFIG_ERROR = 1
    TARGET_ERROR = 2


NAME_OPERATIONS: dict[str, Callable[[str], str]] = {
    "decapitalize": decapitalize,
    "capitalize": capitalize,
    "hyphenate": hyphenate,
    "hyphenate-preserve": lambda value: hyphenate(value, lower_case=False),
    "dehyphenate": dehyphenate,
    "underscore": underscore_separate,
    "package": get_package_name,
    "simple": get_simple_name,
    "setter-property": get_property_name_for_setter,
}


def _get_config(config_path: Optional[str]) -> IntrospectionConfig:
    """Load config from path, ./beanprops.yaml, or use defaults."""
    if config_path:
        return load_config(config_path)
    return load_config(Path.cwd() / DEFAULT_CONFIG_PATH)


def _import_class(module_name: str, class_path: str) -> type:
    """Import a module and resolve a (possibly nested) class in it."""
    try:
        target = importlib.import_module(module_name)
    except Exception as e:
        # Module-level code can raise anything while importing
        raise SourceReadError(
            f"Cannot import module '{module_name}': {e}",
            error_type="target_not_found",
        )

    for part in class_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError:
            raise SourceReadError(
                f"Class '{class_path}' not found in module '{module_name}'",
                error_type="class_not_found",
            )

    if not isinstance(target, type):
        raise SourceReadError(
            f"'{module_name}:{class_path}' is not a class",
            error_type="class_not_found",
        )
    return target


def _load_bean_info(target: str, config: IntrospectionConfig) -> BeanInfo:
    """Introspect a ``file.py:Class`` or ``package.module:Class`` target."""
    location, sep, class_name = target.rpartition(":")
    if not sep or not location or not class_name:
        raise SourceReadError(
            f"Target must be <file.py>:<Class> or <module>:<Class>, got '{target}'",
            error_type="target_invalid",
        )

    if location.endswith(".py") or Path(location).is_file():
        return get_source_bean_info(location, class_name, config)

    return get_bean_info(_import_class(location, class_name), config)


def _access_mode(readable: bool, writable: bool) -> str:
    if readable and writable:
        return "rw"
    return "r" if readable else "w"


def cmd_inspect(args: argparse.Namespace) -> int:
    """Print the properties of a class."""
    try:
        config = _get_config(args.config)
    except ConfigError as e:
        print(json.dumps(e.to_json()), file=sys.stderr)
        return ExitCode.CONFIG_ERROR

    try:
        info = _load_bean_info(args.target, config)
    except SourceReadError as e:
        print(json.dumps(e.to_json()), file=sys.stderr)
        return ExitCode.TARGET_ERROR

    if args.json:
        print(json.dumps(info.to_dict(), indent=2))
        return ExitCode.SUCCESS

    bean = info.to_dict()["bean"]
    print(f"{bean}: {len(info.property_descriptors)} properties")
    for p in info.property_descriptors:
        mode = _access_mode(p.is_readable, p.is_writable)
        print(f"  {p.name}: {format_type(p.property_type)} [{mode}]")

    return ExitCode.SUCCESS


def cmd_name(args: argparse.Namespace) -> int:
    """Apply a name-form conversion."""
    try:
        result = NAME_OPERATIONS[args.operation](args.value)
    except ValueError as e:
        print(json.dumps({"error": "value_invalid", "message": str(e)}), file=sys.stderr)
        return ExitCode.TARGET_ERROR

    print(result)
    return ExitCode.SUCCESS


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="beanprops",
        description="Derive bean-style properties from get/set/is methods",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log skipped methods and dropped properties",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # inspect command
    inspect_parser = subparsers.add_parser(
        "inspect",
        help="List the properties of a class",
    )
    inspect_parser.add_argument(
        "target",
        help="path/to/file.py:ClassName (read from source) or package.module:ClassName (imported)",
    )
    inspect_parser.add_argument(
        "--config",
        "-c",
        help=f"Path to config file (default: {DEFAULT_CONFIG_PATH})",
    )
    inspect_parser.add_argument("--json", action="store_true", help="Output JSON")

    # name command
    name_parser = subparsers.add_parser(
        "name",
        help="Convert a name between naming conventions",
    )
    name_parser.add_argument("operation", choices=sorted(NAME_OPERATIONS))
    name_parser.add_argument("value")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    commands = {
        "inspect": cmd_inspect,
        "name": cmd_name,
    }

    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
