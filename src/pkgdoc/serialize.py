# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Plain-data views of the documentation model."""

from dataclasses import asdict
from typing import Any

from pkgdoc.model import ConstantBlock, Function, Method, Package, Type, VariableBlock


def package_to_dict(package: Package, width: int = 0) -> dict[str, Any]:
    """Convert a package into JSON-ready data.

    Args:
        package: Assembled package.
        width: Column width applied to documentation text; ``0`` keeps it raw.

    Returns:
        Nested dictionaries and lists mirroring the model.
    """
    return {
        "name": package.name,
        "import_path": package.import_path,
        "comments": package.comments(width),
        "files": list(package.files),
        "test_files": list(package.test_files),
        "subdirectories": list(package.subdirectories),
        "imports": list(package.imports),
        "test_imports": list(package.test_imports),
        "constant_blocks": [
            _constant_block(block, width) for block in package.constant_blocks
        ],
        "variable_blocks": [
            _variable_block(block, width) for block in package.variable_blocks
        ],
        "functions": [_function(function, width) for function in package.functions],
        "types": [_type(type_, width) for type_ in package.types],
    }


def _constant_block(block: ConstantBlock, width: int) -> dict[str, Any]:
    return {
        "type": block.type_name,
        "comments": block.comments(width),
        "source": block.source,
        "constants": [constant.name for constant in block.constants],
    }


def _variable_block(block: VariableBlock, width: int) -> dict[str, Any]:
    return {
        "type": block.type_name,
        "comments": block.comments(width),
        "source": block.source,
        "variables": [variable.name for variable in block.variables],
        "errors": [error.name for error in block.errors],
    }


def _function(function: Function, width: int) -> dict[str, Any]:
    return {
        "name": function.name,
        "comments": function.comments(width),
        "source": function.source,
        "inputs": [asdict(parameter) for parameter in function.inputs],
        "outputs": [asdict(parameter) for parameter in function.outputs],
    }


def _method(method: Method, width: int) -> dict[str, Any]:
    return {
        "name": method.name,
        "comments": method.comments(width),
        "source": method.source,
        "receiver": asdict(method.receiver),
        "pointer_receiver": method.pointer_receiver,
        "inputs": [asdict(parameter) for parameter in method.inputs],
        "outputs": [asdict(parameter) for parameter in method.outputs],
    }


def _type(type_: Type, width: int) -> dict[str, Any]:
    return {
        "name": type_.name,
        "type": type_.underlying,
        "comments": type_.comments(width),
        "source": type_.source,
        "functions": [_function(function, width) for function in type_.functions],
        "methods": [_method(method, width) for method in type_.methods],
    }
