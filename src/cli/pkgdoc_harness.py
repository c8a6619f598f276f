# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""CLI harness for package documentation model assembly."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler
from rich.style import Style
from rich.table import Table
from rich.text import Text

from pkgdoc.assembler import load_package
from pkgdoc.config import DEFAULT_COMMENT_WIDTH, DEFAULT_TEST_SUFFIX, AssemblyConfig
from pkgdoc.frontend import FrontEndError
from pkgdoc.model import Function, Package, Parameter
from pkgdoc.serialize import package_to_dict

logger = logging.getLogger(__name__)

TABLE_COLUMN_RATIOS: dict[str, int] = {
    "kind": 1,
    "name": 2,
    "type": 2,
    "members": 3,
    "signature": 5,
}


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application logging with Rich handler.

    Args:
        level: Logging severity threshold.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(prog="pkgdoc")
    subparsers = parser.add_subparsers(dest="command", required=True)
    model_build_parser = subparsers.add_parser("model-build")
    model_build_parser.add_argument(
        "--path", required=True, help="Parsed-package JSON document to assemble."
    )
    model_build_parser.add_argument(
        "--format",
        choices=("table", "json"),
        default="table",
        help="Output format.",
    )
    model_build_parser.add_argument(
        "--output",
        required=False,
        help="Optional output file path for raw JSON when --format json is used.",
    )
    model_build_parser.add_argument(
        "--width",
        type=int,
        default=DEFAULT_COMMENT_WIDTH,
        help="Column width for documentation text; 0 keeps it unformatted.",
    )
    model_build_parser.add_argument(
        "--test-suffix",
        default=DEFAULT_TEST_SUFFIX,
        help="File name suffix marking test files.",
    )
    return parser


def run(argv: list[str], stdout: TextIO, stderr: TextIO) -> int:
    """Run CLI command.

    Args:
        argv: CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit:
        logger.warning(f"Argument parsing failed (argv={argv})")
        return 2
    if args.command == "model-build":
        return _run_model_build(args=args, stdout=stdout, stderr=stderr)

    logger.warning(f"Unsupported command (command={args.command})")
    stderr.write(f"Unsupported command: {args.command}\n")
    return 2


def _run_model_build(args: argparse.Namespace, stdout: TextIO, stderr: TextIO) -> int:
    """Run model-build command.

    Args:
        args: Parsed CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code.
    """
    document_path = Path(args.path)
    if not document_path.exists():
        logger.warning(f"Path does not exist (path={document_path})")
        stderr.write(f"Path does not exist: {document_path}\n")
        return 2
    try:
        config = AssemblyConfig(test_suffix=args.test_suffix, comment_width=args.width)
    except ValueError as exc:
        logger.warning(f"Invalid assembly configuration (error={exc})")
        stderr.write(f"Invalid configuration: {exc}\n")
        return 2

    try:
        package = load_package(document_path, config=config)
    except FrontEndError as exc:
        logger.warning(f"Package load failed (path={document_path} error={exc})")
        stderr.write(f"{exc}\n")
        return 2

    if args.format == "json":
        if args.output:
            try:
                _write_json_file(
                    package=package, width=config.comment_width, output_path=Path(args.output)
                )
            except OSError as exc:
                logger.warning(
                    f"Failed to write JSON output file (output_path={args.output} error={exc})"
                )
                stderr.write(f"Failed to write JSON output file: {args.output}\n")
                return 2
        else:
            _write_json(package=package, width=config.comment_width, stdout=stdout)
    else:
        _write_table(package=package, width=config.comment_width, stdout=stdout)
    return 0


def _write_json(package: Package, width: int, stdout: TextIO) -> None:
    """Write the package model in JSON format.

    Args:
        package: Assembled package.
        width: Documentation column width.
        stdout: Standard output stream.
    """
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    console.print(
        json.dumps(package_to_dict(package, width), indent=2, sort_keys=True),
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


def _write_json_file(package: Package, width: int, output_path: Path) -> None:
    """Write raw JSON payload to an output file.

    Args:
        package: Assembled package.
        width: Documentation column width.
        output_path: Target file path.

    Raises:
        OSError: If directory creation or file writing fails.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(package_to_dict(package, width), indent=2, sort_keys=True),
        encoding="utf-8",
    )


def _write_table(package: Package, width: int, stdout: TextIO) -> None:
    """Write the package model as Rich tables.

    Args:
        package: Assembled package.
        width: Documentation column width.
        stdout: Standard output stream.
    """
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    console.rule(
        Text(f"package {package.name} ({package.import_path})"),
        style=Style(color="cyan"),
        characters="-",
    )
    overview = package.comments(width)
    if overview:
        console.print(overview, markup=False, highlight=False)

    files_table = Table(show_header=True, expand=True)
    files_table.add_column("files", overflow="fold")
    files_table.add_column("test_files", overflow="fold")
    files_table.add_column("imports", overflow="fold")
    files_table.add_column("test_imports", overflow="fold")
    files_table.add_row(
        *_cells(
            "\n".join(package.files),
            "\n".join(package.test_files),
            "\n".join(package.imports),
            "\n".join(package.test_imports),
        )
    )
    console.print(files_table)

    table = _declaration_table()
    for constant_block in package.constant_blocks:
        table.add_row(
            *_cells(
                "const",
                "",
                constant_block.type_name,
                ", ".join(constant.name for constant in constant_block.constants),
                constant_block.source,
            )
        )
    for variable_block in package.variable_blocks:
        members = ", ".join(variable.name for variable in variable_block.variables)
        errors = ", ".join(error.name for error in variable_block.errors)
        if errors:
            members = f"{members} (errors: {errors})"
        table.add_row(
            *_cells("var", "", variable_block.type_name, members, variable_block.source)
        )
    for function in package.functions:
        table.add_row(*_cells("func", function.name, "", "", _signature(function)))
    for type_ in package.types:
        table.add_row(*_cells("type", type_.name, type_.underlying, "", type_.source))
        for constructor in type_.functions:
            table.add_row(
                *_cells("func", constructor.name, type_.name, "", _signature(constructor))
            )
        for method in type_.methods:
            receiver = _format_parameters((method.receiver,))
            table.add_row(
                *_cells(
                    "method",
                    method.name,
                    type_.name,
                    f"receiver: {receiver}",
                    method.source,
                )
            )
    console.print(table)


def _cells(*values: str) -> list[Text]:
    # Declarations contain brackets that Rich would otherwise read as markup.
    return [Text(value) for value in values]


def _declaration_table() -> Table:
    table = Table(show_header=True, show_lines=True, expand=True)
    table.add_column("kind", ratio=TABLE_COLUMN_RATIOS["kind"], overflow="fold")
    table.add_column("name", ratio=TABLE_COLUMN_RATIOS["name"], overflow="fold")
    table.add_column("type", ratio=TABLE_COLUMN_RATIOS["type"], overflow="fold")
    table.add_column("members", ratio=TABLE_COLUMN_RATIOS["members"], overflow="fold")
    table.add_column(
        "signature", ratio=TABLE_COLUMN_RATIOS["signature"], overflow="fold"
    )
    return table


def _signature(function: Function) -> str:
    if function.source:
        return function.source
    inputs = _format_parameters(function.inputs)
    outputs = _format_parameters(function.outputs)
    return f"{function.name}({inputs}) ({outputs})"


def _format_parameters(parameters: tuple[Parameter, ...]) -> str:
    return ", ".join(
        f"{parameter.name} {parameter.type_name}".strip() for parameter in parameters
    )


def main() -> None:
    """Run the CLI application and exit."""
    configure_logging()
    exit_code = run(sys.argv[1:], stdout=sys.stdout, stderr=sys.stderr)
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
