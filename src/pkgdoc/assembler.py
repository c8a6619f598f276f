# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Package assembly from parsed front-end output."""

import logging
from pathlib import Path

from pkgdoc.block_builder import BlockBuilder
from pkgdoc.classifier import ErrorNameClassifier
from pkgdoc.config import AssemblyConfig
from pkgdoc.frontend import FrontEnd, ParsedPackage
from pkgdoc.frontends.json_document import JsonDocumentFrontEnd
from pkgdoc.functions import build_function, build_method
from pkgdoc.model import ConstantBlock, Method, Package, VariableBlock
from pkgdoc.type_assembler import TypeAssembler

logger = logging.getLogger(__name__)


class PackageAssembler:
    """Assemble the documentation model of one parsed package."""

    def __init__(self, config: AssemblyConfig | None = None) -> None:
        """Initialize the assembler.

        Args:
            config: Naming conventions; defaults apply when omitted.
        """
        self._config = config or AssemblyConfig()
        self._block_builder = BlockBuilder(
            classifier=ErrorNameClassifier(self._config.error_name_pattern)
        )

    def assemble(self, parsed: ParsedPackage) -> Package:
        """Build the package model in one pass.

        Args:
            parsed: Parsed package handed over by a front-end.

        Returns:
            The assembled package.
        """
        files, test_files = self.partition_files(parsed.discovered_files())
        constant_blocks = self._build_constant_blocks(parsed)
        variable_blocks = self._build_variable_blocks(parsed)

        all_functions = [
            build_function(raw, parsed.buffer)
            for raw in parsed.funcs
            if not raw.is_method
        ]
        type_names = [raw_type.name for raw_type in parsed.types]
        methods: list[Method] = []
        for raw in parsed.funcs:
            if not raw.is_method:
                continue
            method = build_method(raw, parsed.buffer)
            if method.receiver_type not in type_names:
                logger.debug(
                    f"Dropping method without a declared receiver type "
                    f"(method={method.name} receiver={method.receiver.type_name})"
                )
                continue
            methods.append(method)

        type_assembler = TypeAssembler(type_names)
        types = tuple(
            type_assembler.assemble(raw_type, all_functions, methods, parsed.buffer)
            for raw_type in parsed.types
        )
        functions = tuple(
            function
            for function in all_functions
            if type_assembler.constructor_of(function) is None
        )

        package = Package(
            name=parsed.name,
            import_path=parsed.import_path,
            doc=parsed.doc,
            files=files,
            test_files=test_files,
            subdirectories=tuple(sorted(set(parsed.subdirectories))),
            imports=tuple(parsed.imports),
            test_imports=tuple(sorted(set(parsed.test_imports) | set(parsed.xtest_imports))),
            constant_blocks=constant_blocks,
            variable_blocks=variable_blocks,
            functions=functions,
            types=types,
        )
        logger.info(
            f"Package assembled (import_path={package.import_path} "
            f"files={len(package.files)} test_files={len(package.test_files)} "
            f"constant_blocks={len(package.constant_blocks)} "
            f"variable_blocks={len(package.variable_blocks)} "
            f"functions={len(package.functions)} types={len(package.types)})"
        )
        return package

    def partition_files(
        self, names: tuple[str, ...]
    ) -> tuple[tuple[str, ...], tuple[str, ...]]:
        """Split discovered file names into source files and test files.

        Args:
            names: Every discovered file name, from any discovery group.

        Returns:
            Sorted, duplicate-free source files and test files.
        """
        suffix = self._config.test_suffix
        unique = set(names)
        test_files = sorted(name for name in unique if name.endswith(suffix))
        files = sorted(name for name in unique if not name.endswith(suffix))
        return tuple(files), tuple(test_files)

    def _build_constant_blocks(self, parsed: ParsedPackage) -> tuple[ConstantBlock, ...]:
        blocks = [
            self._block_builder.build_constants(group, None, parsed.buffer)
            for group in parsed.consts
        ]
        for raw_type in parsed.types:
            blocks.extend(
                self._block_builder.build_constants(group, raw_type.name, parsed.buffer)
                for group in raw_type.consts
            )
        return tuple(block for block in blocks if not block.is_empty)

    def _build_variable_blocks(self, parsed: ParsedPackage) -> tuple[VariableBlock, ...]:
        blocks = [
            self._block_builder.build_variables(group, None, parsed.buffer)
            for group in parsed.vars
        ]
        for raw_type in parsed.types:
            blocks.extend(
                self._block_builder.build_variables(group, raw_type.name, parsed.buffer)
                for group in raw_type.vars
            )
        return tuple(block for block in blocks if not block.is_empty)


def load_package(
    path: Path,
    frontend: FrontEnd | None = None,
    config: AssemblyConfig | None = None,
) -> Package:
    """Load a parsed package through a front-end and assemble it.

    Args:
        path: Location handed to the front-end.
        frontend: Front-end to use; the JSON document front-end by default.
        config: Assembly configuration.

    Returns:
        The assembled package.

    Raises:
        UpstreamParseFailure: If the front-end cannot read or parse the package.
        MissingPackageFailure: If the location holds no package.
    """
    if frontend is None:
        frontend = JsonDocumentFrontEnd()
    parsed = frontend.load(path)
    return PackageAssembler(config=config).assemble(parsed)
