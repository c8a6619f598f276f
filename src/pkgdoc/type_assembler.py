# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Type assembly: binding constructors and methods to declared types."""

import logging
from collections.abc import Iterable, Sequence
from typing import BinaryIO

from pkgdoc.frontend import RawType
from pkgdoc.functions import base_type_name
from pkgdoc.model import Function, Method, Type
from pkgdoc.source import decode_span

logger = logging.getLogger(__name__)


class TypeAssembler:
    """Assemble types from raw declarations and already-built functions."""

    def __init__(self, type_names: Iterable[str]) -> None:
        """Initialize the assembler.

        Args:
            type_names: Names of every type declared in the package.
        """
        self._type_names = frozenset(type_names)

    def result_type_names(self, function: Function) -> set[str]:
        """Collect the package types named in a function's results.

        Args:
            function: Built function.

        Returns:
            Distinct local type names found among the output parameters.
        """
        names = {base_type_name(output.type_name) for output in function.outputs}
        return {name for name in names if name in self._type_names}

    def constructor_of(self, function: Function) -> str | None:
        """Return the type a function constructs, if any.

        A function constructs ``T`` when ``T`` is the only package type among
        its results; returning two different package types leaves it unbound.
        """
        names = self.result_type_names(function)
        if len(names) != 1:
            return None
        return next(iter(names))

    def assemble(
        self,
        raw_type: RawType,
        functions: Sequence[Function],
        methods: Sequence[Method],
        buffer: BinaryIO | None,
    ) -> Type:
        """Assemble one type.

        Args:
            raw_type: Raw type declaration.
            functions: Every package-level function, in declared order.
            methods: Every method, in declared order.
            buffer: Stitched package source.

        Returns:
            The type with its constructors and methods in declared order.
        """
        source = decode_span(buffer, raw_type.span)
        if not source:
            logger.warning(
                f"Type source unavailable; using empty source (type={raw_type.name})"
            )
        constructors = tuple(
            function
            for function in functions
            if self.constructor_of(function) == raw_type.name
        )
        bound_methods = tuple(
            method for method in methods if method.receiver_type == raw_type.name
        )
        logger.debug(
            f"Assembled type (type={raw_type.name} functions={len(constructors)} "
            f"methods={len(bound_methods)})"
        )
        return Type(
            name=raw_type.name,
            underlying=raw_type.underlying,
            doc=raw_type.doc,
            source=source,
            functions=constructors,
            methods=bound_methods,
        )
