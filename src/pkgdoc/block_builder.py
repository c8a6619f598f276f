# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Constant and variable block building from grouped declarations."""

import logging
from typing import BinaryIO

from pkgdoc.classifier import ErrorNameClassifier
from pkgdoc.frontend import RawValueGroup
from pkgdoc.model import Constant, ConstantBlock, Variable, VariableBlock
from pkgdoc.source import decode_span

logger = logging.getLogger(__name__)


class BlockBuilder:
    """Build constant and variable blocks with their verbatim source."""

    def __init__(self, classifier: ErrorNameClassifier | None = None) -> None:
        """Initialize the builder.

        Args:
            classifier: Error-name classifier applied to variable members.
        """
        self._classifier = classifier or ErrorNameClassifier()

    def build_constants(
        self,
        group: RawValueGroup | None,
        owner: str | None,
        buffer: BinaryIO | None,
    ) -> ConstantBlock:
        """Build a constant block.

        Args:
            group: Grouped ``const`` declaration.
            owner: Name of the owning type, or ``None`` for package-level blocks.
            buffer: Stitched package source.

        Returns:
            The block, or an empty block for degenerate input.
        """
        if group is None or buffer is None:
            return ConstantBlock(owner=None, doc="", source="")
        source = self._resolve_source(group, buffer)
        return ConstantBlock(
            owner=owner,
            doc=group.doc,
            source=source,
            constants=tuple(Constant(name=name) for name in group.names),
        )

    def build_variables(
        self,
        group: RawValueGroup | None,
        owner: str | None,
        buffer: BinaryIO | None,
    ) -> VariableBlock:
        """Build a variable block, flagging error-like members.

        Args:
            group: Grouped ``var`` declaration.
            owner: Name of the owning type, or ``None`` for package-level blocks.
            buffer: Stitched package source.

        Returns:
            The block, or an empty block for degenerate input.
        """
        if group is None or buffer is None:
            return VariableBlock(owner=None, doc="", source="")
        source = self._resolve_source(group, buffer)
        return VariableBlock(
            owner=owner,
            doc=group.doc,
            source=source,
            variables=tuple(
                Variable(name=name, is_error=self._classifier.is_error_like(name))
                for name in group.names
            ),
        )

    def _resolve_source(self, group: RawValueGroup, buffer: BinaryIO) -> str:
        source = decode_span(buffer, group.span)
        if not source:
            logger.warning(
                f"Block source unavailable; using empty source (names={list(group.names)} "
                f"start={group.span.start} end={group.span.end})"
            )
        return source
