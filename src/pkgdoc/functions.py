# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Function and method building from raw declarations."""

import logging
import re
from typing import BinaryIO

from pkgdoc.frontend import RawFunction
from pkgdoc.model import Function, Method, Parameter
from pkgdoc.parameters import extract_parameters, make_parameter
from pkgdoc.source import decode_span

logger = logging.getLogger(__name__)

_IDENTIFIER_RE = re.compile(r"[A-Za-z_]\w*")
_ARRAY_PREFIX_RE = re.compile(r"\[[^\]]*\]")
_COMPOSITE_KEYWORDS = frozenset({"chan", "func", "interface", "map", "struct"})


def base_type_name(type_expr: str) -> str:
    """Reduce a type expression to the name of the type it is built on.

    Strips a variadic marker and at most one slice or array level, then any
    pointers, from the front and type arguments from the back:
    ``*List[int]`` gives ``List`` and ``[]*Node`` gives ``Node``. Nested
    element types (``[][]Node``, ``*[]Node``), package-qualified and composite
    types (``io.Reader``, ``map[string]int``, ``func()``) give ``""``.

    Args:
        type_expr: Literal type expression.

    Returns:
        The bare type name, or ``""`` when there is no local named type.
    """
    text = type_expr.strip()
    if text.startswith("..."):
        text = text[3:]
    match = _ARRAY_PREFIX_RE.match(text)
    if match:
        text = text[match.end() :]
    text = text.lstrip().lstrip("*").lstrip()
    bracket = text.find("[")
    if bracket > 0:
        text = text[:bracket]
    text = text.strip()
    if _IDENTIFIER_RE.fullmatch(text) is None or text in _COMPOSITE_KEYWORDS:
        return ""
    return text


def build_function(raw: RawFunction | None, buffer: BinaryIO | None) -> Function:
    """Build a function entity.

    Args:
        raw: Raw function declaration.
        buffer: Stitched package source.

    Returns:
        The function; an invalid (nameless) function for degenerate input.
    """
    if raw is None or buffer is None:
        return Function(name="", doc="", source="")
    return Function(
        name=raw.name,
        doc=raw.doc,
        source=decode_span(buffer, raw.span),
        inputs=tuple(extract_parameters(raw.params)),
        outputs=tuple(extract_parameters(raw.results)),
    )


def build_method(raw: RawFunction | None, buffer: BinaryIO | None) -> Method:
    """Build a method entity, recording whether its receiver is a pointer.

    Args:
        raw: Raw method declaration; its ``receiver`` must be set.
        buffer: Stitched package source.

    Returns:
        The method; an invalid method for degenerate input.
    """
    if raw is None or buffer is None or raw.receiver is None:
        return Method(
            name="",
            doc="",
            source="",
            receiver=Parameter(name="", type_name=""),
            receiver_type="",
        )
    receiver_name = raw.receiver.names[0] if raw.receiver.names else ""
    receiver = make_parameter(receiver_name, raw.receiver.type_expr)
    return Method(
        name=raw.name,
        doc=raw.doc,
        source=decode_span(buffer, raw.span),
        receiver=receiver,
        receiver_type=base_type_name(receiver.type_name),
        pointer_receiver=receiver.pointer,
        inputs=tuple(extract_parameters(raw.params)),
        outputs=tuple(extract_parameters(raw.results)),
    )
