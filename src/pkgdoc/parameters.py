# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Parameter extraction from signature field groups."""

import logging
from collections.abc import Iterable

from pkgdoc.frontend import FieldGroup
from pkgdoc.model import Parameter

logger = logging.getLogger(__name__)

VARIADIC_MARKER = "..."
POINTER_MARKER = "*"


def is_pointer_type(type_expr: str) -> bool:
    """Check whether a type expression denotes a pointer.

    A leading variadic marker is stripped first, so ``...*T`` counts as a
    pointer while ``...[]*T`` and ``[]*T`` do not.

    Args:
        type_expr: Literal type expression.

    Returns:
        True when the remaining expression starts with ``*``.
    """
    text = type_expr.strip()
    if text.startswith(VARIADIC_MARKER):
        text = text[len(VARIADIC_MARKER) :].lstrip()
    return text.startswith(POINTER_MARKER)


def make_parameter(name: str, type_expr: str) -> Parameter:
    type_name = type_expr.strip()
    return Parameter(name=name, type_name=type_name, pointer=is_pointer_type(type_name))


def extract_parameters(groups: Iterable[FieldGroup] | None) -> list[Parameter]:
    """Flatten signature field groups into individual parameters.

    Args:
        groups: Field groups in declared order; ``None`` is treated as empty.

    Returns:
        One parameter per declared name, or one unnamed parameter for a group
        without names, in declared order.
    """
    if groups is None:
        return []
    parameters: list[Parameter] = []
    for group in groups:
        if not group.names:
            parameters.append(make_parameter("", group.type_expr))
            continue
        parameters.extend(make_parameter(name, group.type_expr) for name in group.names)
    return parameters
