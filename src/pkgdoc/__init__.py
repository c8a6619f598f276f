# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Public import surface for package documentation model assembly."""

from pkgdoc.assembler import PackageAssembler, load_package
from pkgdoc.config import AssemblyConfig
from pkgdoc.frontend import (
    FrontEndError,
    MissingPackageFailure,
    ParsedPackage,
    UpstreamParseFailure,
)
from pkgdoc.model import (
    Constant,
    ConstantBlock,
    Error,
    Function,
    Method,
    Package,
    Parameter,
    Type,
    Variable,
    VariableBlock,
)

__all__ = [
    "AssemblyConfig",
    "Constant",
    "ConstantBlock",
    "Error",
    "FrontEndError",
    "Function",
    "Method",
    "MissingPackageFailure",
    "Package",
    "PackageAssembler",
    "Parameter",
    "ParsedPackage",
    "Type",
    "UpstreamParseFailure",
    "Variable",
    "VariableBlock",
    "load_package",
]
