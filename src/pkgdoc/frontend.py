# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Front-end contract: parsed package DTOs and failure types."""

import io
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Protocol


class FrontEndError(RuntimeError):
    """Represent a failure reported by a package front-end."""


class UpstreamParseFailure(FrontEndError):
    """Represent a package that could not be located, read, or parsed.

    Attributes:
        import_path: Import path (or document path) that failed.
        cause: Human-readable description of the underlying failure.
    """

    def __init__(self, import_path: str, cause: str) -> None:
        super().__init__(f"cannot parse package {import_path}: {cause}")
        self.import_path = import_path
        self.cause = cause


class MissingPackageFailure(FrontEndError):
    """Represent a location that resolved but holds no package members."""

    def __init__(self, import_path: str) -> None:
        super().__init__(f"no package found in {import_path}")
        self.import_path = import_path


@dataclass(frozen=True)
class Span:
    """Represent a 0-based, half-open byte range ``[start, end)`` in a buffer."""

    start: int
    end: int


@dataclass(frozen=True)
class FieldGroup:
    """Represent names declared together with one shared type expression.

    Attributes:
        names: Declared names; empty for unnamed (typically result) fields.
        type_expr: Literal spelling of the type expression.
    """

    names: tuple[str, ...]
    type_expr: str


@dataclass(frozen=True)
class RawValueGroup:
    """Represent one grouped ``const`` or ``var`` declaration."""

    names: tuple[str, ...]
    doc: str
    span: Span


@dataclass(frozen=True)
class RawFunction:
    """Represent a function or method declaration.

    Attributes:
        name: Function name.
        doc: Associated documentation text.
        span: Byte range of the signature.
        params: Input field groups.
        results: Output field groups.
        receiver: Receiver field group; ``None`` for plain functions.
    """

    name: str
    doc: str
    span: Span
    params: tuple[FieldGroup, ...] = ()
    results: tuple[FieldGroup, ...] = ()
    receiver: FieldGroup | None = None

    @property
    def is_method(self) -> bool:
        return self.receiver is not None


@dataclass(frozen=True)
class RawType:
    """Represent a type declaration with the value groups scoped to it."""

    name: str
    doc: str
    span: Span
    underlying: str
    consts: tuple[RawValueGroup, ...] = ()
    vars: tuple[RawValueGroup, ...] = ()


@dataclass(frozen=True)
class ParsedPackage:
    """Represent everything a front-end discovered about one package.

    File lists mirror the front-end's discovery groups; the assembler decides
    which names are test files. ``buffer`` holds the stitched source bytes that
    every span points into.
    """

    name: str
    import_path: str
    doc: str = ""
    go_files: tuple[str, ...] = ()
    ignored_go_files: tuple[str, ...] = ()
    cgo_files: tuple[str, ...] = ()
    test_go_files: tuple[str, ...] = ()
    xtest_go_files: tuple[str, ...] = ()
    subdirectories: tuple[str, ...] = ()
    imports: tuple[str, ...] = ()
    test_imports: tuple[str, ...] = ()
    xtest_imports: tuple[str, ...] = ()
    consts: tuple[RawValueGroup, ...] = ()
    vars: tuple[RawValueGroup, ...] = ()
    funcs: tuple[RawFunction, ...] = ()
    types: tuple[RawType, ...] = ()
    buffer: BinaryIO = field(default_factory=io.BytesIO, compare=False, repr=False)

    def discovered_files(self) -> tuple[str, ...]:
        """Return every discovered file name across all discovery groups."""
        return (
            self.go_files
            + self.ignored_go_files
            + self.cgo_files
            + self.test_go_files
            + self.xtest_go_files
        )


class FrontEnd(Protocol):
    """Language front-end contract producing parsed packages."""

    def load(self, path: Path) -> ParsedPackage:
        """Load a parsed package from a location.

        Raises:
            UpstreamParseFailure: If the package cannot be read or parsed.
            MissingPackageFailure: If the location holds no package.
        """
