# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Documentation model entities.

Every entity is a frozen dataclass and every ordered collection is a tuple, so
no accessor can hand out something a caller could use to change the model.
"""

from dataclasses import dataclass

from pkgdoc.text import format_comments


@dataclass(frozen=True)
class Parameter:
    """Represent one function input, output, or receiver.

    Attributes:
        name: Parameter name; empty for unnamed parameters.
        type_name: Verbatim type expression, like ``[]byte`` or ``*os.File``.
        pointer: Whether the type denotes a pointer once a variadic marker is
            stripped.
    """

    name: str
    type_name: str
    pointer: bool = False


@dataclass(frozen=True)
class Constant:
    name: str


@dataclass(frozen=True)
class Variable:
    name: str
    is_error: bool = False


@dataclass(frozen=True)
class Error:
    name: str


@dataclass(frozen=True)
class ConstantBlock:
    """Represent a grouped declaration of exported constants.

    Attributes:
        owner: Name of the type the block annotates; ``None`` at package level.
        doc: Raw documentation text.
        source: Verbatim declaration text; ``""`` if the span was unusable.
        constants: Constants in declaration order.
    """

    owner: str | None
    doc: str
    source: str
    constants: tuple[Constant, ...] = ()

    @property
    def type_name(self) -> str:
        return self.owner or ""

    @property
    def is_empty(self) -> bool:
        return not self.constants

    def comments(self, width: int) -> str:
        return format_comments(self.doc, width)


@dataclass(frozen=True)
class VariableBlock:
    """Represent a grouped declaration of exported variables.

    ``errors`` is a view over ``variables``; a name is listed there only when
    the variable itself was classified as error-like.
    """

    owner: str | None
    doc: str
    source: str
    variables: tuple[Variable, ...] = ()

    @property
    def type_name(self) -> str:
        return self.owner or ""

    @property
    def errors(self) -> tuple[Error, ...]:
        return tuple(Error(name=v.name) for v in self.variables if v.is_error)

    @property
    def is_empty(self) -> bool:
        return not self.variables

    def comments(self, width: int) -> str:
        return format_comments(self.doc, width)


@dataclass(frozen=True)
class Function:
    """Represent an exported function.

    Attributes:
        name: Function name.
        doc: Raw documentation text.
        source: Verbatim signature text.
        inputs: Input parameters in declared order.
        outputs: Output parameters in declared order.
    """

    name: str
    doc: str
    source: str
    inputs: tuple[Parameter, ...] = ()
    outputs: tuple[Parameter, ...] = ()

    @property
    def is_valid(self) -> bool:
        return bool(self.name)

    def comments(self, width: int) -> str:
        return format_comments(self.doc, width)


@dataclass(frozen=True)
class Method:
    """Represent a method declared on a package type.

    Attributes:
        receiver: Receiver parameter, like ``f`` of type ``*Foo``.
        pointer_receiver: Whether the receiver is pointer-typed.
        receiver_type: Base name of the receiver type, used to bind the method.
    """

    name: str
    doc: str
    source: str
    receiver: Parameter
    receiver_type: str
    pointer_receiver: bool = False
    inputs: tuple[Parameter, ...] = ()
    outputs: tuple[Parameter, ...] = ()

    @property
    def is_valid(self) -> bool:
        return bool(self.name) and bool(self.receiver_type)

    def comments(self, width: int) -> str:
        return format_comments(self.doc, width)


@dataclass(frozen=True)
class Type:
    """Represent an exported type with its constructors and methods.

    Attributes:
        name: Type name.
        underlying: Underlying type, like ``struct`` or ``map[string]chan int``.
        doc: Raw documentation text.
        source: Verbatim type declaration.
        functions: Package functions returning this type.
        methods: Methods declared on this type, value and pointer receivers alike.
    """

    name: str
    underlying: str
    doc: str
    source: str
    functions: tuple[Function, ...] = ()
    methods: tuple[Method, ...] = ()

    def comments(self, width: int) -> str:
        return format_comments(self.doc, width)


@dataclass(frozen=True)
class Package:
    """Represent one assembled package.

    ``files``, ``test_files``, ``subdirectories`` and ``test_imports`` are sorted
    and free of duplicates; ``imports`` keeps the front-end order.
    """

    name: str
    import_path: str
    doc: str = ""
    files: tuple[str, ...] = ()
    test_files: tuple[str, ...] = ()
    subdirectories: tuple[str, ...] = ()
    imports: tuple[str, ...] = ()
    test_imports: tuple[str, ...] = ()
    constant_blocks: tuple[ConstantBlock, ...] = ()
    variable_blocks: tuple[VariableBlock, ...] = ()
    functions: tuple[Function, ...] = ()
    types: tuple[Type, ...] = ()

    @property
    def is_valid(self) -> bool:
        return bool(self.name) and bool(self.import_path)

    def comments(self, width: int) -> str:
        return format_comments(self.doc, width)

    def type_named(self, name: str) -> Type | None:
        """Return the type called ``name``, or ``None`` if the package has none."""
        for type_ in self.types:
            if type_.name == name:
                return type_
        return None
