# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Unit tests for function building and type assembly."""

import io

import pytest

from pkgdoc.frontend import FieldGroup, RawFunction, RawType, Span
from pkgdoc.functions import base_type_name, build_function, build_method
from pkgdoc.type_assembler import TypeAssembler

SOURCE = (
    "type Foo struct{}\n"
    "type Bar int\n"
    "func NewFoo() *Foo\n"
    "func (f *Foo) Close() error\n"
    "func (f Foo) Name() string\n"
)


def _span(text: str) -> Span:
    start = SOURCE.index(text)
    return Span(start=start, end=start + len(text))


def _buffer() -> io.BytesIO:
    return io.BytesIO(SOURCE.encode("utf-8"))


def _function(name: str, *result_types: str) -> RawFunction:
    return RawFunction(
        name=name,
        doc="",
        span=Span(start=0, end=1),
        results=tuple(FieldGroup(names=(), type_expr=t) for t in result_types),
    )


@pytest.mark.parametrize(
    ("type_expr", "expected"),
    [
        ("Foo", "Foo"),
        ("*Foo", "Foo"),
        ("[]*Foo", "Foo"),
        ("[4]Foo", "Foo"),
        ("...Foo", "Foo"),
        ("List[int]", "List"),
        ("*List[K, V]", "List"),
        ("**Foo", "Foo"),
        ("[][]Foo", ""),
        ("*[]Foo", ""),
        ("[]*[]Foo", ""),
        ("io.Reader", ""),
        ("map[string]Foo", ""),
        ("chan Foo", ""),
        ("func() Foo", ""),
        ("struct{}", ""),
    ],
)
def test_typ_001_base_type_name_reduces_to_local_named_type(
    type_expr: str, expected: str
) -> None:
    assert base_type_name(type_expr) == expected


def test_typ_002_function_returning_type_is_bound_as_constructor() -> None:
    buffer = _buffer()
    new_foo = build_function(
        RawFunction(
            name="NewFoo",
            doc="NewFoo makes a Foo.\n",
            span=_span("func NewFoo() *Foo"),
            results=(FieldGroup(names=(), type_expr="*Foo"),),
        ),
        buffer,
    )
    assembler = TypeAssembler(["Foo", "Bar"])

    foo = assembler.assemble(
        RawType(name="Foo", doc="", span=_span("type Foo struct{}"), underlying="struct"),
        [new_foo],
        [],
        buffer,
    )
    bar = assembler.assemble(
        RawType(name="Bar", doc="", span=_span("type Bar int"), underlying="int"),
        [new_foo],
        [],
        buffer,
    )

    assert [f.name for f in foo.functions] == ["NewFoo"]
    assert foo.functions[0].source == "func NewFoo() *Foo"
    assert foo.source == "type Foo struct{}"
    assert foo.underlying == "struct"
    assert bar.functions == ()
    assert bar.methods == ()


def test_typ_003_pointer_and_value_receivers_both_bind_to_the_type() -> None:
    buffer = _buffer()
    close = build_method(
        RawFunction(
            name="Close",
            doc="",
            span=_span("func (f *Foo) Close() error"),
            results=(FieldGroup(names=(), type_expr="error"),),
            receiver=FieldGroup(names=("f",), type_expr="*Foo"),
        ),
        buffer,
    )
    name = build_method(
        RawFunction(
            name="Name",
            doc="",
            span=_span("func (f Foo) Name() string"),
            results=(FieldGroup(names=(), type_expr="string"),),
            receiver=FieldGroup(names=("f",), type_expr="Foo"),
        ),
        buffer,
    )

    foo = TypeAssembler(["Foo"]).assemble(
        RawType(name="Foo", doc="", span=_span("type Foo struct{}"), underlying="struct"),
        [],
        [close, name],
        buffer,
    )

    assert [m.name for m in foo.methods] == ["Close", "Name"]
    assert foo.methods[0].pointer_receiver is True
    assert foo.methods[0].receiver.pointer is True
    assert foo.methods[0].receiver.name == "f"
    assert foo.methods[0].receiver.type_name == "*Foo"
    assert foo.methods[1].pointer_receiver is False
    assert foo.methods[1].source == "func (f Foo) Name() string"


def test_typ_004_function_returning_two_local_types_is_not_a_constructor() -> None:
    assembler = TypeAssembler(["Foo", "Bar"])
    pair = build_function(_function("Pair", "*Foo", "Bar"), _buffer())
    single = build_function(_function("Load", "*Foo", "error"), _buffer())
    twice = build_function(_function("Split", "Foo", "Foo"), _buffer())

    assert assembler.constructor_of(pair) is None
    assert assembler.result_type_names(pair) == {"Foo", "Bar"}
    assert assembler.constructor_of(single) == "Foo"
    assert assembler.constructor_of(twice) == "Foo"


def test_typ_005_function_without_local_result_types_stays_unbound() -> None:
    assembler = TypeAssembler(["Foo"])
    plain = build_function(_function("Now", "time.Time", "[]byte"), _buffer())

    assert assembler.constructor_of(plain) is None


def test_typ_006_degenerate_function_and_method_are_invalid() -> None:
    assert not build_function(None, _buffer()).is_valid
    assert not build_method(None, _buffer()).is_valid
    assert not build_method(_function("NotAMethod"), _buffer()).is_valid


def test_typ_007_nested_element_results_are_not_constructors() -> None:
    assembler = TypeAssembler(["Foo"])
    grid = build_function(_function("Grid", "[][]Foo"), _buffer())
    boxed = build_function(_function("Boxed", "*[]Foo"), _buffer())
    many = build_function(_function("Many", "[]*Foo"), _buffer())

    assert assembler.constructor_of(grid) is None
    assert assembler.constructor_of(boxed) is None
    assert assembler.constructor_of(many) == "Foo"
