import json
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest


def _add_src_to_path() -> None:
    root = Path(__file__).resolve().parents[1]
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


_add_src_to_path()


SHAPES_SOURCE = "\n".join(
    [
        "// Package shapes describes plane shapes.",
        "package shapes",
        "",
        "import (",
        '\t"errors"',
        '\t"math"',
        ")",
        "",
        "// Sizes of shapes.",
        "const (",
        "\tSmall = 1",
        "\tLarge = 2",
        ")",
        "",
        "// Shape errors and defaults.",
        "var (",
        '\tErrNegative = errors.New("negative radius")',
        '\tDefaultName = "shape"',
        "\tErrant      = 3",
        ")",
        "",
        "// Kind enumerates shapes.",
        "type Kind int",
        "",
        "// Kind values.",
        "const (",
        "\tKindCircle Kind = iota",
        "\tKindSquare",
        ")",
        "",
        "// Circle is a round shape.",
        "type Circle struct {",
        "\tR float64",
        "}",
        "",
        "// NewCircle makes a circle.",
        "func NewCircle(r float64) *Circle { return &Circle{R: r} }",
        "",
        "// Area computes the area.",
        "func (c *Circle) Area() float64 { return math.Pi * c.R * c.R }",
        "",
        "// String names the kind.",
        'func (k Kind) String() string { return "kind" }',
        "",
        "// Pair returns a circle and its kind.",
        "func Pair() (*Circle, Kind) { return nil, KindCircle }",
        "",
        "// Sum adds values.",
        "func Sum(xs ...float64) (total float64, err error) { return 0, nil }",
        "",
    ]
)

EXTRA_SOURCE = "\n".join(
    [
        "package shapes",
        "",
        "import \"errors\"",
        "",
        "// ErrClosed is returned after Close.",
        'var ErrClosed = errors.New("closed")',
        "",
    ]
)

SOURCES = {"shapes.go": SHAPES_SOURCE, "extra.go": EXTRA_SOURCE}


def span_of(file_name: str, text: str) -> dict[str, Any]:
    """Return the file-local span of ``text`` inside one of the sample sources."""
    source = SOURCES[file_name]
    start = source.index(text)
    return {"file": file_name, "start": start, "end": start + len(text)}


SIZES_DECL = "const (\n\tSmall = 1\n\tLarge = 2\n)"
SHAPE_VARS_DECL = (
    'var (\n\tErrNegative = errors.New("negative radius")\n'
    '\tDefaultName = "shape"\n\tErrant      = 3\n)'
)
CLOSED_DECL = 'var ErrClosed = errors.New("closed")'
KIND_DECL = "type Kind int"
KIND_VALUES_DECL = "const (\n\tKindCircle Kind = iota\n\tKindSquare\n)"
CIRCLE_DECL = "type Circle struct {\n\tR float64\n}"
NEW_CIRCLE_SIG = "func NewCircle(r float64) *Circle"
AREA_SIG = "func (c *Circle) Area() float64"
STRING_SIG = "func (k Kind) String() string"
PAIR_SIG = "func Pair() (*Circle, Kind)"
SUM_SIG = "func Sum(xs ...float64) (total float64, err error)"


def shapes_payload() -> dict[str, Any]:
    return {
        "name": "shapes",
        "import_path": "example.com/shapes",
        "doc": "Package shapes describes plane shapes.\n",
        "go_files": ["shapes.go", "extra.go"],
        "ignored_go_files": ["shapes_windows.go", "odd_test.go"],
        "cgo_files": [],
        "test_go_files": ["shapes_test.go"],
        "xtest_go_files": ["example_test.go"],
        "subdirectories": ["internal", "cmd", "internal"],
        "imports": ["math", "errors"],
        "test_imports": ["testing", "fmt"],
        "xtest_imports": ["fmt", "example.com/shapes"],
        "sources": dict(SOURCES),
        "consts": [
            {
                "names": ["Small", "Large"],
                "doc": "Sizes of shapes.\n",
                "span": span_of("shapes.go", SIZES_DECL),
            }
        ],
        "vars": [
            {
                "names": ["ErrNegative", "DefaultName", "Errant"],
                "doc": "Shape errors and defaults.\n",
                "span": span_of("shapes.go", SHAPE_VARS_DECL),
            },
            {
                "names": ["ErrClosed"],
                "doc": "ErrClosed is returned after Close.\n",
                "span": span_of("extra.go", CLOSED_DECL),
            },
        ],
        "funcs": [
            {
                "name": "NewCircle",
                "doc": "NewCircle makes a circle.\n",
                "span": span_of("shapes.go", NEW_CIRCLE_SIG),
                "params": [{"names": ["r"], "type": "float64"}],
                "results": [{"names": [], "type": "*Circle"}],
                "receiver": None,
            },
            {
                "name": "Area",
                "doc": "Area computes the area.\n",
                "span": span_of("shapes.go", AREA_SIG),
                "params": [],
                "results": [{"names": [], "type": "float64"}],
                "receiver": {"names": ["c"], "type": "*Circle"},
            },
            {
                "name": "String",
                "doc": "String names the kind.\n",
                "span": span_of("shapes.go", STRING_SIG),
                "params": [],
                "results": [{"names": [], "type": "string"}],
                "receiver": {"names": ["k"], "type": "Kind"},
            },
            {
                "name": "Pair",
                "doc": "Pair returns a circle and its kind.\n",
                "span": span_of("shapes.go", PAIR_SIG),
                "params": [],
                "results": [
                    {"names": [], "type": "*Circle"},
                    {"names": [], "type": "Kind"},
                ],
            },
            {
                "name": "Sum",
                "doc": "Sum adds values.\n",
                "span": span_of("shapes.go", SUM_SIG),
                "params": [{"names": ["xs"], "type": "...float64"}],
                "results": [
                    {"names": ["total"], "type": "float64"},
                    {"names": ["err"], "type": "error"},
                ],
            },
        ],
        "types": [
            {
                "name": "Kind",
                "doc": "Kind enumerates shapes.\n",
                "span": span_of("shapes.go", KIND_DECL),
                "underlying": "int",
                "consts": [
                    {
                        "names": ["KindCircle", "KindSquare"],
                        "doc": "Kind values.\n",
                        "span": span_of("shapes.go", KIND_VALUES_DECL),
                    }
                ],
                "vars": [],
            },
            {
                "name": "Circle",
                "doc": "Circle is a round shape.\n",
                "span": span_of("shapes.go", CIRCLE_DECL),
                "underlying": "struct",
            },
        ],
    }


@pytest.fixture
def shapes_document() -> dict[str, Any]:
    return shapes_payload()


@pytest.fixture
def write_document(tmp_path: Path) -> Callable[[dict[str, Any]], Path]:
    def _write(payload: dict[str, Any]) -> Path:
        path = tmp_path / "documents" / "package.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write
