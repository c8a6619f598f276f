# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Front-end reading parsed-package JSON documents.

A parser (outside this project) dumps what it discovered about one package
into a JSON document. Each declaration carries a span local to one source
file; this front-end stitches all sources, in file name order and joined by a
newline, into a single buffer and rebases every span onto it.
"""

import io
import json
import logging
from pathlib import Path
from typing import Any

from pkgdoc.frontend import (
    FieldGroup,
    MissingPackageFailure,
    ParsedPackage,
    RawFunction,
    RawType,
    RawValueGroup,
    Span,
    UpstreamParseFailure,
)

logger = logging.getLogger(__name__)

SOURCE_SEPARATOR = b"\n"
INVALID_SPAN = Span(start=-1, end=-1)


class DocumentError(ValueError):
    """Represent a structurally invalid parsed-package document."""


class JsonDocumentFrontEnd:
    """Load parsed packages from JSON documents on disk."""

    def load(self, path: Path) -> ParsedPackage:
        """Read and decode a parsed-package document.

        Args:
            path: Document file path.

        Returns:
            Parsed package backed by the stitched source buffer.

        Raises:
            UpstreamParseFailure: If the document is missing, unreadable, not
                JSON, or malformed.
            MissingPackageFailure: If the document declares no package.
        """
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(f"Cannot read package document (path={path} error={exc})")
            raise UpstreamParseFailure(str(path), str(exc)) from exc
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            logger.warning(f"Package document is not JSON (path={path} error={exc})")
            raise UpstreamParseFailure(str(path), f"invalid JSON: {exc}") from exc
        return parse_document(payload, origin=str(path))


def parse_document(payload: Any, origin: str = "<document>") -> ParsedPackage:
    """Decode a parsed-package document that was already loaded from JSON.

    Args:
        payload: Decoded JSON value.
        origin: Location used in failure messages when no import path is known.

    Returns:
        Parsed package backed by the stitched source buffer.

    Raises:
        UpstreamParseFailure: If the document is malformed.
        MissingPackageFailure: If the document declares no package.
    """
    if not isinstance(payload, dict):
        raise UpstreamParseFailure(origin, "document root must be an object")
    import_path = payload.get("import_path")
    label = import_path if isinstance(import_path, str) and import_path else origin
    try:
        parsed = _decode(payload)
    except DocumentError as exc:
        logger.warning(f"Malformed package document (import_path={label} error={exc})")
        raise UpstreamParseFailure(label, str(exc)) from exc
    if not parsed.name and not parsed.discovered_files():
        logger.warning(f"Package document declares no package (import_path={label})")
        raise MissingPackageFailure(label)
    logger.debug(
        f"Package document decoded (import_path={label} funcs={len(parsed.funcs)} "
        f"types={len(parsed.types)})"
    )
    return parsed


def _decode(payload: dict[str, Any]) -> ParsedPackage:
    sources = payload.get("sources", {})
    if not isinstance(sources, dict):
        raise DocumentError("sources must be an object")
    buffer, offsets = _stitch_sources(sources)
    return ParsedPackage(
        name=_string(payload, "name"),
        import_path=_string(payload, "import_path"),
        doc=_string(payload, "doc"),
        go_files=_strings(payload, "go_files"),
        ignored_go_files=_strings(payload, "ignored_go_files"),
        cgo_files=_strings(payload, "cgo_files"),
        test_go_files=_strings(payload, "test_go_files"),
        xtest_go_files=_strings(payload, "xtest_go_files"),
        subdirectories=_strings(payload, "subdirectories"),
        imports=_strings(payload, "imports"),
        test_imports=_strings(payload, "test_imports"),
        xtest_imports=_strings(payload, "xtest_imports"),
        consts=_value_groups(payload, "consts", offsets),
        vars=_value_groups(payload, "vars", offsets),
        funcs=tuple(_function(item, offsets) for item in _objects(payload, "funcs")),
        types=tuple(_type(item, offsets) for item in _objects(payload, "types")),
        buffer=buffer,
    )


def _stitch_sources(
    sources: dict[str, Any],
) -> tuple[io.BytesIO, dict[str, tuple[int, int]]]:
    """Join file sources into one buffer.

    Returns the buffer and, per file, its start offset and byte length.
    """
    chunks: list[bytes] = []
    offsets: dict[str, tuple[int, int]] = {}
    position = 0
    for name in sorted(sources):
        content = sources[name]
        if not isinstance(content, str):
            raise DocumentError(f"source for {name} must be a string")
        if chunks:
            position += len(SOURCE_SEPARATOR)
        data = content.encode("utf-8")
        offsets[name] = (position, len(data))
        chunks.append(data)
        position += len(data)
    return io.BytesIO(SOURCE_SEPARATOR.join(chunks)), offsets


def _string(obj: dict[str, Any], key: str) -> str:
    value = obj.get(key, "")
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DocumentError(f"{key} must be a string")
    return value


def _strings(obj: dict[str, Any], key: str) -> tuple[str, ...]:
    value = obj.get(key, [])
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(x, str) for x in value):
        raise DocumentError(f"{key} must be a list of strings")
    return tuple(value)


def _objects(obj: dict[str, Any], key: str) -> list[dict[str, Any]]:
    value = obj.get(key, [])
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(x, dict) for x in value):
        raise DocumentError(f"{key} must be a list of objects")
    return value


def _is_offset(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _span(obj: dict[str, Any], offsets: dict[str, tuple[int, int]]) -> Span:
    """Decode a span, rebasing file-local offsets onto the stitched buffer.

    A span naming a file without source, or reaching outside the file it
    names, becomes an invalid span; the block it belongs to then simply has
    no source text.
    """
    raw = obj.get("span")
    if not isinstance(raw, dict):
        raise DocumentError("span must be an object")
    start = raw.get("start")
    end = raw.get("end")
    if not _is_offset(start) or not _is_offset(end):
        raise DocumentError("span start and end must be integers")
    file_name = raw.get("file")
    if file_name is None:
        return Span(start=start, end=end)
    if not isinstance(file_name, str):
        raise DocumentError("span file must be a string")
    extent = offsets.get(file_name)
    if extent is None:
        logger.warning(f"Span refers to a file without source (file={file_name})")
        return INVALID_SPAN
    base, length = extent
    if not 0 <= start < end <= length:
        logger.warning(
            f"Span lies outside its file (file={file_name} start={start} end={end} "
            f"length={length})"
        )
        return INVALID_SPAN
    return Span(start=base + start, end=base + end)


def _value_groups(
    obj: dict[str, Any], key: str, offsets: dict[str, tuple[int, int]]
) -> tuple[RawValueGroup, ...]:
    return tuple(
        RawValueGroup(
            names=_strings(item, "names"),
            doc=_string(item, "doc"),
            span=_span(item, offsets),
        )
        for item in _objects(obj, key)
    )


def _field_group(item: Any) -> FieldGroup:
    if not isinstance(item, dict):
        raise DocumentError("field group must be an object")
    type_expr = item.get("type")
    if not isinstance(type_expr, str) or not type_expr.strip():
        raise DocumentError("field group type must be a non-empty string")
    return FieldGroup(names=_strings(item, "names"), type_expr=type_expr)


def _function(
    item: dict[str, Any], offsets: dict[str, tuple[int, int]]
) -> RawFunction:
    receiver = item.get("receiver")
    return RawFunction(
        name=_string(item, "name"),
        doc=_string(item, "doc"),
        span=_span(item, offsets),
        params=tuple(_field_group(group) for group in _objects(item, "params")),
        results=tuple(_field_group(group) for group in _objects(item, "results")),
        receiver=None if receiver is None else _field_group(receiver),
    )


def _type(item: dict[str, Any], offsets: dict[str, tuple[int, int]]) -> RawType:
    name = _string(item, "name")
    if not name:
        raise DocumentError("type name must not be empty")
    return RawType(
        name=name,
        doc=_string(item, "doc"),
        span=_span(item, offsets),
        underlying=_string(item, "underlying"),
        consts=_value_groups(item, "consts", offsets),
        vars=_value_groups(item, "vars", offsets),
    )
