# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Source text recovery from byte spans."""

import io
import logging
from typing import BinaryIO

from pkgdoc.frontend import Span

logger = logging.getLogger(__name__)


def extract_span(buffer: BinaryIO | None, start: int, end: int) -> bytes | None:
    """Read the exact bytes of ``[start, end)`` from a seekable buffer.

    Args:
        buffer: Seekable binary stream holding the package source.
        start: First byte offset (0-based, inclusive).
        end: Last byte offset (exclusive).

    Returns:
        The bytes in the range, or ``None`` when the range is invalid, the
        read comes up short, or the stream fails. Partial data is never
        returned.
    """
    if buffer is None:
        return None
    try:
        length = buffer.seek(0, io.SEEK_END)
        if not 0 <= start < end <= length:
            logger.warning(
                f"Invalid source span (start={start} end={end} length={length})"
            )
            return None
        if buffer.seek(start) != start:
            return None
        data = buffer.read(end - start)
    except (OSError, ValueError) as exc:
        logger.warning(
            f"Source span read failed (start={start} end={end} error={exc})"
        )
        return None
    if data is None or len(data) != end - start:
        logger.warning(
            f"Short source span read (start={start} end={end} "
            f"read={0 if data is None else len(data)})"
        )
        return None
    return data


def decode_span(buffer: BinaryIO | None, span: Span | None) -> str:
    """Return the UTF-8 source text for a span, or ``""`` if unavailable."""
    if span is None:
        return ""
    data = extract_span(buffer, span.start, span.end)
    if data is None:
        return ""
    return data.decode("utf-8", errors="replace")
