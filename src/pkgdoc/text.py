# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Documentation comment formatting."""

import textwrap

PREFORMATTED_INDENT = "\t"


def format_comments(comments: str, width: int) -> str:
    """Wrap documentation text to a column width.

    Paragraphs (runs of unindented lines) are re-flowed to ``width`` columns.
    Indented runs are preformatted blocks: their common indentation is replaced
    by a single tab and their lines are kept as written. Blocks are separated by
    one blank line.

    Args:
        comments: Raw documentation text.
        width: Target column width; ``<= 0`` returns the text unchanged.

    Returns:
        Formatted text ending in a newline, or ``""`` for empty input.
    """
    if width <= 0:
        return comments
    if not comments.strip():
        return ""

    rendered: list[str] = []
    for kind, lines in _split_blocks(comments.splitlines()):
        if kind == "pre":
            body = textwrap.dedent("\n".join(lines))
            rendered.append(
                "\n".join(
                    PREFORMATTED_INDENT + line if line.strip() else ""
                    for line in body.splitlines()
                )
            )
        else:
            rendered.append(
                textwrap.fill(
                    " ".join(line.strip() for line in lines),
                    width=width,
                    break_long_words=False,
                    break_on_hyphens=False,
                )
            )
    return "\n\n".join(rendered) + "\n"


def _split_blocks(lines: list[str]) -> list[tuple[str, list[str]]]:
    """Group lines into ``("para", ...)`` and ``("pre", ...)`` blocks."""
    blocks: list[tuple[str, list[str]]] = []
    current: list[str] = []
    current_kind = ""
    for line in lines:
        if not line.strip():
            # Blank lines inside a preformatted run belong to it.
            if current_kind == "pre":
                current.append("")
                continue
            if current:
                blocks.append((current_kind, current))
            current, current_kind = [], ""
            continue
        kind = "pre" if line[0] in " \t" else "para"
        if kind != current_kind and current:
            blocks.append((current_kind, _trim_trailing_blank(current)))
            current = []
        current_kind = kind
        current.append(line)
    if current:
        blocks.append((current_kind, _trim_trailing_blank(current)))
    return blocks


def _trim_trailing_blank(lines: list[str]) -> list[str]:
    while lines and not lines[-1].strip():
        lines = lines[:-1]
    return lines
