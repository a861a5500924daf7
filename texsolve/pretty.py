"""Rendering of errors with the offending source line."""

from __future__ import annotations

from .errors import SolverError


def line_col_at(source: str, byte_pos: int) -> tuple[int, int]:
    """Return the 1-based line and column of a UTF-8 byte offset."""
    line, col = 1, 1
    offset = 0
    for char in source:
        if offset >= byte_pos:
            break
        if char == "\n":
            line += 1
            col = 1
        else:
            col += 1
        offset += len(char.encode("utf-8"))
    return line, col


def _source_line(source: str, line: int) -> str:
    lines = source.split("\n")
    if line - 1 < len(lines):
        return lines[line - 1].removesuffix("\r")
    return ""


def render_error(source: str, error: SolverError) -> str:
    """Format an error with its location and a caret marker under the span."""
    line, col = line_col_at(source, error.span.start)
    line_text = _source_line(source, line)
    width = max(error.span.end - error.span.start, 1)
    return (
        f"error: {error.describe()}\n"
        f" --> {line}:{col}\n"
        "  |\n"
        f"{line:2} | {line_text}\n"
        "  | " + " " * (col - 1) + "^" * width
    )