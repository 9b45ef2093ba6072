"""Positions and the clamp that turns stale positions into valid ones."""

from __future__ import annotations

from typing import NamedTuple, Sequence


class Position(NamedTuple):
    """A ``(line, column)`` pair; ``column`` counts code points, not bytes.

    Tuples compare lexicographically, which is document order.
    """

    line: int = 0
    column: int = 0


def char_count(lines: Sequence[str], index: int) -> int:
    """Length of ``lines[index]``, ``0`` for the virtual line and beyond."""

    if 0 <= index < len(lines):
        return len(lines[index])
    return 0


def clamp(position: Position, lines: Sequence[str]) -> Position:
    """Map a possibly-stale ``position`` onto a valid address in ``lines``.

    The line saturates at ``len(lines)`` (the virtual "append" line) and the
    column at the length of the resulting line. Total over all inputs.
    """

    line = max(0, min(position.line, len(lines)))
    column = max(0, min(position.column, char_count(lines, line)))
    return Position(line, column)


__all__ = ["Position", "char_count", "clamp"]
