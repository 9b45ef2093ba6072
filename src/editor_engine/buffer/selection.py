"""Range selection with raw endpoints and clamped, read-only views."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .position import Position, char_count, clamp

Lines = Sequence[str]


@dataclass(frozen=True, slots=True)
class TrueSelection:
    """Snapshot of a selection with both endpoints clamped.

    ``start`` comes from the anchor and ``end`` from the active endpoint, so
    ``start`` may lie after ``end`` in document order.
    """

    start: Position
    end: Position

    def min(self) -> Position:
        return self.start if self.start <= self.end else self.end

    def max(self) -> Position:
        return self.end if self.start <= self.end else self.start

    @property
    def is_empty(self) -> bool:
        return self.start == self.end


def _step_left(position: Position, lines: Lines) -> Position:
    line, column = clamp(position, lines)
    if column > 0:
        return Position(line, column - 1)
    if line == 0:
        return Position(0, 0)
    return Position(line - 1, char_count(lines, line - 1))


def _step_right(position: Position, lines: Lines) -> Position:
    line, column = clamp(position, lines)
    if column < char_count(lines, line):
        return Position(line, column + 1)
    return Position(min(line + 1, len(lines)), 0)


def _step_up(position: Position, lines: Lines) -> Position:
    # Only the line moves; the raw column is kept for sticky-column motion.
    line = clamp(position, lines).line
    return Position(max(line - 1, 0), position.column)


def _step_down(position: Position, lines: Lines) -> Position:
    line = clamp(position, lines).line
    return Position(min(line + 1, len(lines)), position.column)


@dataclass(slots=True)
class Selection:
    """Mutable pair of raw endpoints.

    Raw endpoints are stored verbatim and may be stale after edits elsewhere
    in the buffer. Every read clamps them against the lines passed in, so
    nothing derived from them is ever cached.
    """

    anchor: Position = Position(0, 0)
    active: Position = Position(0, 0)

    def true_start(self, lines: Lines) -> Position:
        return clamp(self.anchor, lines)

    def true_end(self, lines: Lines) -> Position:
        return clamp(self.active, lines)

    def min(self, lines: Lines) -> Position:
        return self.resolve(lines).min()

    def max(self, lines: Lines) -> Position:
        return self.resolve(lines).max()

    def resolve(self, lines: Lines) -> TrueSelection:
        """Return a frozen, clamped view of this selection."""

        return TrueSelection(start=self.true_start(lines), end=self.true_end(lines))

    def length(self, lines: Lines) -> int:
        """Number of code points in the half-open span ``[min, max)``.

        The character at ``max`` itself is not counted, so an empty selection
        has length 0. Line breaks are not counted either.
        """

        first, last = self.min(lines), self.max(lines)
        if first.line == last.line:
            return last.column - first.column
        total = char_count(lines, first.line) - first.column
        for index in range(first.line + 1, last.line):
            total += char_count(lines, index)
        return total + last.column

    # -- collapse -----------------------------------------------------------

    def collapse_to_start(self) -> None:
        self.active = self.anchor

    def collapse_to_end(self) -> None:
        self.anchor = self.active

    def collapse_to_true_start(self, lines: Lines) -> None:
        self.anchor = self.active = self.true_start(lines)

    def collapse_to_true_end(self, lines: Lines) -> None:
        self.anchor = self.active = self.true_end(lines)

    # -- cursor motion --------------------------------------------------------

    def move_left(self, lines: Lines) -> None:
        self.extend_end_left(lines)
        self.collapse_to_end()

    def move_right(self, lines: Lines) -> None:
        self.extend_end_right(lines)
        self.collapse_to_end()

    def move_up(self, lines: Lines) -> None:
        self.extend_end_up(lines)
        self.collapse_to_end()

    def move_down(self, lines: Lines) -> None:
        self.extend_end_down(lines)
        self.collapse_to_end()

    # -- active endpoint ------------------------------------------------------

    def extend_end_left(self, lines: Lines) -> None:
        self.active = _step_left(self.active, lines)

    def extend_end_right(self, lines: Lines) -> None:
        self.active = _step_right(self.active, lines)

    def extend_end_up(self, lines: Lines) -> None:
        self.active = _step_up(self.active, lines)

    def extend_end_down(self, lines: Lines) -> None:
        self.active = _step_down(self.active, lines)

    # -- anchor ---------------------------------------------------------------

    def extend_start_left(self, lines: Lines) -> None:
        self.anchor = _step_left(self.anchor, lines)

    def extend_start_right(self, lines: Lines) -> None:
        self.anchor = _step_right(self.anchor, lines)

    def extend_start_up(self, lines: Lines) -> None:
        self.anchor = _step_up(self.anchor, lines)

    def extend_start_down(self, lines: Lines) -> None:
        self.anchor = _step_down(self.anchor, lines)

    # -- whole range ----------------------------------------------------------

    def move_selection_left(self, lines: Lines) -> None:
        self.extend_start_left(lines)
        self.extend_end_left(lines)

    def move_selection_right(self, lines: Lines) -> None:
        self.extend_start_right(lines)
        self.extend_end_right(lines)

    def move_selection_up(self, lines: Lines) -> None:
        self.extend_start_up(lines)
        self.extend_end_up(lines)

    def move_selection_down(self, lines: Lines) -> None:
        self.extend_start_down(lines)
        self.extend_end_down(lines)


__all__ = ["Selection", "TrueSelection"]
