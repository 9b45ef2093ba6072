"""Line-structured document owning its text, selection, and dirty flag."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from editor_engine.runtime import telemetry

from .position import Position, char_count
from .selection import Selection, TrueSelection
from .storage import read_lines, write_lines

SCRATCH_NAME = "[scratch]"


class Document:
    """Editable text buffer addressed by a raw/true range selection.

    Lines are stored without terminators. The line index equal to
    ``line_count`` is a virtual line: the selection may sit there, and
    inserting into it appends a real line. Every index used for a mutation
    comes from a clamped selection endpoint, so stale endpoints can never
    address text outside the buffer.
    """

    def __init__(
        self,
        *,
        path: Optional[Path | str] = None,
        lines: Optional[Iterable[str]] = None,
        selection: Optional[Selection] = None,
    ) -> None:
        self._path = Path(path) if path is not None else None
        self._lines: List[str] = list(lines or [])
        self._selection = selection or Selection()
        self._dirty = False

    @classmethod
    def from_path(cls, path: Path | str) -> "Document":
        """Open ``path``; a missing or unreadable file gives an empty buffer."""

        path = Path(path)
        try:
            lines = read_lines(path)
        except (OSError, UnicodeDecodeError) as exc:
            telemetry.record_event(
                "document.open_failed",
                level="debug",
                data={"path": str(path), "reason": str(exc)},
            )
            lines = []
        return cls(path=path, lines=lines)

    @classmethod
    def new_scratch(cls) -> "Document":
        return cls()

    # -- read accessors -------------------------------------------------------

    def selection(self) -> TrueSelection:
        return self._selection.resolve(self._lines)

    def lines(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    def get_line(self, index: int) -> Optional[str]:
        if 0 <= index < len(self._lines):
            return self._lines[index]
        return None

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def dirty(self) -> bool:
        return self._dirty

    def path(self) -> Optional[Path]:
        return self._path

    @property
    def is_scratch(self) -> bool:
        return self._path is None

    def display_name(self) -> str:
        if self._path is None:
            return SCRATCH_NAME
        return str(self._path)

    # -- movement -------------------------------------------------------------

    def move_left(self) -> None:
        self._selection.move_left(self._lines)

    def move_right(self) -> None:
        self._selection.move_right(self._lines)

    def move_up(self) -> None:
        self._selection.move_up(self._lines)

    def move_down(self) -> None:
        self._selection.move_down(self._lines)

    def extend_start_left(self) -> None:
        self._selection.extend_start_left(self._lines)

    def extend_start_right(self) -> None:
        self._selection.extend_start_right(self._lines)

    def extend_start_up(self) -> None:
        self._selection.extend_start_up(self._lines)

    def extend_start_down(self) -> None:
        self._selection.extend_start_down(self._lines)

    def extend_end_left(self) -> None:
        self._selection.extend_end_left(self._lines)

    def extend_end_right(self) -> None:
        self._selection.extend_end_right(self._lines)

    def extend_end_up(self) -> None:
        self._selection.extend_end_up(self._lines)

    def extend_end_down(self) -> None:
        self._selection.extend_end_down(self._lines)

    def move_selection_left(self) -> None:
        self._selection.move_selection_left(self._lines)

    def move_selection_right(self) -> None:
        self._selection.move_selection_right(self._lines)

    def move_selection_up(self) -> None:
        self._selection.move_selection_up(self._lines)

    def move_selection_down(self) -> None:
        self._selection.move_selection_down(self._lines)

    # -- editing --------------------------------------------------------------

    def insert(self, ch: str) -> None:
        """Insert ``ch`` at the start endpoint.

        A selection that starts and ends on one line collapses to a cursor
        just past the new character. A selection spanning several lines only
        grows its start endpoint, leaving the end where it was.
        """

        selection = self._selection
        start = selection.true_start(self._lines)
        end = selection.true_end(self._lines)

        line = self._line_for_edit(start.line)
        self._lines[start.line] = line[: start.column] + ch + line[start.column :]

        # Step from the column the text went in at, not a sticky raw column.
        selection.anchor = start
        if start.line == end.line:
            selection.collapse_to_start()
            selection.move_right(self._lines)
        else:
            selection.extend_start_right(self._lines)
        self._dirty = True

    def delete_before(self) -> None:
        """Delete the character before the start endpoint.

        At column 0 the current line is joined onto the previous one. Nothing
        happens at ``(0, 0)``.
        """

        lines = self._lines
        selection = self._selection

        before = selection.true_start(lines)
        saved = (selection.anchor, selection.active)
        selection.extend_start_left(lines)
        start = selection.true_start(lines)
        if start == before:
            return
        if start.line == selection.true_end(lines).line:
            selection.extend_end_left(lines)

        if start.column < char_count(lines, start.line):
            line = lines[start.line]
            lines[start.line] = line[: start.column] + line[start.column + 1 :]
            self._dirty = True
            return

        following = start.line + 1
        if following >= len(lines):
            # Nothing to join: leave the selection where it was.
            selection.anchor, selection.active = saved
            return

        end = selection.true_end(lines)
        joined_at = len(lines[start.line])
        lines[start.line] += lines.pop(following)
        if end.line == following:
            selection.active = Position(start.line, joined_at + end.column)
        elif end.line > following:
            selection.active = Position(end.line - 1, selection.active.column)
        self._dirty = True

    def insert_line_before_cursor(self) -> None:
        """Split the line at the start endpoint, moving the tail below it.

        The start endpoint lands at column 0 of the new line. The end
        endpoint moves down one line; when it sat on the split line past the
        split point it keeps addressing the same character.
        """

        lines = self._lines
        selection = self._selection
        start = selection.true_start(lines)
        end = selection.true_end(lines)

        line = self._line_for_edit(start.line)
        lines[start.line] = line[: start.column]
        lines.insert(start.line + 1, line[start.column :])

        selection.anchor = start
        selection.extend_start_right(lines)
        if end.line == start.line and end.column >= start.column:
            selection.active = Position(start.line + 1, end.column - start.column)
        elif end.line > start.line:
            selection.extend_end_down(lines)
        self._dirty = True

    def write(self) -> None:
        """Save to the backing path.

        Scratch documents and clean documents are left alone. A failed write
        is logged and keeps the document dirty so a later call can retry.
        """

        if not self._dirty or self._path is None:
            return

        with telemetry.span(
            "document.write",
            component="document",
            metadata={"path": str(self._path)},
        ):
            try:
                write_lines(self._path, self._lines)
            except OSError as exc:
                telemetry.record_event(
                    "document.write_failed",
                    level="error",
                    data={"path": str(self._path), "reason": str(exc)},
                )
                return

        self._dirty = False
        telemetry.record_event(
            "document.written",
            data={"path": str(self._path), "lines": len(self._lines)},
        )

    def _line_for_edit(self, index: int) -> str:
        # Editing the virtual line turns it into a real, empty one.
        while index >= len(self._lines):
            self._lines.append("")
        return self._lines[index]

    def __repr__(self) -> str:
        return (
            f"Document(name={self.display_name()!r}, lines={len(self._lines)}, "
            f"dirty={self._dirty})"
        )


__all__ = ["Document", "SCRATCH_NAME"]
