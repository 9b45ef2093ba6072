"""One-line text field sharing the document operation set."""

from __future__ import annotations

from editor_engine.runtime import telemetry


class SingleLineDocument:
    """A single editable line with a cursor, used for input fields.

    Operations that need more than one line are accepted but only log a
    warning.
    """

    def __init__(self, text: str = "") -> None:
        self._line = text
        self._cursor = len(text)

    def line(self) -> str:
        return self._line

    def cursor(self) -> int:
        return self._cursor

    def clear(self) -> None:
        self._line = ""
        self._cursor = 0

    def move_left(self) -> None:
        self._cursor = max(self._cursor - 1, 0)

    def move_right(self) -> None:
        self._cursor = min(self._cursor + 1, len(self._line))

    def move_up(self) -> None:
        self._unsupported("move_up")

    def move_down(self) -> None:
        self._unsupported("move_down")

    def insert(self, ch: str) -> None:
        self._line = self._line[: self._cursor] + ch + self._line[self._cursor :]
        self._cursor += 1

    def delete_before(self) -> None:
        if self._cursor == 0:
            return
        self._cursor -= 1
        self._line = self._line[: self._cursor] + self._line[self._cursor + 1 :]

    def insert_line_before_cursor(self) -> None:
        self._unsupported("insert_line_before_cursor")

    def write(self) -> None:
        self._unsupported("write")

    def _unsupported(self, operation: str) -> None:
        telemetry.record_event(
            "single_line.unsupported",
            level="warning",
            data={"operation": operation},
        )

    def __repr__(self) -> str:
        return f"SingleLineDocument(line={self._line!r}, cursor={self._cursor})"


__all__ = ["SingleLineDocument"]
