"""Operation set shared by every editable text surface."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DocumentActionHandler(Protocol):
    """Protocol implemented by ``Document`` and ``SingleLineDocument``.

    Surfaces that cannot support an operation structurally (a one-line input
    field has no lines to move between) implement it as a logged no-op.
    """

    def move_left(self) -> None: ...

    def move_right(self) -> None: ...

    def move_up(self) -> None: ...

    def move_down(self) -> None: ...

    def insert(self, ch: str) -> None:
        """Insert a single character at the cursor."""
        ...

    def delete_before(self) -> None:
        """Delete the character before the cursor, merging lines at column 0."""
        ...

    def insert_line_before_cursor(self) -> None:
        """Split the current line at the cursor."""
        ...

    def write(self) -> None:
        """Persist unsaved changes, if the surface has a backing file."""
        ...


__all__ = ["DocumentActionHandler"]
