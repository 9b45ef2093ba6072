"""Document actions shared by every ``DocumentActionHandler``."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from editor_engine.buffer.handler import DocumentActionHandler
from editor_engine.runtime import telemetry


class DocumentAction(str, Enum):
    """Actions every editable surface accepts; values name handler methods."""

    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    INSERT = "insert"
    DELETE_BEFORE = "delete_before"
    INSERT_LINE_BEFORE_CURSOR = "insert_line_before_cursor"
    WRITE = "write"

    @property
    def has_args(self) -> bool:
        return self is DocumentAction.INSERT


def dispatch(
    handler: DocumentActionHandler,
    action: DocumentAction,
    *,
    char: Optional[str] = None,
) -> None:
    """Run ``action`` against ``handler``.

    ``char`` is required for ``INSERT`` and must be exactly one character;
    it is rejected for every other action.
    """

    action = DocumentAction(action)
    if action.has_args:
        if char is None or len(char) != 1:
            raise ValueError(
                f"{action.value} requires a single character, got {char!r}"
            )
    elif char is not None:
        raise ValueError(f"{action.value} does not take a character")

    telemetry.record_event(
        "action.dispatch",
        level="debug",
        data={"action": action.value, "handler": type(handler).__name__},
    )

    if action is DocumentAction.INSERT:
        handler.insert(char)  # type: ignore[arg-type]
    else:
        getattr(handler, action.value)()


__all__ = ["DocumentAction", "dispatch"]
