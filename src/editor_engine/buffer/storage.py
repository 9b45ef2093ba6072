"""On-disk format: UTF-8 text, lines joined by ``\\n``, no trailing newline."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

ENCODING = "utf-8"


def split_lines(text: str) -> List[str]:
    """Split on ``\\n`` only; a final terminator does not start a new line."""

    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def read_lines(path: Path) -> List[str]:
    """Read ``path`` into terminator-free lines.

    Raises ``OSError`` or ``UnicodeDecodeError``; callers decide whether an
    unreadable file is an error.
    """

    # newline="" disables universal-newline translation in both directions.
    with path.open(encoding=ENCODING, newline="") as handle:
        return split_lines(handle.read())


def write_lines(path: Path, lines: Iterable[str]) -> None:
    with path.open("w", encoding=ENCODING, newline="") as handle:
        handle.write("\n".join(lines))


__all__ = ["ENCODING", "read_lines", "split_lines", "write_lines"]
