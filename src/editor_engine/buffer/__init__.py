"""Line storage, selections, and the documents built on them."""

from .document import SCRATCH_NAME, Document
from .handler import DocumentActionHandler
from .position import Position, char_count, clamp
from .selection import Selection, TrueSelection
from .single_line import SingleLineDocument
from .storage import read_lines, split_lines, write_lines

__all__ = [
    "Document",
    "DocumentActionHandler",
    "Position",
    "SCRATCH_NAME",
    "Selection",
    "SingleLineDocument",
    "TrueSelection",
    "char_count",
    "clamp",
    "read_lines",
    "split_lines",
    "write_lines",
]
