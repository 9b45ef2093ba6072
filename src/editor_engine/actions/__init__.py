"""Named editing actions and their dispatch onto documents."""

from .document import DocumentAction, dispatch

__all__ = [
    "DocumentAction",
    "dispatch",
]
