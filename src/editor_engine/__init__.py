"""Text-buffer and selection engine for a modal terminal editor."""

__all__ = [
    "actions",
    "buffer",
    "runtime",
]

__version__ = "0.1.0"
