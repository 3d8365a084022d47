"""Small toolkit of string, memory, linked-list, line-reading, colour-name, in-memory image and XPM helpers."""

__version__ = "0.1.0"

__all__ = [
    "bounded",
    "chars",
    "colors",
    "image",
    "line_reader",
    "linked_list",
    "memory",
    "output",
    "strings",
    "xpm",
]