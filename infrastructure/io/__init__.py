"""I/O utilities: filesystem operations."""

from infrastructure.io.fs import ensure_exists, read_text, write_text

__all__ = [
    "ensure_exists",
    "read_text",
    "write_text",
]
