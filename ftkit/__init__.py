"""C-style character, memory, string, file-descriptor output and printf helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "output", "printf"]