"""Loading file content into viewports."""

from .loader import aload_file, load_file, read_text

__all__ = ["aload_file", "load_file", "read_text"]
