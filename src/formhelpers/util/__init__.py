"""
Shared utility helpers.
"""

from .filesystem import ensure_directory, write_text_file

__all__ = ["ensure_directory", "write_text_file"]
