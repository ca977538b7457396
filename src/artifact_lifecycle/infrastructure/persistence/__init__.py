"""
Persistence Infrastructure

File-system operations for staged artifacts.
"""

from .file_mover import move_temporary_file, remove_temporary_file

__all__ = ["move_temporary_file", "remove_temporary_file"]
