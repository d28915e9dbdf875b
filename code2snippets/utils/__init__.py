"""Shared utility modules for the converter."""

from .file_loader import FileData, FileLoader, split_name

__all__ = [
    "FileData",
    "FileLoader",
    "split_name",
]
