"""Convert source files into VS Code user snippet definitions."""

from .config import SnippetConfig, default_output_dir
from .exception_handler import CollectionError, ErrorHandler, SnippetError, WriteError
from .orchestration import ConversionPipeline, convert_paths
from .snippet import SnippetRecord, SnippetStore
from .utils import FileData, FileLoader
from .writer import SnippetWriter

__all__ = [
    "CollectionError",
    "ConversionPipeline",
    "ErrorHandler",
    "FileData",
    "FileLoader",
    "SnippetConfig",
    "SnippetError",
    "SnippetRecord",
    "SnippetStore",
    "SnippetWriter",
    "WriteError",
    "convert_paths",
    "default_output_dir",
]
