"""Orchestration components for converting files into snippets."""

from .conversion import ConversionPipeline, convert_paths

__all__ = ["ConversionPipeline", "convert_paths"]
