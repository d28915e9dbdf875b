"""Snippet records and the per-extension store."""

from .model import SnippetRecord, split_body
from .snippet_storage import SnippetGroup, SnippetStore

__all__ = ["SnippetGroup", "SnippetRecord", "SnippetStore", "split_body"]
