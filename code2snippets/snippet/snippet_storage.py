from __future__ import annotations

import logging
from typing import Any, Dict, List

from .model import SnippetRecord

logger = logging.getLogger("code2snippets")

SnippetGroup = Dict[str, SnippetRecord]


class SnippetStore:
    """In-memory snippets grouped by file extension, then by snippet name."""

    def __init__(self) -> None:
        self.groups: Dict[str, SnippetGroup] = {}

    def add_record(self, extension: str, name: str, content: str) -> SnippetRecord:
        """Insert or overwrite the snippet ``name`` in the ``extension`` group."""
        group = self.groups.get(extension)
        if group is None:
            group = {}
            self.groups[extension] = group

        if name in group:
            logger.debug("Replacing snippet %r in group %r", name, extension)

        record = SnippetRecord(prefix=name, description="", body=content)
        group[name] = record
        return record

    def get_group(self, extension: str) -> SnippetGroup:
        return self.groups[extension]

    def extensions(self) -> List[str]:
        return sorted(self.groups)

    def group_payload(self, extension: str) -> Dict[str, Any]:
        """Return the JSON-ready object for one extension, keyed by snippet name."""
        group = self.groups[extension]
        return {name: group[name].model_dump(mode="json") for name in sorted(group)}

    def get_snippet_count(self) -> int:
        """Get the total number of stored snippets across all extensions."""
        return sum(len(group) for group in self.groups.values())

    def clear_snippets(self) -> None:
        self.groups = {}

    def __len__(self) -> int:
        return len(self.groups)


__all__ = ["SnippetGroup", "SnippetStore"]
