from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, field_serializer


def split_body(content: str) -> List[str]:
    """Split file content into snippet body lines.

    A single trailing newline is dropped so that ``"a\\nb\\n"`` and
    ``"a\\nb"`` produce the same lines; any further trailing newlines
    survive as empty entries.
    """
    if content.endswith("\n"):
        content = content[:-1]
    return content.split("\n")


class SnippetRecord(BaseModel):
    """One editor snippet generated from a source file."""

    prefix: str
    description: str = ""
    body: str

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_serializer("body")
    def _serialize_body(self, body: str) -> List[str]:
        return split_body(body)


__all__ = ["SnippetRecord", "split_body"]
