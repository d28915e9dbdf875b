"""Persist grouped snippets as one JSON document per extension."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List

from tqdm import tqdm

from .config import SnippetConfig
from .exception_handler import WriteError
from .snippet import SnippetStore

logger = logging.getLogger("code2snippets")


class SnippetWriter:
    """Writes each extension group of a store to ``<output_dir>/<extension>.json``."""

    def __init__(self, config: SnippetConfig) -> None:
        self.config = config

    @property
    def output_dir(self) -> Path:
        return Path(self.config.output_dir)

    def ensure_output_dir(self) -> Path:
        """Create the output directory and its parents when missing."""
        output_dir = self.output_dir
        if output_dir.is_dir():
            return output_dir
        try:
            output_dir.mkdir(mode=0o755, parents=True, exist_ok=True)
        except OSError as exc:
            raise WriteError(f"creating {self.config.output_dir}: {exc}") from exc
        logger.info("Created output directory %s", output_dir)
        return output_dir

    def _progress_disabled(self) -> bool | None:
        # None lets tqdm decide based on whether stderr is a TTY.
        if self.config.show_progress is None:
            return None
        return not self.config.show_progress

    def render(self, store: SnippetStore, extension: str) -> str:
        payload = store.group_payload(extension)
        return json.dumps(payload, indent=self.config.indent, ensure_ascii=False) + "\n"

    def write(self, store: SnippetStore) -> List[Path]:
        """Write every group and return the written paths.

        Stops at the first failure. Files written before it are left in place.
        """
        output_dir = self.ensure_output_dir()
        written: List[Path] = []

        extensions = store.extensions()
        # The bar is erased when closed, including on error.
        with tqdm(
            extensions,
            desc="Writing snippets",
            unit="file",
            leave=False,
            disable=self._progress_disabled(),
        ) as progress:
            for extension in progress:
                written.append(self._write_group(store, extension, output_dir))

        return written

    def _write_group(self, store: SnippetStore, extension: str, output_dir: Path) -> Path:
        file_path = output_dir / f"{extension}.json"
        try:
            text = self.render(store, extension)
        except (TypeError, ValueError) as exc:
            raise WriteError(f"encoding {file_path}: {exc}") from exc

        try:
            with open(file_path, "w", encoding="utf-8", newline="\n") as file_handle:
                file_handle.write(text)
        except OSError as exc:
            raise WriteError(f"creating {file_path}: {exc}") from exc
        except UnicodeEncodeError as exc:
            raise WriteError(f"encoding {file_path}: {exc}") from exc

        logger.debug(
            "Wrote %d snippets to %s",
            len(store.get_group(extension)),
            file_path,
        )
        return file_path


__all__ = ["SnippetWriter"]
