import logging
import time
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from ..config import SnippetConfig
from ..snippet import SnippetStore
from ..utils.file_loader import FileLoader, PathLike
from ..writer import SnippetWriter


logger = logging.getLogger("code2snippets")


class ConversionPipeline:
    """Collects snippets from input paths and writes one JSON file per extension."""

    def __init__(self, config: Optional[SnippetConfig] = None) -> None:
        self.config = config if config is not None else SnippetConfig()
        self.loader = FileLoader()
        self.writer = SnippetWriter(self.config)
        self.store = SnippetStore()
        self._last_run_stats: Optional[Dict[str, Union[int, float]]] = None

    def collect(self, paths: Sequence[PathLike]) -> SnippetStore:
        """Fill a fresh store from ``paths``, stopping at the first error."""
        self.store.clear_snippets()
        for path in paths:
            count = self.loader.collect(path, self.store)
            logger.info("Collected %d files from %s", count, path)
        return self.store

    def run(self, paths: Sequence[PathLike]) -> List[Path]:
        """Convert every file under ``paths`` and return the written snippet files."""
        start_time = time.time()
        self._last_run_stats = None

        store = self.collect(paths)
        written = self.writer.write(store)

        stats: Dict[str, Union[int, float]] = {
            "total_groups": len(store),
            "total_snippets": store.get_snippet_count(),
            "files_written": len(written),
            "duration": time.time() - start_time,
        }
        self._last_run_stats = stats

        logger.info(
            "Conversion complete: %d snippets in %d files, %.1fs elapsed",
            stats["total_snippets"],
            stats["files_written"],
            stats["duration"],
        )
        return written

    @property
    def last_run_stats(self) -> Optional[Dict[str, Union[int, float]]]:
        """Return summary statistics for the last successful run."""
        return self._last_run_stats


def convert_paths(
    paths: Sequence[PathLike],
    *,
    indent: Optional[str] = None,
    output_dir: Optional[str] = None,
) -> List[Path]:
    """Convenience helper to run the conversion pipeline with default options."""
    config = SnippetConfig()
    if indent is not None:
        config.indent = indent
    if output_dir is not None:
        config.output_dir = output_dir
    return ConversionPipeline(config).run(paths)
