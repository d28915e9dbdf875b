import errno
import logging
import os
import stat
from pathlib import Path
from typing import Iterator, NamedTuple, Tuple, Union

from ..exception_handler import CollectionError
from ..snippet import SnippetStore


PathLike = Union[str, "os.PathLike[str]"]


class FileData(NamedTuple):
    """A source file loaded for conversion into a snippet."""
    path: str
    base_name: str
    extension: str
    content: str


def split_name(path: PathLike) -> Tuple[str, str]:
    """Split a file path into its base name and extension.

    The extension is everything after the last ``.`` of the file name, without
    the dot; a name with no dot has an empty extension. Bytes in the base name
    that are not valid UTF-8 are replaced, as they are in file content.
    """
    file_name = os.path.basename(os.fspath(path))
    base_name, dot, extension = file_name.rpartition(".")
    if not dot:
        base_name, extension = file_name, ""
    return os.fsencode(base_name).decode("utf-8", errors="replace"), extension


class FileLoader:
    """Walks input paths and feeds every file into a snippet store."""

    logger = logging.getLogger("code2snippets")

    def iter_files(self, path: PathLike) -> Iterator[str]:
        """Yield every non-directory entry reachable from ``path`` in lexical order.

        Raises:
            CollectionError: If ``path`` is missing or a directory can't be listed
        """
        root = os.fspath(path)

        try:
            os.stat(root)
        except OSError as exc:
            raise CollectionError(f"walking {root}: {exc}") from exc

        if not os.path.isdir(root):
            yield root
            return

        try:
            yield from self._walk_directory(root)
        except OSError as exc:
            raise CollectionError(f"walking {root}: {exc}") from exc

    def _walk_directory(self, dir_path: str) -> Iterator[str]:
        """Recursively yield every non-directory entry, visiting entries by name.

        Symlinks are never descended into; they are yielded like files.
        """
        for name in sorted(os.listdir(dir_path)):
            entry_path = os.path.join(dir_path, name)
            if os.path.isdir(entry_path) and not os.path.islink(entry_path):
                yield from self._walk_directory(entry_path)
            else:
                yield entry_path

    def read_file(self, path: PathLike) -> FileData:
        """Read a file's full content; undecodable bytes are replaced."""
        path_str = os.fspath(path)
        try:
            mode = os.stat(path_str).st_mode
            if not (stat.S_ISREG(mode) or stat.S_ISDIR(mode)):
                # Opening a FIFO would block.
                raise OSError(errno.EINVAL, "not a regular file", path_str)
            raw = Path(path_str).read_bytes()
        except OSError as exc:
            raise CollectionError(f"reading {path_str}: {exc}") from exc

        base_name, extension = split_name(path_str)
        return FileData(
            path=path_str,
            base_name=base_name,
            extension=extension,
            content=raw.decode("utf-8", errors="replace"),
        )

    def collect(self, path: PathLike, store: SnippetStore) -> int:
        """Add every file under ``path`` to ``store`` and return how many were added.

        Args:
            path: File or directory to convert
            store: Store receiving one record per file

        Raises:
            CollectionError: On the first path that can't be walked or read;
                nothing after it is collected
        """
        root = os.fspath(path)
        count = 0
        for file_path in self.iter_files(root):
            try:
                file_data = self.read_file(file_path)
            except CollectionError as exc:
                raise CollectionError(f"walking {root}: {exc}") from exc.__cause__

            if not file_data.extension:
                self.logger.info(
                    "%s has no extension; grouping it under an empty extension",
                    file_data.path,
                )
            store.add_record(file_data.extension, file_data.base_name, file_data.content)
            self.logger.debug(
                "Collected %s as %r in group %r",
                file_data.path,
                file_data.base_name,
                file_data.extension,
            )
            count += 1
        return count
