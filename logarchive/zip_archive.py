"""Read access to log entries stored in a zip archive."""

from __future__ import annotations

import zipfile
from typing import Any, List

from .archive import PathLike


class ZipLogArchive:
    """A zip file whose entries can be listed, filtered and read as text."""

    def __init__(self, path: PathLike) -> None:
        self._archive = zipfile.ZipFile(path)

    def enumerate(self, log_filter: Any) -> List[str]:
        """Return the entry names accepted by the filter's matches()."""
        return [name for name in self._archive.namelist() if log_filter.matches(name)]

    def read(self, filename: str) -> str:
        """Return an entry's content decoded as UTF-8, replacing bad bytes."""
        try:
            data = self._archive.read(filename)
        except KeyError as exc:
            raise FileNotFoundError(f"no entry named {filename!r} in archive") from exc
        return data.decode("utf-8", errors="replace")

    def close(self) -> None:
        self._archive.close()

    def __enter__(self) -> "ZipLogArchive":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()