"""Selection of archive entries and grouping of them by log folder."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from .archive import FilterOptions

Pattern = Union[str, "re.Pattern[str]"]


def extract_log_folder(path: str) -> str:
    """Return the first component of a slash-separated entry path."""
    return path.split("/", 1)[0]


class LogFilter:
    """Matches archive entry names against name patterns and extensions."""

    def __init__(
        self,
        names: Optional[Iterable[Pattern]] = None,
        extensions: Optional[Iterable[str]] = None,
    ) -> None:
        if names is None:
            # Extensions only take effect together with name patterns.
            self.options = FilterOptions()
        else:
            compiled = tuple(re.compile(pattern) for pattern in names)
            exts = tuple(extensions) if extensions is not None else None
            self.options = FilterOptions(compiled, exts)
        self.relation_map: Dict[str, List[str]] = {}

    def matches(self, item: str) -> bool:
        """Return True if the entry passes every pattern and any extension."""
        if Path(item).is_dir():
            return False
        names = self.options.names
        extensions = self.options.extensions
        if names is not None and not all(p.search(item) for p in names):
            return False
        if extensions is not None and not any(item.endswith(e) for e in extensions):
            return False
        return True

    def relation_mapper(self, items: Iterable[str]) -> Dict[str, List[str]]:
        """Group entries by their log folder, accumulating across calls."""
        for item in items:
            self.relation_map.setdefault(extract_log_folder(item), []).append(item)
        return self.relation_map