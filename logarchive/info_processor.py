"""Extraction of machine information from an info log."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


def _lines(content: str) -> Iterator[str]:
    for line in content.split("\n"):
        yield line[:-1] if line.endswith("\r") else line


@dataclass
class LogInfo:
    """Country and hardware id reported by a log; None when absent."""

    country: Optional[str] = None
    hwid: Optional[str] = None


class InfoLogProcessor:
    """Parses "key: value" lines for the country and hwid fields."""

    def parse(self, content: str) -> LogInfo:
        info = LogInfo()
        for line in _lines(content):
            key, sep, value = line.partition(":")
            if not sep:
                continue
            key = key.strip().lower()
            value = value.strip()
            if not value:
                continue
            if key == "hwid":
                info.hwid = value
            elif key == "country":
                info.country = value
        return info