"""Extraction of cookies from Netscape-style tab-separated cookie logs."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Iterator, List

from .info_processor import LogInfo

_SPLIT_VALUES = re.compile(r"\t+")


def _lines(content: str) -> Iterator[str]:
    for line in content.split("\n"):
        yield line[:-1] if line.endswith("\r") else line


class EmptyCookieLogError(ValueError):
    """Raised when a cookie log yields no cookies."""


@dataclass
class Cookie:
    """One cookie entry."""

    domain: str = ""
    http_only: str = ""
    path: str = ""
    secure: str = ""
    expires_in: str = ""
    name: str = ""
    value: str = ""


@dataclass
class CookieDocument:
    """All cookies for one domain, tagged with the log's country."""

    domain: str
    country: str
    cookies: List[Cookie] = field(default_factory=list)


def _fields(line: str) -> List[str]:
    result = []
    for item in _SPLIT_VALUES.split(line):
        item = item.strip()
        if item.startswith("."):
            item = item[1:]
        if item:
            result.append(item)
    return result


class CookieLogProcessor:
    """Groups the seven-field lines of a cookie log by domain."""

    def __init__(self, info: LogInfo) -> None:
        self.info = LogInfo(country=info.country, hwid=info.hwid)

    def parse(self, content: str) -> Dict[str, CookieDocument]:
        country = self.info.country if self.info.country is not None else "UNK"
        documents: Dict[str, CookieDocument] = {}
        for line in _lines(content):
            parts = _fields(line)
            if len(parts) != 7:
                continue
            cookie = Cookie(*parts)
            document = documents.setdefault(
                cookie.domain, CookieDocument(cookie.domain, country)
            )
            document.cookies.append(cookie)
        if not documents:
            raise EmptyCookieLogError("Cookie hashmap is empty")
        return documents