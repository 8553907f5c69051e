"""Extraction of saved credentials from a password log."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .info_processor import LogInfo


def _lines(content: str) -> Iterator[str]:
    for line in content.split("\n"):
        yield line[:-1] if line.endswith("\r") else line


@dataclass
class Credential:
    """A URL with the username and password stored for it."""

    url: Optional[str] = ""
    username: Optional[str] = ""
    password: Optional[str] = ""
    infos: LogInfo = field(default_factory=LogInfo)


class PassLogProcessor:
    """Parses "url/username/password: value" blocks into credentials.

    A credential is emitted when the next "url" line is met and the
    previously seen url, username and password are all non-empty; the
    values read so far are kept between blocks.
    """

    def __init__(self, info: LogInfo) -> None:
        self.info = dataclasses.replace(info)

    def parse(self, content: str) -> List[Credential]:
        credentials: List[Credential] = []
        url = username = password = ""
        for line in _lines(content):
            if not line.strip() or "=" in line:
                continue
            key, sep, value = line.partition(":")
            if not sep:
                continue
            key = key.lower()
            value = value.strip()
            if key == "url":
                if url and username and password:
                    credentials.append(
                        Credential(
                            url=url,
                            username=username,
                            password=password,
                            infos=dataclasses.replace(self.info),
                        )
                    )
                url = value
            elif key == "username":
                username = value
            elif key == "password":
                password = value
        return credentials