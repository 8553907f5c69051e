"""Archive helpers: content hashing, path checks and the processed-hash registry."""

from __future__ import annotations

import hashlib
import os
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple, Union

PathLike = Union[str, "os.PathLike[str]"]

READ_LIMIT = 100 * 1024 * 1024
DEFAULT_REGISTRY = "hashes.txt"
_CHUNK_SIZE = 1024 * 1024


@dataclass(frozen=True)
class FilterOptions:
    """Name patterns and file extensions used to select archive entries."""

    names: Optional[Tuple[re.Pattern, ...]] = None
    extensions: Optional[Tuple[str, ...]] = None


class SupportedExtension(Enum):
    """Archive formats that can be opened."""

    ZIP = "zip"
    UNSUPPORTED = "unsupported"


def generate_hash(path: PathLike) -> str:
    """Return the hex MD5 digest of the first 100 MiB of a file."""
    digest = hashlib.md5()
    remaining = READ_LIMIT
    with open(path, "rb") as handle:
        while remaining > 0:
            chunk = handle.read(min(_CHUNK_SIZE, remaining))
            if not chunk:
                break
            digest.update(chunk)
            remaining -= len(chunk)
    return digest.hexdigest()


def verify_existence(path: PathLike) -> bool:
    """Return True if the path exists, raise FileNotFoundError otherwise."""
    if not Path(path).exists():
        raise FileNotFoundError("file_not_exists")
    return True


def verify_extension(path: PathLike) -> SupportedExtension:
    """Classify a file by its extension; the path must name a regular file."""
    filepath = Path(path)
    if not filepath.is_file():
        raise ValueError("path must be a file")
    if filepath.suffix == ".zip":
        return SupportedExtension.ZIP
    return SupportedExtension.UNSUPPORTED


def register_hash(hash_value: str, registry: PathLike = DEFAULT_REGISTRY) -> None:
    """Append a hash to the registry file, creating it if needed."""
    with open(registry, "a", encoding="utf-8") as handle:
        handle.write(f"{hash_value}\n")


def is_registered(hash_value: str, registry: PathLike = DEFAULT_REGISTRY) -> bool:
    """Return True if the hash is listed in the registry file."""
    registry_path = Path(registry)
    if not registry_path.exists():
        return False
    with open(registry_path, encoding="utf-8") as handle:
        return any(line.strip() == hash_value for line in handle)