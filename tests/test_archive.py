import hashlib

import pytest

from logarchive.archive import (
    READ_LIMIT,
    FilterOptions,
    SupportedExtension,
    generate_hash,
    is_registered,
    register_hash,
    verify_existence,
    verify_extension,
)


def test_hash_of_empty_file(tmp_path):
    target = tmp_path / "empty.bin"
    target.write_bytes(b"")
    assert generate_hash(target) == "d41d8cd98f00b204e9800998ecf8427e"


def test_hash_matches_md5_of_small_file(tmp_path):
    data = b"some log content\n" * 5000
    target = tmp_path / "log.txt"
    target.write_bytes(data)
    assert generate_hash(target) == hashlib.md5(data).hexdigest()


def test_hash_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        generate_hash(tmp_path / "missing.bin")


def test_verify_existence(tmp_path):
    target = tmp_path / "present.txt"
    target.write_text("x")
    assert verify_existence(target) is True
    with pytest.raises(FileNotFoundError, match="file_not_exists"):
        verify_existence(tmp_path / "absent.txt")


@pytest.mark.parametrize(
    "name, expected",
    [
        ("logs.zip", SupportedExtension.ZIP),
        ("logs.rar", SupportedExtension.UNSUPPORTED),
        ("logs.ZIP", SupportedExtension.UNSUPPORTED),
        ("logs", SupportedExtension.UNSUPPORTED),
    ],
)
def test_verify_extension(tmp_path, name, expected):
    target = tmp_path / name
    target.write_bytes(b"")
    assert verify_extension(target) is expected


def test_verify_extension_rejects_directory(tmp_path):
    with pytest.raises(ValueError):
        verify_extension(tmp_path)


def test_registry_round_trip(tmp_path):
    registry = tmp_path / "hashes.txt"
    assert is_registered("abc", registry) is False
    register_hash("abc", registry)
    register_hash("def", registry)
    assert is_registered("abc", registry) is True
    assert is_registered("def", registry) is True
    assert is_registered("ghi", registry) is False
    assert registry.read_text().splitlines() == ["abc", "def"]


def test_filter_options_defaults():
    options = FilterOptions()
    assert (options.names, options.extensions) == (None, None)