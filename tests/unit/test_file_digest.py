"""Unit tests for file digest extraction."""

import hashlib
from pathlib import Path

import pytest

from napisy.infrastructure.digest import HASH_READ_SIZE, extract_digest
from tests.conftest import EMPTY_MD5_HEX


def test_digest_of_small_file(video_file: Path) -> None:
    """Short file is hashed over exactly the bytes present."""
    expected = hashlib.md5(video_file.read_bytes()).digest()
    assert extract_digest(video_file).value == expected


def test_short_file_not_zero_padded(tmp_path: Path) -> None:
    path = tmp_path / "short.mkv"
    path.write_bytes(b"abc")
    assert extract_digest(path).hex == "900150983cd24fb0d6963f7d28e17f72"
    assert extract_digest(path).value != hashlib.md5(b"abc".ljust(HASH_READ_SIZE, b"\x00")).digest()


def test_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "empty.mp4"
    path.write_bytes(b"")
    assert extract_digest(path).hex == EMPTY_MD5_HEX


def test_only_prefix_is_hashed(tmp_path: Path) -> None:
    prefix = b"\x01" * 64
    a = tmp_path / "a.avi"
    b = tmp_path / "b.avi"
    a.write_bytes(prefix + b"tail one")
    b.write_bytes(prefix + b"different tail")
    assert extract_digest(a, read_size=64) == extract_digest(b, read_size=64)
    assert extract_digest(a, read_size=64).value == hashlib.md5(prefix).digest()


def test_default_read_size_limit(tmp_path: Path) -> None:
    path = tmp_path / "big.avi"
    data = b"\x07" * HASH_READ_SIZE
    path.write_bytes(data + b"trailing bytes ignored")
    assert extract_digest(path).value == hashlib.md5(data).digest()


def test_repeated_extraction_is_stable(video_file: Path) -> None:
    assert extract_digest(video_file) == extract_digest(video_file)


def test_accepts_str_path(video_file: Path) -> None:
    assert extract_digest(str(video_file)) == extract_digest(video_file)


def test_missing_file_raises_os_error(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        extract_digest(tmp_path / "missing.avi")


def test_directory_raises_os_error(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        extract_digest(tmp_path)
