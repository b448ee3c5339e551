"""Pytest fixtures for napisy tests."""

from __future__ import annotations

import base64
import hashlib
from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

from napisy.domain.value_objects import Digest

# MD5 of the empty byte sequence.
EMPTY_MD5_HEX = "d41d8cd98f00b204e9800998ecf8427e"


def download_xml(status: str = "success", content: bytes = b"") -> bytes:
    """Build download endpoint response body."""
    encoded = base64.b64encode(content).decode()
    return (
        "<?xml version=\"1.0\" encoding=\"UTF-8\"?>"
        "<result>"
        f"<status>{status}</status>"
        "<subtitles>"
        "<id>abc</id>"
        f"<content><![CDATA[{encoded}]]></content>"
        "</subtitles>"
        "</result>"
    ).encode()


@pytest.fixture
def empty_digest() -> Digest:
    return Digest.from_hex(EMPTY_MD5_HEX)


@pytest.fixture
def video_file(tmp_path: Path) -> Path:
    """Small fake video file."""
    path = tmp_path / "movie.avi"
    path.write_bytes(b"RIFF" + bytes(range(256)) * 4)
    return path


@pytest.fixture
def video_digest(video_file: Path) -> Digest:
    return Digest(hashlib.md5(video_file.read_bytes()).digest())


@pytest.fixture
def mock_transport() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient]:
    """Factory: AsyncClient whose requests go to given handler."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def mock_subtitles_api():
    """AsyncMock for SubtitlesApi - every language available, fixed text."""
    from unittest.mock import AsyncMock

    mock = AsyncMock()
    mock.search.return_value = True
    mock.download.return_value = "1\n00:00:01,000 --> 00:00:02,000\nHello\n"
    return mock
