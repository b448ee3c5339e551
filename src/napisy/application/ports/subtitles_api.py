"""Subtitles API port - remote lookup service."""

from typing import Protocol

from napisy.domain.value_objects import Digest


class SubtitlesApi(Protocol):
    """Port for searching and downloading subtitles by file digest."""

    async def search(self, digest: Digest, fingerprint: str, lang: str) -> bool: ...

    async def download(self, digest: Digest, lang: str) -> str: ...
