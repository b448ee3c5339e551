"""Search subtitles use case."""

import logging
from collections.abc import Callable, Sequence
from os import PathLike

from napisy.application.dto.search_result import SearchResult
from napisy.application.ports import SubtitlesApi
from napisy.domain.fingerprint import encode_fingerprint
from napisy.domain.value_objects import Digest

logger = logging.getLogger(__name__)


class SearchSubtitlesUseCase:
    """Search subtitles for a video file in each requested language."""

    def __init__(
        self,
        subtitles_api: SubtitlesApi,
        digest_extractor: Callable[[str | PathLike[str]], Digest],
    ) -> None:
        self._api = subtitles_api
        self._extract_digest = digest_extractor

    async def execute(
        self,
        path: str | PathLike[str],
        langs: Sequence[str],
        download: bool = False,
    ) -> list[SearchResult]:
        """Return one result per language, in request order."""
        digest = self._extract_digest(path)
        fingerprint = encode_fingerprint(digest)
        logger.info("File %s: digest=%s fingerprint=%s", path, digest.hex, fingerprint)

        results: list[SearchResult] = []
        for lang in langs:
            available = await self._api.search(digest, fingerprint, lang)
            result = SearchResult(lang=lang, available=available)
            if available and download:
                result.subtitles = await self._api.download(digest, lang)
            results.append(result)
        return results
