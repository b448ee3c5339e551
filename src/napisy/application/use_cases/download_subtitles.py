"""Download subtitles use case."""

import logging
from collections.abc import Callable
from os import PathLike

from napisy.application.ports import SubtitlesApi
from napisy.domain.value_objects import Digest

logger = logging.getLogger(__name__)


class DownloadSubtitlesUseCase:
    """Download subtitles text for a video file.

    If subtitles in the requested language don't exist on the server, Polish
    subtitles are returned (service behavior).
    """

    def __init__(
        self,
        subtitles_api: SubtitlesApi,
        digest_extractor: Callable[[str | PathLike[str]], Digest],
    ) -> None:
        self._api = subtitles_api
        self._extract_digest = digest_extractor

    async def execute(self, path: str | PathLike[str], lang: str) -> str:
        digest = self._extract_digest(path)
        logger.info("File %s: digest=%s", path, digest.hex)
        return await self._api.download(digest, lang)
