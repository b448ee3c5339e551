"""Command line front end: download subtitles for video files."""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

import httpx

from napisy.application.use_cases.download_subtitles import DownloadSubtitlesUseCase
from napisy.application.use_cases.search_subtitles import SearchSubtitlesUseCase
from napisy.domain.exceptions import NapisyError
from napisy.domain.subtitle_file import subtitle_file_name

logger = logging.getLogger(__name__)


def build_parser(default_language: str = "ENG") -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="napisy",
        description="Download subtitles for video files from napiprojekt.pl",
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="Video files")
    parser.add_argument(
        "--language",
        "-l",
        action="append",
        dest="languages",
        default=None,
        help=(
            "Language in which subtitles should be downloaded, if subtitles in "
            f"provided language are not found, Polish is used (default: {default_language}). "
            "May be repeated with --search."
        ),
    )
    parser.add_argument(
        "--search",
        action="store_true",
        help="Only report languages with available subtitles, do not download",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (overrides settings)")
    return parser


async def download_one(
    use_case: DownloadSubtitlesUseCase,
    fname: str,
    lang: str,
) -> str:
    """Download subtitles for fname and save them next to it. Returns saved path."""
    text = await use_case.execute(fname, lang)
    sub_fname = subtitle_file_name(fname)
    print(f"Saving subtitles to: {sub_fname}")
    Path(sub_fname).write_text(text, encoding="utf-8")
    return sub_fname


async def search_one(
    use_case: SearchSubtitlesUseCase,
    fname: str,
    langs: Sequence[str],
) -> None:
    results = await use_case.execute(fname, langs)
    for r in results:
        status = "available" if r.available else "not found"
        print(f"{fname}: {r.lang} {status}")


async def run(
    files: Sequence[str],
    langs: Sequence[str],
    download_use_case: DownloadSubtitlesUseCase,
    search_use_case: SearchSubtitlesUseCase,
    search: bool = False,
) -> int:
    """Process each file; a failure is reported and the next file is tried."""
    if not files:
        print("file name missing")
        return 1
    failed = 0
    for fname in files:
        try:
            if search:
                await search_one(search_use_case, fname, langs)
            else:
                print(f"Downloading subtitles for {fname!r}...")
                await download_one(download_use_case, fname, langs[0])
        except (NapisyError, OSError, httpx.HTTPError) as e:
            failed += 1
            logger.error("Failed to get subtitles for %r: %s", fname, e)
    return 1 if failed else 0
