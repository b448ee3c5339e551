"""Subtitles file naming."""

from os import PathLike
from pathlib import Path

from napisy.domain.exceptions import InvalidFileName


def subtitle_file_name(path: str | PathLike[str]) -> str:
    """Return path of the subtitles file: video extension replaced with .txt."""
    p = Path(path)
    if not p.suffix:
        raise InvalidFileName(f"incorrect file name {str(path)!r}, no extension")
    return str(p.with_suffix(".txt"))
