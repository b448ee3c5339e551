"""Search result DTO."""

from dataclasses import dataclass


@dataclass
class SearchResult:
    """Subtitles lookup outcome for one language."""

    lang: str
    available: bool
    subtitles: str = ""
