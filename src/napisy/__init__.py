"""napisy - Napiprojekt subtitles downloader."""

__version__ = "0.1.0"
