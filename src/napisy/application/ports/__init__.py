"""Application ports - interfaces for external adapters."""

from napisy.application.ports.subtitles_api import SubtitlesApi

__all__ = ["SubtitlesApi"]
