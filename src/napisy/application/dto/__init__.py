"""Data transfer objects."""

from napisy.application.dto.search_result import SearchResult

__all__ = ["SearchResult"]
