"""File digest extraction."""

from napisy.infrastructure.digest.file_digest import HASH_READ_SIZE, extract_digest

__all__ = ["HASH_READ_SIZE", "extract_digest"]
