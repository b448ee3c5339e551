"""Domain value objects."""

from napisy.domain.value_objects.digest import DIGEST_SIZE, Digest

__all__ = [
    "DIGEST_SIZE",
    "Digest",
]
