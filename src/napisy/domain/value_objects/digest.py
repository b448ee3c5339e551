"""MD5 digest of a video file prefix."""

from dataclasses import dataclass

from napisy.domain.exceptions import InvalidDigestLength

DIGEST_SIZE = 16


@dataclass(frozen=True)
class Digest:
    """MD5 digest (binary) used to identify a video file."""

    value: bytes

    def __post_init__(self) -> None:
        if len(self.value) != DIGEST_SIZE:
            raise InvalidDigestLength(len(self.value))

    @property
    def hex(self) -> str:
        """Lowercase hex rendering without separators (32 chars)."""
        return self.value.hex()

    @classmethod
    def from_hex(cls, value: str) -> "Digest":
        return cls(bytes.fromhex(value))
