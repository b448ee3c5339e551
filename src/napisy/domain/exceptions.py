"""Domain exceptions."""


class NapisyError(Exception):
    """Base exception for napisy."""

    pass


class InvalidDigestLength(NapisyError, ValueError):
    """Digest passed to the fingerprint encoder is not 16 bytes long."""

    def __init__(self, length: int) -> None:
        super().__init__(f"MD5 digest must be 16 bytes, got {length}")
        self.length = length


class IndexOutOfRange(NapisyError, IndexError):
    """Fingerprint encoder tried to read past the end of the digest."""

    pass


class SubtitlesNotFound(NapisyError):
    """Subtitles were not found for the requested file and language."""

    pass


class InvalidResponse(NapisyError):
    """Lookup service returned a response that could not be decoded."""

    pass


class InvalidFileName(NapisyError, ValueError):
    """File name cannot be turned into a subtitles file name."""

    pass
