"""MD5 digest of the first part of a video file."""

import hashlib
from os import PathLike

from napisy.domain.value_objects import Digest

# Amount of data read from the start of the file to compute the digest.
HASH_READ_SIZE = 10485760


def extract_digest(path: str | PathLike[str], read_size: int = HASH_READ_SIZE) -> Digest:
    """Return MD5 of at most read_size leading bytes of the file.

    Shorter (or empty) files are hashed over the bytes actually present.
    OSError from opening or reading propagates unchanged.
    """
    with open(path, "rb") as f:
        data = f.read(read_size)
    return Digest(hashlib.md5(data).digest())
