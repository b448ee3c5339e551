"""Napiprojekt fingerprint ("t" parameter) computed from the file digest.

The lookup service expects this exact value, so every step below (nibble
addressing, 16-bit product, packing order and the dropped leading character)
is part of the wire contract.
"""

from napisy.domain.exceptions import IndexOutOfRange, InvalidDigestLength
from napisy.domain.value_objects import DIGEST_SIZE, Digest

# Co-indexed tables: nibble index, multiplier and addend for each output nibble.
INDEX: tuple[int, ...] = (0xE, 0x3, 0x6, 0x8, 0x2)
MULTIPLIER: tuple[int, ...] = (2, 2, 5, 4, 3)
ADDEND: tuple[int, ...] = (0x0, 0xD, 0x10, 0xB, 0x5)

LSB_MASK = 0x0F
MSB_MASK = 0xF0

# (len(INDEX) + 1) // 2 bytes rendered as hex, minus the dropped first char.
FINGERPRINT_LENGTH = 2 * ((len(INDEX) + 1) // 2) - 1


def _byte_at(digest: bytes, position: int) -> int:
    if not 0 <= position < len(digest):
        raise IndexOutOfRange(
            f"byte {position} is outside of {len(digest)}-byte digest"
        )
    return digest[position]


def read_nibble(digest: bytes, k: int) -> int:
    """Return nibble k: high half of byte k // 2 for even k, low half for odd."""
    value = _byte_at(digest, k // 2)
    if k % 2 == 0:
        return (value & MSB_MASK) >> 4
    return value & LSB_MASK


def read_combined(digest: bytes, t: int) -> int:
    """Return the 8 bits starting at nibble t, straddling bytes for odd t."""
    if t % 2 == 0:
        return _byte_at(digest, t // 2)
    high = (_byte_at(digest, t // 2) & LSB_MASK) << 4
    low = (_byte_at(digest, t // 2 + 1) & MSB_MASK) >> 4
    return high | low


def pack(nibbles: list[int]) -> str:
    """Pack nibbles pairwise from the end and render them as hex.

    Output bytes are filled backward; for an odd count the first nibble stays
    pending and is never written, so its byte remains zero.
    """
    size = (len(nibbles) + 1) // 2
    out = bytearray(size)
    j = size - 1
    x = 0
    pending = False
    for i in range(len(nibbles) - 1, -1, -1):
        v = nibbles[i]
        if not pending:
            x = v & LSB_MASK
            pending = True
        else:
            x |= (v & LSB_MASK) << 4
            out[j] = x
            pending = False
            j -= 1
    return out.hex()[1:]


def encode_fingerprint(digest: Digest | bytes) -> str:
    """Compute the lookup key for a 16-byte MD5 digest.

    Raises InvalidDigestLength for any other length and IndexOutOfRange when
    the tables address a byte past the end of the digest (happens when the
    high nibble of byte 3 is 0xF).
    """
    value = digest.value if isinstance(digest, Digest) else bytes(digest)
    if len(value) != DIGEST_SIZE:
        raise InvalidDigestLength(len(value))

    nibbles: list[int] = []
    for i, k in enumerate(INDEX):
        t = ADDEND[i] + read_nibble(value, k)
        product = (read_combined(value, t) * MULTIPLIER[i]) & 0xFFFF
        nibbles.append((product & 0xFF) & LSB_MASK)
    return pack(nibbles)
