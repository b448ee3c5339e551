"""Unit tests for domain exceptions."""

import pytest

from napisy.domain.exceptions import (
    IndexOutOfRange,
    InvalidDigestLength,
    InvalidFileName,
    InvalidResponse,
    NapisyError,
    SubtitlesNotFound,
)


@pytest.mark.parametrize(
    "exc_type",
    [IndexOutOfRange, InvalidDigestLength, InvalidFileName, InvalidResponse, SubtitlesNotFound],
)
def test_inherits_napisy_error(exc_type: type) -> None:
    assert issubclass(exc_type, NapisyError)


def test_invalid_digest_length_is_value_error() -> None:
    """InvalidDigestLength can be caught as ValueError."""
    assert issubclass(InvalidDigestLength, ValueError)


def test_index_out_of_range_is_index_error() -> None:
    assert issubclass(IndexOutOfRange, IndexError)


def test_invalid_digest_length_keeps_length() -> None:
    err = InvalidDigestLength(5)
    assert err.length == 5
    assert "got 5" in str(err)


def test_exception_message_preserved() -> None:
    """Exception message is preserved when raised."""
    msg = "subtitles not found"
    with pytest.raises(SubtitlesNotFound, match=msg):
        raise SubtitlesNotFound(msg)
