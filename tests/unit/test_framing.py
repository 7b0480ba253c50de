"""Unit tests for framing helpers and the byte cursor."""

from __future__ import annotations

import pytest

from serialedit.codec.cursor import ByteCursor
from serialedit.codec.framing import (
    KEY_MARKER_RE,
    byte_length,
    frame_envelope,
    frame_pair,
    read_pair,
    split_envelope,
)
from serialedit.config import DEFAULT_CONFIG, CodecConfig
from serialedit.exceptions import EncodeError, MalformedEnvelopeError, ParseFailureError


class TestByteCursor:
    """Test the body cursor."""

    def test_match_advances(self) -> None:
        """Test that a successful match moves the cursor."""
        cursor = ByteCursor(b'i:12;s:1:"x";')
        found = cursor.match(KEY_MARKER_RE)

        assert found is not None
        assert found.group(1) == b"12"
        assert cursor.position() == 5

    def test_match_failure_keeps_position(self) -> None:
        """Test that a failed match leaves the cursor alone."""
        cursor = ByteCursor(b'x:1;')

        assert cursor.match(KEY_MARKER_RE) is None
        assert cursor.position() == 0

    def test_read_bytes(self) -> None:
        """Test fixed-length reads."""
        cursor = ByteCursor(b"abcdef")

        assert cursor.read_bytes(2) == b"ab"
        assert cursor.read_bytes(0) == b""
        assert cursor.read_bytes(4) == b"cdef"
        assert cursor.bytes_remaining() == 0

    def test_read_past_end(self) -> None:
        """Test that over-long reads raise without moving."""
        cursor = ByteCursor(b"abc")

        with pytest.raises(IndexError, match="Not enough bytes"):
            cursor.read_bytes(4)
        assert cursor.position() == 0

    def test_read_negative(self) -> None:
        """Test that negative counts are rejected."""
        with pytest.raises(ValueError):
            ByteCursor(b"abc").read_bytes(-1)

    def test_expect(self) -> None:
        """Test literal consumption."""
        cursor = ByteCursor(b'";rest')
        cursor.expect(b'";')

        assert cursor.position() == 2

        with pytest.raises(ValueError, match="Expected"):
            cursor.expect(b'";')


class TestFrameHelpers:
    """Test pair and envelope emission."""

    def test_frame_pair(self) -> None:
        """Test a single framed pair."""
        assert frame_pair(1, "foo", DEFAULT_CONFIG) == 'i:1;s:3:"foo";'

    def test_frame_pair_multibyte(self) -> None:
        """Test that the declared length is a byte count."""
        assert frame_pair(0, "ß", DEFAULT_CONFIG) == 'i:0;s:2:"ß";'

    def test_frame_envelope(self) -> None:
        """Test envelope wrapping."""
        assert frame_envelope(0, "") == "a:0:{}"
        assert frame_envelope(1, 'i:0;s:1:"x";') == 'a:1:{i:0;s:1:"x";}'

    def test_byte_length(self) -> None:
        """Test byte lengths under different encodings."""
        assert byte_length("héllo", DEFAULT_CONFIG) == 6
        assert byte_length("héllo", CodecConfig(encoding="latin-1")) == 5

    def test_byte_length_unencodable(self) -> None:
        """Test a payload outside the encoding."""
        with pytest.raises(EncodeError):
            byte_length("€", CodecConfig(encoding="ascii"))


class TestSplitEnvelope:
    """Test envelope matching."""

    def test_split(self) -> None:
        """Test count and body extraction."""
        assert split_envelope(b'a:1:{i:0;s:1:"x";}', DEFAULT_CONFIG) == (1, b'i:0;s:1:"x";')

    def test_body_extends_to_last_brace(self) -> None:
        """Test that a brace inside a payload does not end the body."""
        count, body = split_envelope(b'a:1:{i:0;s:1:"}";}', DEFAULT_CONFIG)

        assert count == 1
        assert body == b'i:0;s:1:"}";'

    def test_whitespace_not_stripped(self) -> None:
        """Test that whitespace is significant when stripping is off."""
        config = CodecConfig(strip_whitespace=False)

        with pytest.raises(MalformedEnvelopeError):
            split_envelope(b" a:0:{}", config)

    def test_empty(self) -> None:
        """Test empty input."""
        with pytest.raises(MalformedEnvelopeError, match="empty"):
            split_envelope(b"", DEFAULT_CONFIG)


class TestReadPair:
    """Test single pair extraction."""

    def test_read_pair(self) -> None:
        """Test a well-formed pair."""
        cursor = ByteCursor(b'i:3;s:3:"a"b";')

        assert read_pair(cursor, DEFAULT_CONFIG) == (3, 'a"b')
        assert cursor.bytes_remaining() == 0

    def test_absent_key(self) -> None:
        """Test a short read at the key marker."""
        assert read_pair(ByteCursor(b""), DEFAULT_CONFIG) is None
        assert read_pair(ByteCursor(b"i:0"), DEFAULT_CONFIG) is None

    def test_absent_value_header(self) -> None:
        """Test a short read at the value header."""
        assert read_pair(ByteCursor(b"i:0;i:1;"), DEFAULT_CONFIG) is None
        assert read_pair(ByteCursor(b"i:0;s:x:"), DEFAULT_CONFIG) is None

    def test_overrun(self) -> None:
        """Test a declared length past the buffer."""
        with pytest.raises(ParseFailureError) as excinfo:
            read_pair(ByteCursor(b'i:0;s:10:"abc";'), DEFAULT_CONFIG)

        assert excinfo.value.position == 10

    def test_bad_terminator(self) -> None:
        """Test a payload not followed by the terminator."""
        with pytest.raises(ParseFailureError):
            read_pair(ByteCursor(b'i:0;s:1:"abc";'), DEFAULT_CONFIG)
