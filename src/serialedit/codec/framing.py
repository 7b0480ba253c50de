"""Length framing helpers shared by the encoder and decoder.

The wire format frames each payload with its declared byte length:

    a:<N>:{ i:<K>;s:<L>:"<payload>"; ... }

Nothing inside a payload is escaped, so a payload may contain ``"``, ``;`` or
``}``. Only the declared length tells the reader where it ends.
"""

from __future__ import annotations

import re

from ..config import CodecConfig
from ..exceptions import EncodeError, MalformedEnvelopeError, ParseFailureError
from .cursor import ByteCursor

ENVELOPE_RE = re.compile(rb"a:(\d+):\{(.*)\}", re.DOTALL)
KEY_MARKER_RE = re.compile(rb"i:(\d+);")
VALUE_HEADER_RE = re.compile(rb's:(\d+):"')
PAYLOAD_TERMINATOR = b'";'

_WHITESPACE = b" \t\r\n\x0b\x0c"


def byte_length(value: str, config: CodecConfig) -> int:
    """Return the declared length of ``value``: its size in encoded bytes.

    Raises:
        EncodeError: If the value is not representable in the configured encoding
    """
    return len(encode_payload(value, config))


def encode_payload(value: str, config: CodecConfig) -> bytes:
    """Convert a payload to bytes in the configured encoding.

    Raises:
        EncodeError: If the value is not representable in the configured encoding
    """
    try:
        return value.encode(config.encoding, config.errors)
    except UnicodeEncodeError as e:
        raise EncodeError(f"Payload not representable in {config.encoding}: {e}") from e


def frame_pair(index: int, value: str, config: CodecConfig) -> str:
    """Frame one key/value pair.

    Example:
        >>> frame_pair(1, "foo", DEFAULT_CONFIG)
        'i:1;s:3:"foo";'
    """
    return f'i:{index};s:{byte_length(value, config)}:"{value}";'


def frame_envelope(count: int, body: str) -> str:
    """Wrap an already framed body in the array envelope."""
    return f"a:{count}:{{{body}}}"


def split_envelope(data: bytes, config: CodecConfig) -> tuple[int, bytes]:
    """Match the envelope and return the declared count and the raw body.

    Args:
        data: Complete serialized array
        config: Codec configuration

    Returns:
        Tuple of (declared_count, body)

    Raises:
        MalformedEnvelopeError: If ``data`` is not shaped like ``a:<N>:{...}``
    """
    if config.strip_whitespace:
        data = data.strip(_WHITESPACE)

    if not data:
        raise MalformedEnvelopeError("Cannot decode empty input")

    found = ENVELOPE_RE.fullmatch(data)
    if found is None:
        raise MalformedEnvelopeError(f"Invalid serialized array format: {data[:32]!r}")

    try:
        count = int(found.group(1))
    except ValueError as e:
        raise MalformedEnvelopeError(f"Invalid element count: {e}") from e

    return count, found.group(2)


def read_pair(cursor: ByteCursor, config: CodecConfig) -> tuple[int, str] | None:
    """Read one pair at the cursor.

    Args:
        cursor: Cursor positioned at the start of a pair
        config: Codec configuration

    Returns:
        Tuple of (declared_key, value), or None if the key marker or the value
        header is absent (a short read)

    Raises:
        ParseFailureError: If the payload runs past the end of the body, is not
            followed by ``";``, or is invalid in the configured encoding
    """
    key_match = cursor.match(KEY_MARKER_RE)
    if key_match is None:
        return None

    header = cursor.match(VALUE_HEADER_RE)
    if header is None:
        return None

    declared_length = int(header.group(1))
    start = cursor.position()

    # Length-directed: the payload may contain the terminator itself
    try:
        raw = cursor.read_bytes(declared_length)
    except IndexError as e:
        raise ParseFailureError(
            f"Declared length {declared_length} runs past end of input: {e}", start
        ) from e

    try:
        cursor.expect(PAYLOAD_TERMINATOR)
    except ValueError as e:
        raise ParseFailureError(str(e), cursor.position()) from e

    try:
        value = raw.decode(config.encoding, config.errors)
    except UnicodeDecodeError as e:
        raise ParseFailureError(f"Invalid {config.encoding} payload: {e}", start) from e

    return int(key_match.group(1)), value
