"""Decoder for serialized arrays.

This module provides the decode() function that converts serialized text
into an ordered entry list. Failures are returned inside a DecodeResult
rather than raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..config import DEFAULT_CONFIG, CodecConfig
from ..exceptions import DecodeError, ParseFailureError
from ..models.entry import Entry, EntryList
from .cursor import ByteCursor
from .framing import read_pair, split_envelope

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of decoding serialized text.

    Attributes:
        entries: Decoded entries (empty on failure)
        error: The decode error, or None on success
        declared_count: Element count declared by the envelope, if it matched
    """

    entries: EntryList = field(default_factory=list)
    error: DecodeError | None = None
    declared_count: int | None = None

    @property
    def ok(self) -> bool:
        """True if decoding succeeded (possibly with a short read)."""
        return self.error is None

    @property
    def short_read(self) -> bool:
        """True if fewer pairs were found than the envelope declared."""
        return (
            self.ok
            and self.declared_count is not None
            and len(self.entries) < self.declared_count
        )

    def unwrap(self) -> EntryList:
        """Return the entries, or raise the carried error.

        Raises:
            DecodeError: If decoding failed
        """
        if self.error is not None:
            raise self.error
        return self.entries


def decode(text: str | bytes, config: CodecConfig | None = None) -> DecodeResult:
    """Decode a serialized array into an ordered entry list.

    Payloads are extracted by their declared byte length, so a payload may
    contain quotes and semicolons. Keys are assigned from pair order; the
    keys written in the text are not trusted.

    A short read (fewer pairs than declared) is a successful, partial result:
    editors decode on every keystroke and an unfinished array is not an error.
    Set ``CodecConfig.allow_short_read`` to False to reject it instead.

    Args:
        text: Serialized array, as text or raw bytes
        config: Codec configuration (defaults to DEFAULT_CONFIG)

    Returns:
        DecodeResult holding the entries, or a MalformedEnvelopeError /
        ParseFailureError. This function does not raise.

    Examples:
        ```python
        from serialedit import decode

        result = decode('a:2:{i:0;s:5:"hello";i:1;s:3:"foo";}')
        result.ok                      # True
        [e.value for e in result.entries]  # ['hello', 'foo']

        decode("not a valid array").error  # MalformedEnvelopeError
        ```
    """
    config = config or DEFAULT_CONFIG

    if isinstance(text, str):
        try:
            data = text.encode(config.encoding, config.errors)
        except UnicodeEncodeError as e:
            error = ParseFailureError(f"Input not representable in {config.encoding}: {e}")
            return DecodeResult(error=error)
    else:
        data = text

    try:
        count, body = split_envelope(data, config)
    except DecodeError as e:
        return DecodeResult(error=e)

    try:
        entries = _decode_body(body, count, config)
    except DecodeError as e:
        return DecodeResult(error=e, declared_count=count)
    except Exception as e:
        error = ParseFailureError(f"Failed to parse serialized array: {e}")
        error.__cause__ = e
        return DecodeResult(error=error, declared_count=count)

    return DecodeResult(entries=entries, declared_count=count)


def loads(text: str | bytes, config: CodecConfig | None = None) -> EntryList:
    """Decode a serialized array, raising on failure.

    Raises:
        MalformedEnvelopeError: If the envelope does not match
        ParseFailureError: If a pair cannot be extracted
    """
    return decode(text, config).unwrap()


def _decode_body(body: bytes, count: int, config: CodecConfig) -> EntryList:
    """Decode up to ``count`` pairs from the envelope body.

    Raises:
        ParseFailureError: If a pair is malformed, or on a short read when
            short reads are not allowed
    """
    cursor = ByteCursor(body)
    entries: EntryList = []

    for index in range(count):
        pair = read_pair(cursor, config)
        if pair is None:
            break

        declared_key, value = pair
        if declared_key != index:
            _LOGGER.debug("Pair %d declares key %d; renumbering", index, declared_key)

        entries.append(Entry(key=index, value=value))

    if len(entries) < count:
        if not config.allow_short_read:
            raise ParseFailureError(
                f"Short read: envelope declares {count} elements, found {len(entries)}",
                cursor.position(),
            )
        _LOGGER.debug("Short read: declared %d elements, parsed %d", count, len(entries))
    elif cursor.bytes_remaining():
        _LOGGER.debug("Ignoring %d trailing bytes after %d pairs", cursor.bytes_remaining(), count)

    return entries
