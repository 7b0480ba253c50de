"""Codec configuration.

This module provides the configuration dataclass shared by the decoder, the
encoder and the editor session.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass

ERROR_HANDLERS = ("strict", "surrogateescape", "surrogatepass")

# Every character the envelope and pair markers use
WIRE_ALPHABET = 'ais:;{}"0123456789'


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for encoding and decoding serialized arrays.

    Attributes:
        encoding: Text encoding used to turn payloads into bytes (default "utf-8").
            Declared lengths are byte counts in this encoding. Use "latin-1" to
            map every byte to exactly one character.

        errors: Codec error handler for payload conversion (default "strict").
            One of "strict", "surrogateescape" or "surrogatepass". The
            surrogate handlers let arbitrary bytes survive a round trip through
            ``str``.

        allow_short_read: Accept fewer pairs than the declared count as a
            partial result (default True). Editors re-decode on every keystroke,
            so an incomplete paste must not be an error. Set to False to turn
            a short read into a parse failure.

        strip_whitespace: Ignore surrounding whitespace around the envelope
            (default True).

    Examples:
        ```python
        from serialedit import CodecConfig, decode

        # Byte-transparent payloads
        config = CodecConfig(encoding="latin-1")
        result = decode(raw_bytes, config)

        # Reject incomplete arrays
        config = CodecConfig(allow_short_read=False)
        ```
    """

    encoding: str = "utf-8"
    errors: str = "strict"

    # Parser policy
    allow_short_read: bool = True
    strip_whitespace: bool = True

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {self.encoding}") from e

        # Envelope and markers are matched as ASCII bytes
        try:
            round_trip = WIRE_ALPHABET.encode(self.encoding).decode(self.encoding)
            ascii_compatible = WIRE_ALPHABET.encode(self.encoding) == WIRE_ALPHABET.encode(
                "ascii"
            )
        except (LookupError, UnicodeError, TypeError) as e:
            raise ValueError(f"{self.encoding} is not a text encoding") from e

        if not ascii_compatible or round_trip != WIRE_ALPHABET:
            raise ValueError(f"{self.encoding} is not ASCII-compatible")

        if self.errors not in ERROR_HANDLERS:
            raise ValueError(
                f"errors must be one of {', '.join(ERROR_HANDLERS)}, got {self.errors}"
            )


DEFAULT_CONFIG = CodecConfig()
