"""Encoder for serialized arrays.

This module provides the encode() function that converts an ordered entry
list into serialized text.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from ..config import DEFAULT_CONFIG, CodecConfig
from ..exceptions import EncodeError
from ..models.entry import Entry, entries_from_values
from .framing import frame_envelope, frame_pair


def encode(
    entries: Sequence[Entry], config: CodecConfig | None = None, check_keys: bool = False
) -> str:
    """Encode an entry list as a serialized array.

    Keys are written from list position, not from ``Entry.key``. Each declared
    length is the payload's byte length in the configured encoding, and
    payloads are written verbatim (no escaping of quotes or semicolons).

    Args:
        entries: Entries in order
        config: Codec configuration (defaults to DEFAULT_CONFIG)
        check_keys: If True, require stored keys to be ``0..n-1`` and raise
            instead of renumbering

    Returns:
        Serialized text

    Raises:
        EncodeError: If ``check_keys`` is set and keys are not sequential, or a
            payload is not representable in the configured encoding

    Examples:
        ```python
        from serialedit import Entry, encode

        encode([Entry(key=0, value="hello"), Entry(key=1, value="foo")])
        # 'a:2:{i:0;s:5:"hello";i:1;s:3:"foo";}'

        encode([Entry(key=0, value="é")])
        # 'a:1:{i:0;s:2:"é";}'  (two bytes in UTF-8)
        ```
    """
    config = config or DEFAULT_CONFIG

    if check_keys:
        for index, entry in enumerate(entries):
            if entry.key != index:
                raise EncodeError(
                    f"Non-sequential key at position {index}: expected {index}, got {entry.key}"
                )

    body = "".join(frame_pair(index, entry.value, config) for index, entry in enumerate(entries))
    return frame_envelope(len(entries), body)


def dumps(values: Iterable[str], config: CodecConfig | None = None) -> str:
    """Encode plain payload strings as a serialized array.

    Example:
        >>> dumps(["a", "c"])
        'a:2:{i:0;s:1:"a";i:1;s:1:"c";}'
    """
    return encode(entries_from_values(values), config)
