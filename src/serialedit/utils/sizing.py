"""Encoded size calculation utilities.

This module provides functions to calculate the encoded size of an entry list
without actually building the serialized text.
"""

from __future__ import annotations

from typing import Sequence

from ..codec.framing import byte_length
from ..config import DEFAULT_CONFIG, CodecConfig
from ..models.entry import Entry


def payload_sizes(entries: Sequence[Entry], config: CodecConfig | None = None) -> list[int]:
    """Get the declared length of each payload.

    Args:
        entries: Entries to measure
        config: Codec configuration (defaults to DEFAULT_CONFIG)

    Returns:
        Byte length of each payload, in list order

    Raises:
        EncodeError: If a payload is not representable in the configured encoding

    Example:
        >>> payload_sizes([Entry(key=0, value="hello"), Entry(key=1, value="é")])
        [5, 2]
    """
    config = config or DEFAULT_CONFIG
    return [byte_length(entry.value, config) for entry in entries]


def encoded_size(entries: Sequence[Entry], config: CodecConfig | None = None) -> int:
    """Calculate the byte length of ``encode(entries)``.

    The envelope and markers are ASCII, so only payloads depend on the encoding.

    Args:
        entries: Entries to measure
        config: Codec configuration (defaults to DEFAULT_CONFIG)

    Returns:
        Size in bytes

    Example:
        >>> encoded_size([Entry(key=0, value="hello")])
        22  # a:1:{i:0;s:5:"hello";}
    """
    sizes = payload_sizes(entries, config)

    # a:<N>:{ ... }
    total = len(f"a:{len(entries)}:{{}}")
    for index, size in enumerate(sizes):
        # i:<index>;s:<size>:"<payload>";
        total += len(f'i:{index};s:{size}:"";') + size
    return total
