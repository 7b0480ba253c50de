"""serialedit: Serialized Array Editor

A Python library for editing the length-prefixed text encoding that PHP's
serialize() produces for sequential arrays of strings, e.g.
``a:2:{i:0;s:5:"hello";i:1;s:3:"foo";}``.

Key Features:
- Length-directed payload extraction (payloads may contain ``"`` and ``;``)
- Byte-accurate declared lengths for multi-byte text
- Lenient decoding of incomplete arrays for live editing
- Pydantic-based entry model and a headless editor session

Quick Start:
    >>> from serialedit import ArrayEditor, decode, encode
    >>>
    >>> result = decode('a:2:{i:0;s:5:"hello";i:1;s:3:"foo";}')
    >>> entries = result.unwrap()
    >>> encode(entries[1:])
    'a:1:{i:0;s:3:"foo";}'
    >>>
    >>> editor = ArrayEditor('a:1:{i:0;s:1:"x";}')
    >>> editor.add("y")
    Entry(key=1, value='y')
    >>> editor.output
    'a:2:{i:0;s:1:"x";i:1;s:1:"y";}'
"""

from __future__ import annotations

__version__ = "0.1.0"

from .codec import DecodeResult, decode, dumps, encode, loads
from .config import DEFAULT_CONFIG, CodecConfig
from .editor import ArrayEditor
from .exceptions import (
    DecodeError,
    DecodeErrorKind,
    EncodeError,
    MalformedEnvelopeError,
    ParseFailureError,
    SerialEditError,
)
from .models import Entry, EntryList, entries_from_values, is_sequential, reindex, values_of
from .utils import encoded_size, payload_sizes

__all__ = [
    # Core API
    "encode",
    "decode",
    "dumps",
    "loads",
    "DecodeResult",
    # Model
    "Entry",
    "EntryList",
    "entries_from_values",
    "is_sequential",
    "reindex",
    "values_of",
    # Editor
    "ArrayEditor",
    # Configuration
    "CodecConfig",
    "DEFAULT_CONFIG",
    # Exceptions
    "SerialEditError",
    "DecodeError",
    "DecodeErrorKind",
    "MalformedEnvelopeError",
    "ParseFailureError",
    "EncodeError",
    # Sizing
    "encoded_size",
    "payload_sizes",
    # Version
    "__version__",
]
