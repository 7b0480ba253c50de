"""Serialized array codec for serialedit.

This module provides decoding and encoding of length-prefixed serialized
arrays of integer keys and string values.
"""

from __future__ import annotations

from .decoder import DecodeResult, decode, loads
from .encoder import dumps, encode

__all__ = [
    "encode",
    "decode",
    "dumps",
    "loads",
    "DecodeResult",
]
