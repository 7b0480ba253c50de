"""Serialized array breakdown for the CLI."""

from __future__ import annotations

from ..codec.decoder import DecodeResult
from ..config import CodecConfig
from ..utils.sizing import encoded_size, payload_sizes


def analyze_result(result: DecodeResult, config: CodecConfig) -> None:
    """Print a breakdown of a successfully decoded array.

    Args:
        result: Successful decode result
        config: Codec configuration used to decode it
    """
    entries = result.entries
    sizes = payload_sizes(entries, config)

    print("|" * 7, "serialedit: Serialized Array Editor", "|" * 7)
    print(f"Declared elements: {result.declared_count or 0}")
    print(f"Parsed elements: {len(entries)}")
    if result.short_read:
        print(f"Short read: {result.declared_count - len(entries)} element(s) missing")
    print(f"Re-encoded size: {encoded_size(entries, config)} bytes ({config.encoding})")
    print()

    if not entries:
        print("(empty array)")
        return

    width = len(str(len(entries) - 1)) + 2
    for entry, size in zip(entries, sizes):
        label = f"[{entry.key}]"
        print(f"{label:<{width}} {size:>5} bytes  {entry.value!r}")
