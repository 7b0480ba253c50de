#!/usr/bin/env python3
"""Basic usage example for serialedit.

This example demonstrates:
1. Decoding a serialized array
2. Handling short reads and decode errors
3. Editing entries through an ArrayEditor session
4. Calculating encoded sizes
"""

from __future__ import annotations

from serialedit import ArrayEditor, decode, encoded_size, payload_sizes

SAMPLE = 'a:3:{i:0;s:5:"hello";i:1;s:7:"a;b"c;d";i:2;s:5:"café";}'


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("serialedit Basic Usage Example")
    print("=" * 60)
    print()

    # Decode
    print("1. Decoding a serialized array...")
    result = decode(SAMPLE)
    for entry, size in zip(result.entries, payload_sizes(result.entries)):
        print(f"   [{entry.key}] {entry.value!r} ({size} bytes)")
    print()

    # Lenient and failing input
    print("2. Incomplete and invalid input...")
    partial = decode('a:3:{i:0;s:1:"x";}')
    print(f"   Short read: {partial.short_read}, entries: {len(partial.entries)}")
    broken = decode("not a valid array")
    print(f"   Error: {type(broken.error).__name__}: {broken.error}")
    print()

    # Edit
    print("3. Editing...")
    editor = ArrayEditor(SAMPLE)
    editor.delete(1)
    editor.update(0, "hi")
    editor.add("日本")
    print(f"   Output: {editor.output}")
    print()

    # Size
    print("4. Encoded size...")
    print(f"   {encoded_size(editor.entries)} bytes")


if __name__ == "__main__":
    main()
