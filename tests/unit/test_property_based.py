"""Property-based tests using hypothesis."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from serialedit import CodecConfig, Entry, decode, encode, encoded_size, entries_from_values

payloads = st.text()
value_lists = st.lists(payloads, max_size=20)


class TestCodecProperties:
    """Property-based tests for codec."""

    @given(values=value_lists)
    def test_encode_decode_roundtrip(self, values: list[str]) -> None:
        """Test encode/decode is invertible."""
        entries = entries_from_values(values)
        result = decode(encode(entries))

        assert result.ok
        assert not result.short_read
        assert result.entries == entries

    @given(data=st.lists(st.binary(max_size=40), max_size=10))
    def test_latin1_roundtrip_arbitrary_bytes(self, data: list[bytes]) -> None:
        """Test that latin-1 carries any byte sequence."""
        config = CodecConfig(encoding="latin-1")
        entries = entries_from_values(raw.decode("latin-1") for raw in data)

        assert decode(encode(entries, config), config).entries == entries

    @given(values=value_lists)
    def test_encode_deterministic(self, values: list[str]) -> None:
        """Test encoding is deterministic."""
        entries = entries_from_values(values)

        assert encode(entries) == encode(list(entries))

    @given(values=value_lists, keys=st.lists(st.integers(min_value=0, max_value=99), max_size=20))
    def test_keys_ignored(self, values: list[str], keys: list[int]) -> None:
        """Test that stored keys never reach the output."""
        shuffled = [Entry(key=k, value=v) for k, v in zip(keys, values)]

        assert encode(shuffled) == encode(entries_from_values(v for _, v in zip(keys, values)))

    @given(values=value_lists)
    def test_count_fidelity(self, values: list[str]) -> None:
        """Test that the declared count matches the entry count."""
        text = encode(entries_from_values(values))

        assert text.startswith(f"a:{len(values)}:{{")
        assert decode(text).declared_count == len(values)

    @given(values=value_lists)
    def test_encoded_size(self, values: list[str]) -> None:
        """Test size calculation against the real encoding."""
        entries = entries_from_values(values)

        assert encoded_size(entries) == len(encode(entries).encode("utf-8"))

    @given(values=st.lists(payloads, min_size=1, max_size=10), cut=st.integers(min_value=0))
    def test_truncated_pairs_short_read(self, values: list[str], cut: int) -> None:
        """Test that dropping trailing pairs yields a prefix, not an error."""
        keep = cut % (len(values) + 1)
        full = encode(entries_from_values(values))
        partial = encode(entries_from_values(values[:keep]))
        text = f"a:{len(values)}:" + partial[partial.index("{") :]

        result = decode(text)

        assert result.ok
        assert result.entries == entries_from_values(values[:keep])
        assert result.short_read == (keep < len(values))
        assert decode(full).entries == entries_from_values(values)

    @given(text=st.text(max_size=80))
    def test_decode_never_raises(self, text: str) -> None:
        """Test that arbitrary input yields a result, never an exception."""
        result = decode(text)

        assert result.ok or result.error is not None
