"""Editor session over a serialized array.

ArrayEditor owns the entry list for an interactive front end. Raw text goes
through decode() once per change; every add, update or delete replaces the
entry list and re-runs encode() to refresh the output. The output text is
never edited directly and edits are never merged back into the raw text.
"""

from __future__ import annotations

import logging

from .codec.decoder import DecodeResult, decode
from .codec.encoder import encode
from .config import DEFAULT_CONFIG, CodecConfig
from .exceptions import DecodeError
from .models.entry import Entry, EntryList, is_sequential, reindex

_LOGGER = logging.getLogger(__name__)

PARSE_ERROR_MESSAGE = "Failed to parse serialized array"


class ArrayEditor:
    """Stateful editing session for one serialized array.

    Example:
        >>> editor = ArrayEditor('a:3:{i:0;s:1:"a";i:1;s:1:"b";i:2;s:1:"c";}')
        >>> editor.delete(1)
        Entry(key=1, value='b')
        >>> editor.output
        'a:2:{i:0;s:1:"a";i:1;s:1:"c";}'

    Attributes:
        source: Raw text last passed to load()
        error: Error from the last failed load(), or None
        output: Encoding of the current entries
    """

    def __init__(self, text: str = "", config: CodecConfig | None = None) -> None:
        """Create a session, optionally loading ``text``.

        Args:
            text: Initial serialized array
            config: Codec configuration (defaults to DEFAULT_CONFIG)
        """
        self.config = config or DEFAULT_CONFIG
        self.source = ""
        self.error: DecodeError | None = None
        self._entries: EntryList = []
        self.output = encode(self._entries, self.config)

        if text:
            self.load(text)

    @property
    def entries(self) -> EntryList:
        """Copy of the current entries."""
        return list(self._entries)

    @property
    def error_message(self) -> str | None:
        """User-facing message for the current error, or None."""
        if self.error is None:
            return None
        return PARSE_ERROR_MESSAGE

    def __len__(self) -> int:
        return len(self._entries)

    def load(self, text: str) -> DecodeResult:
        """Decode new raw text.

        Blank text clears the session. On a decode failure the previous
        entries are kept and the error is recorded; the raw text is kept
        either way.

        Args:
            text: Serialized array as typed or pasted

        Returns:
            The decode result
        """
        self.source = text

        if not text.strip():
            result = DecodeResult()
            self.error = None
            self._replace(result.entries)
            return result

        result = decode(text, self.config)
        if result.ok:
            self.error = None
            self._replace(result.entries)
        else:
            _LOGGER.debug("Keeping %d entries after failed load: %s", len(self._entries), result.error)
            self.error = result.error
        return result

    def add(self, value: str = "") -> Entry:
        """Append an entry and return it."""
        entry = Entry(key=len(self._entries), value=value)
        self._replace([*self._entries, entry])
        return entry

    def update(self, index: int, value: str) -> Entry:
        """Replace the value at ``index`` in place and return the new entry.

        Raises:
            IndexError: If index is out of range
        """
        self._check_index(index)
        entry = self._entries[index].model_copy(update={"value": value})
        entries = list(self._entries)
        entries[index] = entry
        self._replace(entries)
        return entry

    def delete(self, index: int) -> Entry:
        """Remove the entry at ``index``, renumber the rest, and return it.

        Raises:
            IndexError: If index is out of range
        """
        self._check_index(index)
        removed = self._entries[index]
        self._replace(reindex(self._entries[:index] + self._entries[index + 1 :]))
        return removed

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._entries):
            raise IndexError(f"Entry index {index} out of range (0-{len(self._entries) - 1})")

    def _replace(self, entries: EntryList) -> None:
        assert is_sequential(entries), "entry keys must follow list position"
        output = encode(entries, self.config)
        self._entries = entries
        self.output = output
        _LOGGER.debug("Entries replaced: %d entries, %d chars", len(entries), len(self.output))
