"""Entry model and entry-list helpers.

An entry list is a plain ``list[Entry]`` whose keys are exactly ``0..n-1`` in
list order. The decoder builds lists in that form and the encoder assigns keys
from list position, so the helpers here exist mainly for callers that mutate
lists by hand.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from pydantic import BaseModel, ConfigDict, Field


class Entry(BaseModel):
    """One element of a serialized array.

    Example:
        >>> entry = Entry(key=0, value="hello")
        >>> entry.model_copy(update={"value": "world"})
        Entry(key=0, value='world')

    Attributes:
        key: Element position (non-negative)
        value: String payload
    """

    model_config = ConfigDict(
        # Entries are replaced, never mutated
        frozen=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
        strict=True,
    )

    key: int = Field(ge=0)
    value: str = ""


EntryList = list[Entry]


def entries_from_values(values: Iterable[str]) -> EntryList:
    """Build a sequential entry list from plain values.

    Args:
        values: Payload strings in order

    Returns:
        Entry list with keys ``0..n-1``
    """
    return [Entry(key=index, value=value) for index, value in enumerate(values)]


def values_of(entries: Iterable[Entry]) -> list[str]:
    """Return the payloads of an entry list in order."""
    return [entry.value for entry in entries]


def is_sequential(entries: Sequence[Entry]) -> bool:
    """Check that keys are exactly ``0..n-1`` in list order."""
    return all(entry.key == index for index, entry in enumerate(entries))


def reindex(entries: Iterable[Entry]) -> EntryList:
    """Return a copy of ``entries`` with keys renumbered from list position.

    Entries that already sit at their position are reused as-is.
    """
    return [
        entry if entry.key == index else entry.model_copy(update={"key": index})
        for index, entry in enumerate(entries)
    ]
