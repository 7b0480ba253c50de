"""Entry modeling for serialedit.

This module provides the Entry model and helpers for working with
sequential entry lists.
"""

from __future__ import annotations

from .entry import Entry, EntryList, entries_from_values, is_sequential, reindex, values_of

__all__ = [
    "Entry",
    "EntryList",
    "entries_from_values",
    "is_sequential",
    "reindex",
    "values_of",
]
