"""Utility functions for serialedit.

This module provides size calculation for encoded entry lists.
"""

from __future__ import annotations

from .sizing import encoded_size, payload_sizes

__all__ = [
    "encoded_size",
    "payload_sizes",
]
