"""Exception hierarchy for serialedit.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from SerialEditError for easy catching of any serialedit-specific error.
"""

from __future__ import annotations

import enum


class DecodeErrorKind(enum.Enum):
    """Classification of decode failures."""

    MALFORMED_ENVELOPE = "malformed_envelope"
    PARSE_FAILURE = "parse_failure"


class SerialEditError(Exception):
    """Base exception for all serialedit errors."""

    pass


class DecodeError(SerialEditError):
    """Raised (or carried in a DecodeResult) when decoding serialized text fails.

    Attributes:
        kind: Which class of failure occurred
        position: Byte offset into the envelope body where the failure was
            detected, when known
    """

    kind: DecodeErrorKind = DecodeErrorKind.PARSE_FAILURE

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


class MalformedEnvelopeError(DecodeError):
    """Raised when input does not match the outer ``a:<N>:{...}`` shape.

    Examples:
        - Empty input
        - Missing opening or closing brace
        - Non-numeric element count
    """

    kind = DecodeErrorKind.MALFORMED_ENVELOPE


class ParseFailureError(DecodeError):
    """Raised when a pair inside the envelope cannot be extracted.

    Examples:
        - Declared payload length runs past the end of the body
        - Missing ``";`` terminator after a payload
        - Payload bytes that are invalid in the configured encoding
    """

    kind = DecodeErrorKind.PARSE_FAILURE


class EncodeError(SerialEditError):
    """Raised when an entry list cannot be encoded.

    Examples:
        - Non-sequential keys when key checking is requested
        - Payload not representable in the configured encoding
    """

    pass
