"""Runtime helpers for the transaction decoder"""

from .errors import (
    ErrorCode,
    DecoderError,
    MalformedInputError,
    UnexpectedEofError,
    UnsupportedEncodingError,
    IntegerOverflowError,
    EncodingFailureError,
    NestingDepthError,
    HashComputationError,
)

__all__ = [
    "ErrorCode",
    "DecoderError",
    "MalformedInputError",
    "UnexpectedEofError",
    "UnsupportedEncodingError",
    "IntegerOverflowError",
    "EncodingFailureError",
    "NestingDepthError",
    "HashComputationError",
]
