"""
Decoder Error Model

This module provides the error handling framework for the transaction decoder.
Every failure raised by the reader, the CBOR parser or the hash helper is a
DecoderError carrying a stable ErrorCode.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Decoder error codes."""

    # Success
    OK = 0

    # General errors (1-99)
    UNKNOWN = 1
    INTERNAL = 2

    # Input errors (100-199)
    MALFORMED_INPUT = 100
    UNEXPECTED_EOF = 101

    # Encoding errors (200-299)
    UNSUPPORTED_ENCODING = 200
    INTEGER_OVERFLOW = 201
    ENCODING_FAILURE = 202
    NESTING_TOO_DEEP = 203

    # Hashing errors (300-399)
    HASH_COMPUTATION_FAILED = 300


class DecoderError(Exception):
    """
    Base class for all decoder errors.

    Provides structured error information: a code, a message, optional
    details and the underlying cause.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize a decoder error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class MalformedInputError(DecoderError):
    """Empty, odd-length or non-hex input text."""

    def __init__(self, message: str = "Malformed input",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.MALFORMED_INPUT, details, cause)


class UnexpectedEofError(DecoderError):
    """Cursor exhausted in the middle of a read."""

    def __init__(self, message: str = "Unexpected end of input while reading transaction",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.UNEXPECTED_EOF, details, cause)


class UnsupportedEncodingError(DecoderError):
    """Indefinite lengths, reserved additional info or unknown simple values."""

    def __init__(self, message: str = "Unsupported encoding",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.UNSUPPORTED_ENCODING, details, cause)


class IntegerOverflowError(DecoderError):
    """64-bit argument larger than MAX_SAFE_INTEGER."""

    def __init__(self, message: str = "Encountered integer larger than MAX_SAFE_INTEGER",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INTEGER_OVERFLOW, details, cause)


class EncodingFailureError(DecoderError):
    """Bech32 encoding failed; callers fall back to hex."""

    def __init__(self, message: str = "Bech32 encoding failed",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.ENCODING_FAILURE, details, cause)


class NestingDepthError(DecoderError):
    """Nesting deeper than the configured maximum."""

    def __init__(self, message: str = "Maximum nesting depth exceeded",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.NESTING_TOO_DEEP, details, cause)


class HashComputationError(DecoderError):
    """Transaction hash could not be computed."""

    def __init__(self, message: str = "Failed to compute transaction hash",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.HASH_COMPUTATION_FAILED, details, cause)


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
