"""Shared test helpers."""

from tx_decoder.codec.writer import dumps


def to_hex(value) -> str:
    """Encode a CborValue tree as hex."""
    return dumps(value).hex()


__all__ = ["to_hex"]
