"""
Binary Codec Module

Hex/byte reader, CBOR value tree, CBOR parser and writer, and the
Blake2b-256 transaction hash.

Key components:
- reader.py: Bounds-checked byte cursor with big-endian primitives
- values.py: CborValue sum type
- cbor.py: Recursive-descent CBOR parser and key stringification
- writer.py: Shortest-form CBOR encoder
- hashes.py: Blake2b-256 hashing and transaction id
"""

from .cbor import CborReader, loads_hex, read_value, stringify_key, to_plain
from .hashes import blake2b_256, compute_transaction_hash
from .reader import ByteReader, MAX_SAFE_INTEGER
from .writer import CborWriter, dumps

__all__ = [
    "ByteReader",
    "CborReader",
    "CborWriter",
    "MAX_SAFE_INTEGER",
    "blake2b_256",
    "compute_transaction_hash",
    "dumps",
    "loads_hex",
    "read_value",
    "stringify_key",
    "to_plain",
]
