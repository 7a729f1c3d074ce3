"""
Transaction Decoder

Decodes serialized Cardano transactions into human-inspectable structures:
a hand-written CBOR parser plus a normalization layer that rebuilds
addresses, certificates, withdrawals and coin amounts.
"""

from .cardano import CardanoDecodedTransaction, DecodeOptions, decode_cardano_transaction
from .codec import ByteReader, CborReader, CborWriter, compute_transaction_hash, loads_hex
from .runtime.errors import *

__version__ = "0.1.0"
__all__ = [
    "CardanoDecodedTransaction",
    "DecodeOptions",
    "decode_cardano_transaction",
    "compute_transaction_hash",
    "ByteReader",
    "CborReader",
    "CborWriter",
    "loads_hex",
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
