"""
Cardano transaction decoding.

Semantic normalization of a parsed CBOR transaction (addresses,
certificates, withdrawals, coin amounts) and the top-level decoder.
"""

from .decoder import CardanoDecodedTransaction, decode_cardano_transaction, format_transaction
from .body import format_transaction_body
from .options import DecodeOptions

__all__ = [
    "CardanoDecodedTransaction",
    "DecodeOptions",
    "decode_cardano_transaction",
    "format_transaction",
    "format_transaction_body",
]
