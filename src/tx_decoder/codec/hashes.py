"""
Hash Functions

Blake2b-256 helpers and the Cardano transaction id: the digest of the
transaction body re-encoded from its parsed (not normalized) form.
"""

import hashlib
import logging

from .cbor import loads_hex
from .values import Array, CborValue
from .writer import dumps
from ..runtime.errors import DecoderError, HashComputationError

logger = logging.getLogger(__name__)


def blake2b_256(input_bytes: bytes) -> bytes:
    """
    Compute Blake2b hash with a 32-byte digest.

    Args:
        input_bytes: Input bytes to hash

    Returns:
        Digest as bytes (32 bytes)
    """
    return hashlib.blake2b(input_bytes, digest_size=32).digest()


def transaction_body_of(value: CborValue) -> CborValue:
    """
    Select the body from a parsed transaction.

    A non-empty top-level array is a full transaction
    [body, witnesses, is_valid, auxiliary_data]; anything else is treated as
    a bare body.
    """
    if isinstance(value, Array) and len(value) > 0:
        return value[0]
    return value


def compute_transaction_hash(raw_tx: str) -> str:
    """
    Compute the transaction id of a hex-encoded Cardano transaction.

    Args:
        raw_tx: Hex encoded transaction or transaction body

    Returns:
        Lowercase hex Blake2b-256 digest of the re-encoded body

    Raises:
        HashComputationError: If the payload cannot be parsed or re-encoded
    """
    try:
        body = transaction_body_of(loads_hex(raw_tx))
        digest = blake2b_256(dumps(body))
    except DecoderError as e:
        logger.debug(f"Transaction hash failed: {e}")
        raise HashComputationError(f"Failed to compute transaction hash: {e.message}", cause=e) from e
    return digest.hex()
