"""
Bech32 identifiers for Cardano.

Addresses, reward addresses, pool ids and DRep ids. Encoders return None on
failure; callers compose them with first_of to fall back to hex.
"""

import logging
from typing import Callable, Optional

import bech32

from .fields import (
    CIP129_DREP_KEY_HASH_HEADER,
    MAINNET_NETWORK_ID,
    POOL_KEY_HASH_SIZES,
    REWARD_ADDRESS_KINDS,
)
from ..runtime.errors import EncodingFailureError

logger = logging.getLogger(__name__)


def first_of(*candidates: Callable[[], Optional[str]]) -> Optional[str]:
    """Return the first non-None result, evaluating candidates left to right."""
    for candidate in candidates:
        result = candidate()
        if result is not None:
            return result
    return None


def encode_bech32(hrp: str, data: bytes) -> str:
    """
    Bech32-encode raw bytes under a human-readable prefix.

    Args:
        hrp: Human-readable prefix
        data: Payload bytes

    Returns:
        Bech32 string

    Raises:
        EncodingFailureError: If the payload is empty or cannot be regrouped
    """
    if not data:
        raise EncodingFailureError(f"Nothing to encode for prefix {hrp}")
    words = bech32.convertbits(list(data), 8, 5)
    if words is None:
        raise EncodingFailureError(f"Cannot convert payload for prefix {hrp}")
    return bech32.bech32_encode(hrp, words)


def try_encode_bech32(hrp: str, data: Optional[bytes]) -> Optional[str]:
    """encode_bech32, returning None instead of raising."""
    if data is None:
        return None
    try:
        return encode_bech32(hrp, data)
    except EncodingFailureError as e:
        logger.debug(f"Bech32 fallback: {e}")
        return None


def address_prefix(header: int) -> str:
    """
    Human-readable prefix for an address header byte.

    High nibble is the address kind, low nibble the network id.
    """
    kind = header >> 4
    mainnet = (header & 0x0F) == MAINNET_NETWORK_ID
    if kind in REWARD_ADDRESS_KINDS:
        return "stake" if mainnet else "stake_test"
    return "addr" if mainnet else "addr_test"


def encode_address(data: bytes) -> Optional[str]:
    """Bech32 form of a raw address, or None."""
    if not data:
        return None
    return try_encode_bech32(address_prefix(data[0]), data)


def encode_reward_address(data: bytes) -> Optional[str]:
    """Bech32 form of a reward account, always under a stake prefix."""
    if not data:
        return None
    mainnet = (data[0] & 0x0F) == MAINNET_NETWORK_ID
    return try_encode_bech32("stake" if mainnet else "stake_test", data)


def format_address_bytes(data: bytes) -> str:
    """Bech32 address, falling back to lowercase hex."""
    return first_of(lambda: encode_address(data), lambda: data.hex())


def encode_pool_id(key_hash: bytes) -> Optional[str]:
    """pool1... id for a pool key hash, or None for unexpected sizes."""
    if len(key_hash) not in POOL_KEY_HASH_SIZES:
        logger.debug(f"Pool key hash has unexpected size {len(key_hash)}")
        return None
    return try_encode_bech32("pool", key_hash)


def encode_drep_id(key_hash: bytes) -> Optional[str]:
    """CIP-0129 drep1... id for a DRep key hash, or None."""
    if not key_hash:
        return None
    return try_encode_bech32("drep", bytes([CIP129_DREP_KEY_HASH_HEADER]) + key_hash)
