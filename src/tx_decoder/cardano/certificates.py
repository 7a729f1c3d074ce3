"""
Certificates and delegation records.

Recognized certificates are rebuilt as single-key records
({"StakeDelegation": {...}}); anything else is dropped.
"""

import logging
from typing import Any, Dict, List, Optional

from .addresses import encode_drep_id, encode_pool_id, first_of
from .fields import (
    CERT_STAKE_DELEGATION,
    CERT_STAKE_DEREGISTRATION,
    CERT_STAKE_REGISTRATION,
    CERT_VOTE_DELEGATION,
    CERT_VOTE_DELEGATION_ALT,
    CREDENTIAL_KEY_HASH,
    DREP_ALWAYS_ABSTAIN,
    DREP_ALWAYS_NO_CONFIDENCE,
    DREP_KEY_HASH,
)
from .formatters import as_items, format_value, raw_bytes
from ..codec.values import UInt

logger = logging.getLogger(__name__)

ALWAYS_ABSTAIN = "AlwaysAbstain"
ALWAYS_NO_CONFIDENCE = "AlwaysNoConfidence"


def _kind(value: Any) -> Optional[int]:
    if isinstance(value, UInt):
        return value.value
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def format_stake_credential(value: Any) -> Any:
    """[0, key_hash] as {"Key": hex}; other credentials generically."""
    items = as_items(value)
    if items is not None and len(items) == 2 and _kind(items[0]) == CREDENTIAL_KEY_HASH:
        key_hash = raw_bytes(items[1])
        if key_hash is not None:
            return {"Key": key_hash.hex()}
    return format_value(value)


def format_drep(value: Any) -> Optional[Any]:
    """
    DRep argument of a vote delegation.

    [0, key_hash] is an explicit DRep, [1] always abstain, [2] always no
    confidence. Other shapes return None.
    """
    items = as_items(value)
    if not items:
        return None
    kind = _kind(items[0])
    if kind == DREP_KEY_HASH and len(items) >= 2:
        key_hash = raw_bytes(items[1])
        if key_hash is None:
            return {"KeyHash": format_value(items[1])}
        return {"KeyHash": first_of(lambda: encode_drep_id(key_hash), lambda: key_hash.hex())}
    if kind == DREP_ALWAYS_ABSTAIN:
        return ALWAYS_ABSTAIN
    if kind == DREP_ALWAYS_NO_CONFIDENCE:
        return ALWAYS_NO_CONFIDENCE
    return None


def format_stake_delegation(credential: Any, pool: Any) -> Dict[str, Any]:
    record = {
        "stake_credential": format_stake_credential(credential),
        "pool_keyhash": format_value(pool),
    }
    pool_hash = raw_bytes(pool)
    pool_id = encode_pool_id(pool_hash) if pool_hash is not None else None
    if pool_id is not None:
        record["pool_id"] = pool_id
    return record


def format_certificate(value: Any) -> Optional[Dict[str, Any]]:
    """
    One certificate, or None when it is not a recognized shape.

    Args:
        value: [type, ...arguments]

    Returns:
        Single-key record named after the certificate kind
    """
    if isinstance(value, dict):
        return value
    items = as_items(value)
    if not items:
        return None
    kind = _kind(items[0])

    if kind == CERT_STAKE_REGISTRATION and len(items) >= 2:
        return {"StakeRegistration": {"stake_credential": format_stake_credential(items[1])}}

    if kind == CERT_STAKE_DEREGISTRATION and len(items) >= 2:
        return {"StakeDeregistration": {"stake_credential": format_stake_credential(items[1])}}

    if kind == CERT_STAKE_DELEGATION and len(items) >= 3:
        return {"StakeDelegation": format_stake_delegation(items[1], items[2])}

    if kind in (CERT_VOTE_DELEGATION, CERT_VOTE_DELEGATION_ALT) and len(items) >= 3:
        drep = format_drep(items[2])
        if drep is None:
            logger.debug(f"Dropping vote delegation with unrecognized DRep {format_value(items[2])!r}")
            return None
        return {
            "VoteDelegation": {
                "stake_credential": format_stake_credential(items[1]),
                "drep": drep,
            }
        }

    logger.debug(f"Dropping unrecognized certificate type {kind!r}")
    return None


def format_certificates(value: Any) -> Any:
    """Recognized certificates in order; unrecognized ones are filtered out."""
    items = as_items(value)
    if items is None:
        return format_value(value)
    certs: List[Dict[str, Any]] = []
    for entry in items:
        cert = format_certificate(entry)
        if cert is not None:
            certs.append(cert)
    return certs
