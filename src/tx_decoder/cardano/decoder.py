"""
Cardano transaction decoder.

Entry point turning a hex payload into a CardanoDecodedTransaction. This is
the single recovery boundary: every failure below it ends up in the error
envelope and decode_cardano_transaction never raises.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel

from .body import format_transaction_body
from .formatters import format_value, is_absent
from .options import DEFAULT_OPTIONS, DecodeOptions
from ..codec.cbor import loads_hex
from ..codec.values import Array, Bool, CborValue

logger = logging.getLogger(__name__)

DESERIALIZATION_FAILED = "Deserialization failed"


class CardanoDecodedTransaction(BaseModel):
    """
    Result of a decode call.

    Holds either body/witness_set/is_valid (plus auxiliary_data when the
    transaction carries that slot), the pass-through raw value, or the error
    envelope error/message/raw. Only fields that were set are serialized.
    """
    body: Optional[Dict[str, Any]] = None
    witness_set: Optional[Any] = None
    is_valid: Optional[bool] = None
    auxiliary_data: Optional[Any] = None
    raw: Optional[Any] = None
    error: Optional[str] = None
    message: Optional[str] = None

    model_config = {"populate_by_name": True}

    @property
    def ok(self) -> bool:
        """True unless this is the error envelope."""
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dictionary holding only the fields that were set."""
        return self.model_dump(exclude_unset=True)


def format_transaction(value: CborValue, options: DecodeOptions = DEFAULT_OPTIONS) -> CardanoDecodedTransaction:
    """
    Assemble the decoded transaction from a parsed value.

    [body, witness_set, is_valid, auxiliary_data] is formatted field by
    field; any other top-level shape is passed through under raw.
    """
    if isinstance(value, Array) and len(value) >= 1:
        witnesses = value.get(1)
        is_valid = value.get(2)
        fields: Dict[str, Any] = {
            "body": format_transaction_body(value[0], options),
            "witness_set": None if is_absent(witnesses) else format_value(witnesses),
            "is_valid": is_valid.value if isinstance(is_valid, Bool) else True,
        }
        if len(value) > 3:
            fields["auxiliary_data"] = None if is_absent(value[3]) else format_value(value[3])
        return CardanoDecodedTransaction(**fields)

    return CardanoDecodedTransaction(
        body=None,
        witness_set=None,
        is_valid=None,
        raw=format_value(value),
    )


def decode_cardano_transaction(payload: str, options: Optional[DecodeOptions] = None) -> CardanoDecodedTransaction:
    """
    Decode a hex-encoded Cardano transaction.

    Args:
        payload: Hex text, surrounding whitespace allowed
        options: Decode options

    Returns:
        Decoded transaction, pass-through result or error envelope
    """
    options = options or DEFAULT_OPTIONS
    try:
        value = loads_hex(payload, options.max_depth)
        return format_transaction(value, options)
    except Exception as e:
        logger.debug(f"Cardano decode failed: {e}")
        return CardanoDecodedTransaction(
            error=DESERIALIZATION_FAILED,
            message=str(e) or type(e).__name__,
            raw=payload,
        )
