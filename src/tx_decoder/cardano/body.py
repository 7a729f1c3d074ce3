"""
Transaction body formatting.

Maps numeric body keys to field names and applies the per-field formatter.
"""

import logging
from types import MappingProxyType
from typing import Any, Dict, Optional

from .certificates import format_certificates
from .fields import BODY_FIELD_NAMES_BY_KEY
from .formatters import (
    format_fee,
    format_inputs,
    format_network_id,
    format_output,
    format_outputs,
    format_required_signers,
    format_value,
)
from .options import DEFAULT_OPTIONS, DecodeOptions
from .withdrawals import format_withdrawals
from ..codec.cbor import stringify_key
from ..codec.values import Map

logger = logging.getLogger(__name__)

BODY_FORMATTERS = MappingProxyType({
    "inputs": format_inputs,
    "outputs": format_outputs,
    "fee": format_fee,
    "certs": format_certificates,
    "withdrawals": format_withdrawals,
    "collateral": format_inputs,
    "required_signers": format_required_signers,
    "network_id": format_network_id,
    "collateral_return": format_output,
    "total_collateral": format_fee,
    "reference_inputs": format_inputs,
    "donation": format_fee,
    "current_treasury_value": format_fee,
})


def body_field_name(key: str) -> Optional[str]:
    """Field name for a stringified body key, None when unknown."""
    return BODY_FIELD_NAMES_BY_KEY.get(key)


def format_transaction_body(value: Any, options: DecodeOptions = DEFAULT_OPTIONS) -> Optional[Dict[str, Any]]:
    """
    Format a transaction body map.

    Only keys present in the input appear in the result. Unknown keys become
    "field_<key>" or are dropped, per options.keep_unknown_fields.

    Args:
        value: Parsed body
        options: Decode options

    Returns:
        Field name -> formatted value, or None when the body is not a map
    """
    if not isinstance(value, Map):
        return None

    formatted: Dict[str, Any] = {}
    for key, item in value.entries:
        skey = stringify_key(key)
        name = body_field_name(skey)
        if name is None:
            if not options.keep_unknown_fields:
                logger.debug(f"Dropping unknown body field {skey}")
                continue
            name = f"field_{skey}"
        formatter = BODY_FORMATTERS.get(name, format_value)
        formatted[name] = formatter(item)
    return formatted
