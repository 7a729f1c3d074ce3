"""
Cardano value formatters.

Turn CborValue nodes into JSON-ready Python data with Cardano meaning:
hex byte strings, coin amounts, addresses, inputs and outputs. Every
formatter also accepts its own output and returns it unchanged.
"""

import re
from typing import Any, Dict, List, Optional

from .addresses import format_address_bytes
from .fields import NETWORK_LABELS, TAG_NEGATIVE_BIGNUM, TAG_POSITIVE_BIGNUM, TAG_SET
from ..codec.cbor import stringify_key, to_plain
from ..codec.values import Array, ByteString, Map, NegInt, Null, Tagged, TextString, UInt

_HEX_RE = re.compile(r"(?:[0-9a-fA-F]{2})*")
_INT_RE = re.compile(r"-?[0-9]+")


def unwrap_set(value: Any) -> Any:
    """Strip any number of tag-258 (set) wrappers."""
    while isinstance(value, Tagged) and value.tag == TAG_SET:
        value = value.value
    return value


def is_absent(value: Any) -> bool:
    return value is None or isinstance(value, Null)


def format_value(value: Any) -> Any:
    """
    Generic normalization.

    Byte strings become lowercase hex, sets are unwrapped, other tags become
    {"tag", "value"} records, containers are normalized element-wise.
    """
    value = unwrap_set(value)
    if isinstance(value, Tagged):
        return {"tag": value.tag, "value": format_value(value.value)}
    if isinstance(value, Array):
        return [format_value(item) for item in value.items]
    if isinstance(value, Map):
        return {stringify_key(k): format_value(v) for k, v in value.entries}
    if isinstance(value, list):
        return [format_value(item) for item in value]
    if isinstance(value, dict):
        return {k: format_value(v) for k, v in value.items()}
    return to_plain(value)


def as_record(value: Any) -> Optional[Dict[str, Any]]:
    """Map (or plain dict) as a dict keyed by stringified keys, last key wins."""
    if isinstance(value, Map):
        return {stringify_key(k): v for k, v in value.entries}
    if isinstance(value, dict):
        return dict(value)
    return None


def as_items(value: Any) -> Optional[List[Any]]:
    """Array (or plain list) items after set unwrapping."""
    value = unwrap_set(value)
    if isinstance(value, Array):
        return list(value.items)
    if isinstance(value, list):
        return value
    return None


def raw_bytes(value: Any) -> Optional[bytes]:
    """Bytes behind a byte string or a hex text value."""
    if isinstance(value, ByteString):
        return value.value
    if isinstance(value, TextString):
        value = value.value
    if isinstance(value, str) and _HEX_RE.fullmatch(value):
        return bytes.fromhex(value)
    return None


def format_hex(value: Any) -> Optional[str]:
    """Lowercase hex for byte-like values, None otherwise."""
    data = raw_bytes(value)
    return data.hex() if data is not None else None


def coin_to_int(value: Any) -> Optional[int]:
    """
    Integer amount behind a coin value.

    Accepts CBOR integers, big-endian byte strings, bignum tags and decimal
    text.
    """
    if isinstance(value, (UInt, NegInt)):
        return value.value
    if isinstance(value, ByteString):
        return int.from_bytes(value.value, "big")
    if isinstance(value, Tagged) and isinstance(value.value, ByteString):
        magnitude = int.from_bytes(value.value.value, "big")
        if value.tag == TAG_POSITIVE_BIGNUM:
            return magnitude
        if value.tag == TAG_NEGATIVE_BIGNUM:
            return -1 - magnitude
        return None
    if isinstance(value, TextString):
        value = value.value
    if isinstance(value, str) and _INT_RE.fullmatch(value.strip()):
        return int(value.strip())
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def format_coin(value: Any) -> Optional[str]:
    """Decimal string for a coin value; non-numeric text passes through."""
    amount = coin_to_int(value)
    if amount is not None:
        return str(amount)
    if isinstance(value, TextString):
        return value.value
    if isinstance(value, str):
        return value
    return None


def format_fee(value: Any) -> Any:
    coin = format_coin(value)
    if coin is not None:
        return coin
    return format_value(value)


def format_address(value: Any) -> Optional[str]:
    """Bech32 address for raw bytes; text is already an address."""
    if isinstance(value, TextString):
        return value.value
    if isinstance(value, str):
        return value
    if isinstance(value, ByteString):
        return format_address_bytes(value.value)
    return None


def _optional(value: Any) -> Any:
    return None if is_absent(value) else format_value(value)


def format_amount(value: Any) -> Dict[str, Any]:
    """
    Output value as {"coin", "multiasset"}.

    Handles a bare coin, the [coin, multiasset] pair and a keyed record.
    """
    value = unwrap_set(value)
    items = as_items(value)
    if items is not None:
        coin = format_coin(items[0]) if items else None
        multiasset = items[1] if len(items) > 1 else None
        return {"coin": coin, "multiasset": _optional(multiasset)}

    record = as_record(value)
    if record is not None:
        coin_entry = _first_present(record, "0", "coin")
        multiasset = _first_present(record, "1", "multiasset")
        return {
            "coin": None if is_absent(coin_entry) else format_coin(coin_entry),
            "multiasset": _optional(multiasset),
        }

    return {"coin": format_coin(value), "multiasset": None}


def _first_present(record: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if not is_absent(record.get(key)):
            return record[key]
    return None


_OUTPUT_RESERVED_KEYS = frozenset({
    "0", "1", "2", "3",
    "address", "amount", "plutus_data", "script_ref",
})


def format_output(entry: Any) -> Any:
    """
    Transaction output.

    Legacy outputs are [address, amount, datum_hash?]; post-Alonzo outputs are
    maps keyed 0-3. Extra map keys are kept as-is.
    """
    entry = unwrap_set(entry)
    items = as_items(entry)
    if items is not None:
        padded = items + [None] * (4 - len(items))
        address, amount, datum, script_ref = padded[:4]
        return {
            "address": format_address(address),
            "amount": format_amount(amount),
            "plutus_data": _optional(datum),
            "script_ref": _optional(script_ref),
        }

    record = as_record(entry)
    if record is None:
        return format_value(entry)

    amount = _first_present(record, "1", "amount")
    formatted = {
        "address": format_address(_first_present(record, "0", "address")),
        "amount": None if is_absent(amount) else format_amount(amount),
        "plutus_data": _optional(_first_present(record, "2", "plutus_data")),
        "script_ref": _optional(_first_present(record, "3", "script_ref")),
    }
    for key, item in record.items():
        if key not in _OUTPUT_RESERVED_KEYS:
            formatted[key] = format_value(item)
    return formatted


def format_outputs(value: Any) -> Any:
    items = as_items(value)
    if items is None:
        return format_value(value)
    return [format_output(entry) for entry in items]


def parse_index(value: Any) -> Optional[int]:
    if isinstance(value, UInt):
        return value.value
    if isinstance(value, TextString):
        value = value.value
    if isinstance(value, str) and _INT_RE.fullmatch(value):
        return int(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def format_input(entry: Any) -> Any:
    """[transaction_id, index] as {"transaction_id", "index"}."""
    if isinstance(entry, dict) and "transaction_id" in entry:
        return entry
    items = as_items(entry)
    if items is None or len(items) < 2:
        return format_value(entry)
    tx_id = items[0]
    if isinstance(tx_id, TextString):
        transaction_id = tx_id.value
    elif isinstance(tx_id, ByteString):
        transaction_id = tx_id.value.hex()
    elif isinstance(tx_id, str):
        transaction_id = tx_id
    else:
        transaction_id = None
    return {"transaction_id": transaction_id, "index": parse_index(items[1])}


def format_inputs(value: Any) -> Any:
    items = as_items(value)
    if items is None:
        return format_value(value)
    return [format_input(entry) for entry in items]


def format_network_id(value: Any) -> str:
    """0/1 as Testnet/Mainnet, anything else as its string form."""
    if isinstance(value, UInt):
        number = value.value
    elif isinstance(value, int) and not isinstance(value, bool):
        number = value
    else:
        number = None
    if number is not None and number in NETWORK_LABELS:
        return NETWORK_LABELS[number]
    plain = format_value(value)
    return plain if isinstance(plain, str) else str(plain)


def format_required_signers(value: Any) -> Any:
    """Key hashes as hex; entries that are not byte-like are dropped."""
    items = as_items(value)
    if items is None:
        return format_value(value)
    signers = []
    for item in items:
        key_hash = format_hex(item)
        if key_hash is not None:
            signers.append(key_hash)
    return signers
