"""
Reward withdrawals.
"""

from typing import Any, Dict, Optional

from .addresses import encode_reward_address, first_of
from .fields import ADA_DECIMALS, LOVELACE_PER_ADA
from .formatters import as_record, coin_to_int, format_value, raw_bytes, unwrap_set
from ..codec.values import Map


def lovelace_to_ada(lovelace: int) -> str:
    """
    ADA amount as text.

    Six decimal places at most, trailing zeros trimmed:
    5000000 -> "5", 1500000 -> "1.5".
    """
    sign = "-" if lovelace < 0 else ""
    whole, fraction = divmod(abs(lovelace), LOVELACE_PER_ADA)
    if not fraction:
        return f"{sign}{whole}"
    return f"{sign}{whole}.{fraction:0{ADA_DECIMALS}d}".rstrip("0")


def format_withdrawals(value: Any) -> Optional[Any]:
    """
    {reward_account: coin} as a totals record.

    Keys are taken in their hex form and re-read as reward account bytes to
    build the stake address. Amounts are summed exactly. An empty map
    becomes None.
    """
    value = unwrap_set(value)
    if not isinstance(value, Map):
        return format_value(value)

    withdrawals = as_record(value)
    if not withdrawals:
        return None

    total = 0
    entries = []
    for account, amount in withdrawals.items():
        account_bytes = raw_bytes(account)
        lovelace = coin_to_int(amount)
        if lovelace is not None:
            total += lovelace
        entry: Dict[str, Any] = {
            "reward_account": account,
            "reward_address": first_of(
                lambda: encode_reward_address(account_bytes) if account_bytes else None,
                lambda: account,
            ),
            "amount": str(lovelace) if lovelace is not None else format_value(amount),
        }
        entries.append(entry)

    return {
        "total_amount": str(total),
        "total_amount_ada": lovelace_to_ada(total),
        "entries": entries,
    }
