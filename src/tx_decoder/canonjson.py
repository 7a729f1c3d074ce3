"""
Canonical JSON

Sorts object keys lexicographically and encodes with no extra whitespace so
the text form of a value is stable. Used for container map keys and CLI
output.
"""

import json
import math
from typing import Any, Optional


def dumps_canonical(obj: Any) -> str:
    """
    Encode object as canonical JSON string.

    Deterministic key order, no extra whitespace, non-finite floats rendered
    as null. Recursively applies canonicalization to nested objects and arrays.

    Args:
        obj: Object to encode (dict, list, str, int, float, bool, None)

    Returns:
        Canonical JSON string with sorted keys and no extra whitespace
    """
    return json.dumps(_canonicalize(obj), separators=(',', ':'), ensure_ascii=False, sort_keys=True)


def dumps_pretty(obj: Any, indent: Optional[int] = 2) -> str:
    """Human-readable JSON with the same value canonicalization."""
    return json.dumps(_canonicalize(obj), indent=indent, ensure_ascii=False, sort_keys=False)


def _canonicalize(v: Any) -> Any:
    """
    Recursively canonicalize a value.

    - Maps: stringify keys, recursively canonicalize values
    - Lists: Recursively canonicalize elements, preserve order
    - Floats: NaN and infinities become null
    - Other primitives: Pass through unchanged

    Args:
        v: Value to canonicalize

    Returns:
        Canonicalized value ready for JSON encoding
    """
    if isinstance(v, dict):
        return {str(k): _canonicalize(item) for k, item in v.items()}
    elif isinstance(v, (list, tuple)):
        return [_canonicalize(item) for item in v]
    elif isinstance(v, float) and not math.isfinite(v):
        return None
    else:
        return v
