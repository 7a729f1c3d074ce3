"""
Decoder options.

Typed knobs for a decode call.
"""

from __future__ import annotations
from typing import Optional, Any, Dict
from pydantic import BaseModel, Field


class DecodeOptions(BaseModel):
    """
    Options for decode_cardano_transaction.

    keep_unknown_fields controls whether body keys outside 0-20 are kept as
    "field_<key>" or dropped. max_depth bounds CBOR nesting; None leaves the
    parser unbounded.
    """
    keep_unknown_fields: bool = Field(
        default=True,
        alias="keepUnknownFields",
        description="Keep unrecognized body keys as field_<key>"
    )
    max_depth: Optional[int] = Field(
        default=None,
        alias="maxDepth",
        ge=1,
        description="Maximum CBOR container nesting (None for no limit)"
    )

    model_config = {"populate_by_name": True, "frozen": True}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a camelCase dictionary."""
        result: Dict[str, Any] = {"keepUnknownFields": self.keep_unknown_fields}
        if self.max_depth is not None:
            result["maxDepth"] = self.max_depth
        return result


DEFAULT_OPTIONS = DecodeOptions()
