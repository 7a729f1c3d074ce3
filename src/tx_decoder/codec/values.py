"""
CBOR value tree.

The generic data model produced by the parser: one frozen dataclass per CBOR
item kind. Consumers dispatch on the concrete class.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class UInt:
    """Major type 0."""
    value: int


@dataclass(frozen=True)
class NegInt:
    """Major type 1, already resolved to -1 - n."""
    value: int


@dataclass(frozen=True)
class ByteString:
    """Major type 2."""
    value: bytes


@dataclass(frozen=True)
class TextString:
    """Major type 3."""
    value: str


@dataclass(frozen=True)
class Array:
    """Major type 4."""
    items: Tuple["CborValue", ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> "CborValue":
        return self.items[index]

    def get(self, index: int) -> "CborValue | None":
        """Item at index, or None when the slot is absent."""
        if 0 <= index < len(self.items):
            return self.items[index]
        return None


@dataclass(frozen=True)
class Map:
    """
    Major type 5.

    Entries keep wire order and may repeat keys.
    """
    entries: Tuple[Tuple["CborValue", "CborValue"], ...] = ()

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class Tagged:
    """Major type 6."""
    tag: int
    value: "CborValue"


@dataclass(frozen=True)
class Bool:
    value: bool


@dataclass(frozen=True)
class Null:
    pass


@dataclass(frozen=True)
class Float:
    value: float


CborValue = Union[UInt, NegInt, ByteString, TextString, Array, Map, Tagged, Bool, Null, Float]

NULL = Null()

__all__ = [
    "UInt",
    "NegInt",
    "ByteString",
    "TextString",
    "Array",
    "Map",
    "Tagged",
    "Bool",
    "Null",
    "Float",
    "CborValue",
    "NULL",
]
