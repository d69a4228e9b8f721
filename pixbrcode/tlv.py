"""Helpers to build EMV-style TLV payloads."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

MAX_TAG = 99
MAX_LENGTH = 99


@dataclass(frozen=True)
class TLVItem:
    tag: int
    value: str | None

    def serialize(self) -> str:
        return emv(self.tag, self.value)


def emv(tag: int, value: str | None) -> str:
    """Encode one element as tag + length + value.

    Empty or missing values drop the whole element.
    """

    if not value:
        return ""
    if not 0 <= tag <= MAX_TAG:
        raise ValueError(f"TLV tag {tag} does not fit in two digits")
    if len(value) > MAX_LENGTH:
        raise ValueError(f"TLV value for tag {tag:02d} exceeds {MAX_LENGTH} characters")
    return f"{tag:02d}{len(value):02d}{value}"


def build_tlv(items: Iterable[TLVItem]) -> str:
    """Serialize iterable of TLV items into EMV string."""

    return "".join(item.serialize() for item in items)
