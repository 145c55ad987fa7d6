"""Build and parse EMV-style TLV strings with two-digit lengths."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

MAX_VALUE_LENGTH = 99


class TLVLengthError(ValueError):
    """Raised when a value does not fit the two-digit length field."""


@dataclass(frozen=True)
class TLVItem:
    tag: str
    value: str

    def __post_init__(self) -> None:
        if len(self.tag) != 2 or not self.tag.isdigit():
            raise ValueError(f"TLV tag must be two digits, got {self.tag!r}")

    def serialize(self) -> str:
        if len(self.value) > MAX_VALUE_LENGTH:
            raise TLVLengthError(
                f"Tag {self.tag} value is {len(self.value)} characters, limit is {MAX_VALUE_LENGTH}"
            )
        return f"{self.tag}{len(self.value):02d}{self.value}"


def build_tlv(items: Iterable[TLVItem]) -> str:
    """Serialize TLV items into one string, in iteration order."""

    return "".join(item.serialize() for item in items)


def parse_tlv(payload: str) -> Iterator[TLVItem]:
    """Yield TLV items from ``payload``; raise ``ValueError`` on malformed input."""

    idx = 0
    total = len(payload)
    while idx + 4 <= total:
        tag = payload[idx : idx + 2]
        raw_length = payload[idx + 2 : idx + 4]
        if not raw_length.isdigit():
            raise ValueError(f"Invalid TLV length {raw_length!r} at offset {idx}")
        value_start = idx + 4
        value_end = value_start + int(raw_length)
        if value_end > total:
            raise ValueError("Invalid TLV length exceeds payload")
        yield TLVItem(tag=tag, value=payload[value_start:value_end])
        idx = value_end
    if idx != total:
        raise ValueError("Dangling TLV data detected")
