"""Tests for TLV building and parsing."""
import pytest

from mpesa_qr.tlv import TLVItem, TLVLengthError, build_tlv, parse_tlv


def test_serialize_pads_length_to_two_digits():
    assert TLVItem(tag="53", value="KES").serialize() == "5303KES"
    assert TLVItem(tag="59", value="").serialize() == "5900"


def test_build_keeps_item_order():
    items = [TLVItem(tag="58", value="KE"), TLVItem(tag="53", value="KES")]
    assert build_tlv(items) == "5802KE5303KES"


def test_length_counts_characters_not_bytes():
    assert TLVItem(tag="59", value="Café").serialize() == "5904Café"


def test_value_at_limit_serializes():
    item = TLVItem(tag="59", value="x" * 99)
    assert item.serialize().startswith("5999")


def test_value_over_limit_raises():
    with pytest.raises(TLVLengthError):
        TLVItem(tag="59", value="x" * 100).serialize()


def test_tag_must_be_two_digits():
    with pytest.raises(ValueError):
        TLVItem(tag="6", value="x")


def test_parse_reads_items():
    items = list(parse_tlv("000201010211"))
    assert items == [TLVItem(tag="00", value="01"), TLVItem(tag="01", value="11")]


def test_parse_rejects_overlong_length():
    with pytest.raises(ValueError, match="exceeds"):
        list(parse_tlv("5910KE"))


def test_parse_rejects_dangling_data():
    with pytest.raises(ValueError, match="Dangling"):
        list(parse_tlv("5802KE63"))


def test_parse_rejects_non_numeric_length():
    with pytest.raises(ValueError):
        list(parse_tlv("59ABKE"))
