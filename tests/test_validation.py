"""Tests for number cleaning, normalization and validation."""
import pytest

from mpesa_qr.models import PaymentType
from mpesa_qr.services.validation import (
    clean_digits,
    format_hint,
    is_encodable_text,
    normalize_number,
    validate_number,
)


def test_clean_digits_strips_separators():
    assert clean_digits("0712-345 678") == "0712345678"
    assert clean_digits("+254 (712) 345.678") == "254712345678"


def test_clean_digits_ignores_non_ascii_digits():
    assert clean_digits("١٢٣456") == "456"


@pytest.mark.parametrize("payment_type", list(PaymentType))
def test_empty_is_never_valid(payment_type):
    assert validate_number(payment_type, "") is False


@pytest.mark.parametrize(
    "payment_type,value,expected",
    [
        (PaymentType.PAYBILL, "123456", True),
        (PaymentType.PAYBILL, "12345", False),
        (PaymentType.PAYBILL, "1234567", False),
        (PaymentType.PAYBILL, "123-456", True),
        (PaymentType.TILL, "12345", True),
        (PaymentType.TILL, "123456", True),
        (PaymentType.TILL, "1234", False),
        (PaymentType.TILL, "1234567", False),
        (PaymentType.PHONE, "0712345678", True),
        (PaymentType.PHONE, "254712345678", True),
        (PaymentType.PHONE, "712345678", True),
        (PaymentType.PHONE, "+254 712 345 678", True),
        (PaymentType.PHONE, "0812345678", False),
        (PaymentType.PHONE, "254812345678", False),
        (PaymentType.PHONE, "812345678", False),
        (PaymentType.PHONE, "07123456789", False),
        (PaymentType.PHONE, "abc", False),
    ],
)
def test_validate_number(payment_type, value, expected):
    assert validate_number(payment_type, value) is expected


@pytest.mark.parametrize("value", ["0712345678", "254712345678", "712345678", "0712 345 678"])
def test_phone_forms_normalize_to_international(value):
    normalized = normalize_number(PaymentType.PHONE, value)

    assert normalized == "254712345678"
    assert normalize_number(PaymentType.PHONE, normalized) == normalized


@pytest.mark.parametrize("payment_type", [PaymentType.PAYBILL, PaymentType.TILL])
def test_business_numbers_are_only_cleaned(payment_type):
    assert normalize_number(payment_type, "012 345") == "012345"


def test_format_hint_includes_example():
    assert "0712345678" in format_hint(PaymentType.PHONE)
    assert "6 digits" in format_hint(PaymentType.PAYBILL)


@pytest.mark.parametrize(
    "value,expected",
    [
        ("Acme Stores Ltd.", True),
        ("Café Ñandú", True),
        ("Tab\there", False),
        ("Line\nbreak", False),
        ("Duka €", False),
        ("Kahawa ☕", False),
        ("\x85", False),
    ],
)
def test_is_encodable_text(value, expected):
    assert is_encodable_text(value) is expected
