"""Number normalization and input checks for payment targets."""
from __future__ import annotations

import re

from ..models import PaymentType

_NON_DIGITS = re.compile(r"[^0-9]")

_PATTERNS = {
    PaymentType.PAYBILL: re.compile(r"^[0-9]{6}$"),
    PaymentType.TILL: re.compile(r"^[0-9]{5,6}$"),
}
_PHONE_INTERNATIONAL = re.compile(r"^2547[0-9]{8}$")
_PHONE_TRUNK = re.compile(r"^07[0-9]{8}$")
_PHONE_SUBSCRIBER = re.compile(r"^7[0-9]{8}$")

_FORMAT_HINTS = {
    PaymentType.PAYBILL: "Paybill number must be exactly 6 digits",
    PaymentType.TILL: "Till number must be 5 or 6 digits",
    PaymentType.PHONE: "Phone number must be a Safaricom number starting with 07, 2547 or 7",
}

COUNTRY_PREFIX = "254"


def clean_digits(value: str) -> str:
    """Drop every character that is not an ASCII digit."""

    return _NON_DIGITS.sub("", value)


def normalize_number(payment_type: PaymentType, value: str) -> str:
    """Clean ``value`` and, for phones, move it to the ``254`` form."""

    cleaned = clean_digits(value)
    if payment_type is PaymentType.PHONE:
        if cleaned.startswith(COUNTRY_PREFIX):
            return cleaned
        if cleaned.startswith("0"):
            return COUNTRY_PREFIX + cleaned[1:]
        if len(cleaned) == 9:
            return COUNTRY_PREFIX + cleaned
    return cleaned


def validate_number(payment_type: PaymentType, value: str) -> bool:
    if not value:
        return False

    cleaned = clean_digits(value)
    if payment_type is PaymentType.PHONE:
        if cleaned.startswith(COUNTRY_PREFIX):
            return bool(_PHONE_INTERNATIONAL.match(cleaned))
        if cleaned.startswith("0"):
            return bool(_PHONE_TRUNK.match(cleaned))
        return bool(_PHONE_SUBSCRIBER.match(cleaned))
    pattern = _PATTERNS.get(payment_type)
    return bool(pattern and pattern.match(cleaned))


def format_hint(payment_type: PaymentType) -> str:
    return f"{_FORMAT_HINTS[payment_type]} (e.g. {payment_type.example})"


def is_encodable_text(value: str) -> bool:
    """True when every character is printable ISO-8859-1."""

    return all(" " <= ch <= "~" or "\u00a0" <= ch <= "\u00ff" for ch in value)
