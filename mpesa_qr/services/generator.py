"""Payload building service."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from ..models import MerchantInfo, Paybill, PaymentRequest, PaymentTarget, PaymentType, Phone, Till
from ..mpesa_encoder import EncodedPayload, account_ref_capacity, encode_payload
from ..tlv import MAX_VALUE_LENGTH
from .errors import ServiceError, err_empty_input, err_invalid_field, err_invalid_format
from .validation import format_hint, is_encodable_text, normalize_number, validate_number

logger = logging.getLogger("mpesa_qr.generator")


@dataclass(frozen=True, slots=True)
class BuildResult:
    """Outcome of a build: exactly one of ``encoded`` and ``error`` is set."""

    encoded: EncodedPayload | None = None
    error: ServiceError | None = None
    target: PaymentTarget | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def payload(self) -> str | None:
        return self.encoded.payload if self.encoded else None

    def unwrap(self) -> EncodedPayload:
        if self.error is not None:
            raise self.error
        assert self.encoded is not None
        return self.encoded


def make_target(payment_type: PaymentType, number: str, account_number: str = "") -> PaymentTarget:
    if payment_type is PaymentType.PAYBILL:
        return Paybill(business_short_code=number, account_ref=account_number or None)
    if payment_type is PaymentType.TILL:
        return Till(till_number=number)
    return Phone(msisdn=number)


def _check_free_text(label: str, value: str, limit: int) -> ServiceError | None:
    if not is_encodable_text(value):
        return err_invalid_field(f"{label} may only contain printable Latin-1 characters")
    if len(value) > limit:
        return err_invalid_field(f"{label} must be at most {limit} characters")
    return None


def _reject(error: ServiceError, payment_type: str) -> BuildResult:
    logger.info("payload rejected", extra={"code": error.code, "payment_type": payment_type})
    return BuildResult(error=error)


def build_payload(
    payment_type: PaymentType | str,
    number: str,
    account_number: str = "",
    business_name: str = "",
) -> BuildResult:
    """Validate the raw form values and build the QR payload string."""

    try:
        kind = PaymentType(payment_type)
    except ValueError:
        return _reject(err_invalid_format(f"Unsupported payment type {payment_type!r}"), str(payment_type))

    if not number or not number.strip():
        return _reject(err_empty_input(), kind.value)
    if not validate_number(kind, number):
        return _reject(err_invalid_format(format_hint(kind)), kind.value)

    normalized = normalize_number(kind, number)
    if kind is not PaymentType.PAYBILL:
        account_number = ""

    target = make_target(kind, normalized)
    if account_number:
        error = _check_free_text("Account number", account_number, account_ref_capacity(target))
        if error:
            return _reject(error, kind.value)
        target = make_target(kind, normalized, account_number)

    if business_name:
        error = _check_free_text("Business name", business_name, MAX_VALUE_LENGTH)
        if error:
            return _reject(error, kind.value)

    encoded = encode_payload(target, MerchantInfo(name=business_name or None))
    logger.debug(
        "payload generated",
        extra={"payment_type": kind.value, "crc": encoded.crc, "payload_length": len(encoded.payload)},
    )
    return BuildResult(encoded=encoded, target=target)


def build_from_request(request: PaymentRequest) -> BuildResult:
    return build_payload(
        request.payment_type,
        request.number,
        account_number=request.account_number,
        business_name=request.business_name,
    )
