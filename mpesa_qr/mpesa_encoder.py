"""M-Pesa merchant presented mode payload encoder."""
from __future__ import annotations

from dataclasses import dataclass

from .crc import crc16_ccitt
from .models import MerchantInfo, PaymentTarget
from .tlv import MAX_VALUE_LENGTH, TLVItem, build_tlv, parse_tlv

MPESA_GUID = "A000000677010111"
# Declared length 14 is what issued codes carry for the 16-character GUID,
# so the field is emitted as a literal rather than through TLVItem.
MPESA_GUID_FIELD = f"0014{MPESA_GUID}"

PAYLOAD_FORMAT_INDICATOR = "01"
POINT_OF_INITIATION_STATIC = "11"
CURRENCY_KES = "KES"
COUNTRY_KE = "KE"
CRC_HEADER = "6304"


@dataclass(frozen=True)
class EncodedPayload:
    payload: str
    crc: str


@dataclass(frozen=True)
class DecodedPayload:
    items: tuple[TLVItem, ...]
    merchant_account: tuple[TLVItem, ...]
    crc: str
    computed_crc: str

    @property
    def checksum_valid(self) -> bool:
        return self.crc == self.computed_crc

    def get(self, tag: str) -> str | None:
        for item in self.items:
            if item.tag == tag:
                return item.value
        return None


def merchant_account_template(target: PaymentTarget) -> str:
    """Nested value of tag 26 for ``target``."""

    return MPESA_GUID_FIELD + build_tlv(target.to_subitems())


def account_ref_capacity(target: PaymentTarget) -> int:
    """Longest account reference that still fits the tag 26 template."""

    base = MPESA_GUID_FIELD + TLVItem(tag=target.payment_type.account_subtag, value=target.identifier).serialize()
    return max(MAX_VALUE_LENGTH - len(base) - 4, 0)


def encode_payload(target: PaymentTarget, merchant: MerchantInfo | None = None) -> EncodedPayload:
    """Assemble the payload for ``target`` and append its CRC16."""

    items = [
        TLVItem(tag="00", value=PAYLOAD_FORMAT_INDICATOR),
        TLVItem(tag="01", value=POINT_OF_INITIATION_STATIC),
        TLVItem(tag="26", value=merchant_account_template(target)),
        TLVItem(tag="53", value=CURRENCY_KES),
        TLVItem(tag="58", value=COUNTRY_KE),
    ]
    if merchant is not None and merchant.name:
        items.append(TLVItem(tag="59", value=merchant.name))

    crc_input = f"{build_tlv(items)}{CRC_HEADER}"
    crc = crc16_ccitt(crc_input)
    return EncodedPayload(payload=f"{crc_input}{crc}", crc=crc)


def inspect_payload(payload: str) -> DecodedPayload:
    """Split ``payload`` into its fields and recompute the checksum."""

    items = tuple(parse_tlv(payload))
    if not items or items[-1].tag != "63" or len(items[-1].value) != 4:
        raise ValueError("Payload must end with a 4-character Tag 63 checksum")

    merchant_account: tuple[TLVItem, ...] = ()
    for item in items:
        if item.tag == "26":
            template = item.value
            if template.startswith(MPESA_GUID_FIELD):
                template = template[len(MPESA_GUID_FIELD) :]
                merchant_account = (TLVItem(tag="00", value=MPESA_GUID),)
            merchant_account += tuple(parse_tlv(template))
            break

    return DecodedPayload(
        items=items,
        merchant_account=merchant_account,
        crc=items[-1].value,
        computed_crc=crc16_ccitt(payload[:-4]),
    )
