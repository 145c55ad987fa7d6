"""Payment target value objects."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Union

from .tlv import TLVItem


class PaymentType(str, enum.Enum):
    PAYBILL = "paybill"
    TILL = "till"
    PHONE = "phone"

    @property
    def account_subtag(self) -> str:
        """Merchant account template sub-tag carrying the number."""

        return _ACCOUNT_SUBTAGS[self]

    @property
    def example(self) -> str:
        return _EXAMPLES[self]


_ACCOUNT_SUBTAGS = {
    PaymentType.PAYBILL: "01",
    PaymentType.TILL: "03",
    PaymentType.PHONE: "04",
}

_EXAMPLES = {
    PaymentType.PAYBILL: "123456",
    PaymentType.TILL: "12345",
    PaymentType.PHONE: "0712345678",
}


@dataclass(frozen=True)
class Paybill:
    business_short_code: str
    account_ref: str | None = None

    payment_type = PaymentType.PAYBILL

    @property
    def identifier(self) -> str:
        return self.business_short_code

    def to_subitems(self) -> Iterable[TLVItem]:
        yield TLVItem(tag=self.payment_type.account_subtag, value=self.business_short_code)
        if self.account_ref:
            yield TLVItem(tag="02", value=self.account_ref)


@dataclass(frozen=True)
class Till:
    till_number: str

    payment_type = PaymentType.TILL

    @property
    def identifier(self) -> str:
        return self.till_number

    def to_subitems(self) -> Iterable[TLVItem]:
        yield TLVItem(tag=self.payment_type.account_subtag, value=self.till_number)


@dataclass(frozen=True)
class Phone:
    msisdn: str

    payment_type = PaymentType.PHONE

    @property
    def identifier(self) -> str:
        return self.msisdn

    def to_subitems(self) -> Iterable[TLVItem]:
        yield TLVItem(tag=self.payment_type.account_subtag, value=self.msisdn)


PaymentTarget = Union[Paybill, Till, Phone]


@dataclass(frozen=True)
class MerchantInfo:
    name: str | None = None


@dataclass(frozen=True)
class PaymentRequest:
    """Raw form input for one generation request."""

    payment_type: PaymentType | str
    number: str
    account_number: str = ""
    business_name: str = ""
