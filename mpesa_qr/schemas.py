"""Pydantic schemas for API contracts."""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class PaymentTypeEnum(str, Enum):
    PAYBILL = "paybill"
    TILL = "till"
    PHONE = "phone"


class GenerateQRRequest(BaseModel):
    payment_type: PaymentTypeEnum
    number: str = Field(description="Paybill, till or phone number; separators allowed")
    account_number: str = Field(default="", description="Paybill account reference, used verbatim")
    business_name: str = Field(default="", description="Merchant display name, used verbatim")


class GenerateQRResponse(BaseModel):
    payment_type: PaymentTypeEnum
    number: str
    payload: str
    crc: str


class InspectRequest(BaseModel):
    payload: str = Field(min_length=8)


class TLVField(BaseModel):
    tag: str
    length: int
    value: str


class InspectResponse(BaseModel):
    fields: list[TLVField]
    merchant_account: list[TLVField]
    crc: str
    computed_crc: str
    checksum_valid: bool
