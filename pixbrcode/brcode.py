"""Static PIX BR Code entity and payload encoder."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping

from .crc import append_crc
from .errors import BRCodeError, err_too_long
from .keys import KeyType
from .monitoring import record_payload_built, record_validation_error
from .schemas import BRCodeStatic
from .tlv import MAX_LENGTH, TLVItem, build_tlv, emv
from .validation import to_cents, validate_fields

logger = logging.getLogger("pixbrcode.brcode")

PIX_GUI = "br.gov.bcb.pix"
PAYLOAD_FORMAT_INDICATOR = "01"
MERCHANT_CATEGORY_CODE = "0000"
CURRENCY_BRL = "986"

TAG_PAYLOAD_FORMAT = 0
TAG_MERCHANT_ACCOUNT = 26
TAG_MERCHANT_CATEGORY = 52
TAG_CURRENCY = 53
TAG_AMOUNT = 54
TAG_COUNTRY_CODE = 58
TAG_RECEIVER_NAME = 59
TAG_RECEIVER_CITY = 60
TAG_ADDITIONAL_DATA = 62


def merchant_account_information(key: str, description: str | None = None) -> str:
    return emv(0, PIX_GUI) + emv(1, key) + emv(2, description)


def additional_data_field(identifier: str) -> str:
    return emv(5, identifier)


def format_amount(amount: Decimal | int | float | None) -> str | None:
    """Render ``amount`` with exactly two decimals, e.g. ``100`` -> ``"100.00"``."""

    if amount is None:
        return None
    return f"{to_cents(amount):f}"


@dataclass(frozen=True, slots=True)
class BRCode:
    """Validated, immutable static PIX charge.

    All fields are checked and trimmed in ``__post_init__``; an invalid field
    raises :class:`BRCodeError` and no instance is produced.
    ``is_unique_transaction`` is kept for callers but is not encoded.
    """

    receiver_name: str
    receiver_city: str
    receiver_country_code: str
    identifier: str
    key: str
    key_type: KeyType
    amount: Decimal | None = None
    description: str | None = None
    is_unique_transaction: bool = False

    def __post_init__(self) -> None:
        key_type = KeyType(self.key_type)
        try:
            fields = validate_fields(
                receiver_name=self.receiver_name,
                receiver_city=self.receiver_city,
                receiver_country_code=self.receiver_country_code,
                identifier=self.identifier,
                key=self.key,
                key_type=key_type,
                amount=self.amount,
                description=self.description,
            )
            account_info = merchant_account_information(fields["key"], fields["description"])
            if len(account_info) > MAX_LENGTH:
                raise err_too_long("merchant_account_information", "Merchant account information", MAX_LENGTH)
        except BRCodeError as exc:
            logger.warning(
                "brcode validation failed",
                extra={"code": exc.code, "field": exc.field, "key_type": key_type.value},
            )
            record_validation_error(exc.code, exc.field)
            raise

        for name, value in fields.items():
            object.__setattr__(self, name, value)
        object.__setattr__(self, "key_type", key_type)
        object.__setattr__(self, "is_unique_transaction", bool(self.is_unique_transaction))

        record_payload_built(key_type.value)
        logger.debug(
            "brcode built",
            extra={"key_type": key_type.value, "has_amount": self.amount is not None},
        )

    @classmethod
    def from_static(cls, data: BRCodeStatic) -> "BRCode":
        return cls(**data.model_dump())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BRCode":
        """Build from a plain mapping; snake_case and camelCase keys both work."""

        return cls.from_static(BRCodeStatic.model_validate(data))

    @property
    def merchant_account_information(self) -> str:
        return merchant_account_information(self.key, self.description)

    @property
    def additional_data_field(self) -> str:
        return additional_data_field(self.identifier)

    def tlv_items(self) -> list[TLVItem]:
        """Top-level elements in emission order, CRC excluded."""

        return [
            TLVItem(TAG_PAYLOAD_FORMAT, PAYLOAD_FORMAT_INDICATOR),
            TLVItem(TAG_MERCHANT_ACCOUNT, self.merchant_account_information),
            TLVItem(TAG_MERCHANT_CATEGORY, MERCHANT_CATEGORY_CODE),
            TLVItem(TAG_CURRENCY, CURRENCY_BRL),
            TLVItem(TAG_AMOUNT, format_amount(self.amount)),
            TLVItem(TAG_COUNTRY_CODE, self.receiver_country_code),
            TLVItem(TAG_RECEIVER_NAME, self.receiver_name),
            TLVItem(TAG_RECEIVER_CITY, self.receiver_city),
            TLVItem(TAG_ADDITIONAL_DATA, self.additional_data_field),
        ]

    def to_brcode(self) -> str:
        """Serialize into the final "copia e cola" payload with its CRC."""

        payload = append_crc(build_tlv(self.tlv_items()))
        logger.debug("brcode serialized", extra={"payload_length": len(payload)})
        return payload

    def __str__(self) -> str:
        return self.to_brcode()
