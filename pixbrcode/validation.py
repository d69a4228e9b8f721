"""Field validation chain for BR Code attributes.

Each ``check_*`` function trims its input, enforces one field's rules in a
fixed order and returns the normalized value. :func:`validate_fields` runs the
checks in declaration order so that, when several fields are invalid, the
error raised is always the one for the earliest field.
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

import pycountry

from .errors import err_invalid, err_length, err_required, err_too_long
from .keys import KeyType, is_valid_key

MAX_RECEIVER_NAME = 25
MAX_RECEIVER_CITY = 15
COUNTRY_CODE_SIZE = 2
MAX_IDENTIFIER = 25
MAX_DESCRIPTION = 77
MAX_KEY = 77
MAX_AMOUNT = 13

CENTS = Decimal("0.01")


def _trim(value: str | None) -> str:
    return value.strip() if value else ""


def check_receiver_name(value: str | None) -> str:
    value = _trim(value)
    if not value:
        raise err_required("receiver_name", "Receiver name")
    if len(value) > MAX_RECEIVER_NAME:
        raise err_too_long("receiver_name", "Receiver name", MAX_RECEIVER_NAME)
    return value


def check_receiver_city(value: str | None) -> str:
    value = _trim(value)
    if not value:
        raise err_required("receiver_city", "Receiver city")
    if len(value) > MAX_RECEIVER_CITY:
        raise err_too_long("receiver_city", "Receiver city", MAX_RECEIVER_CITY)
    return value


def check_receiver_country_code(value: str | None) -> str:
    value = _trim(value)
    if not value:
        raise err_required("receiver_country_code", "Receiver country code")
    if len(value) != COUNTRY_CODE_SIZE:
        raise err_length("receiver_country_code", "Receiver country code", COUNTRY_CODE_SIZE)
    if pycountry.countries.get(alpha_2=value) is None:
        raise err_invalid("receiver_country_code", "Receiver country code must be a valid country code")
    return value


def check_identifier(value: str | None) -> str:
    value = _trim(value)
    if not value:
        raise err_required("identifier", "Identifier")
    if len(value) > MAX_IDENTIFIER:
        raise err_too_long("identifier", "Identifier", MAX_IDENTIFIER)
    return value


def check_description(value: str | None) -> str | None:
    value = _trim(value)
    if len(value) > MAX_DESCRIPTION:
        raise err_too_long("description", "Description", MAX_DESCRIPTION)
    return value or None


def to_cents(value: Decimal | int | float | str) -> Decimal:
    """Round to two decimals, half up. ``1.005`` becomes ``1.01``."""

    amount = value if isinstance(value, Decimal) else Decimal(str(value))
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def check_amount(value: Decimal | int | float | str | None) -> Decimal | None:
    if value is None:
        return None
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise err_invalid("amount", "Amount must be a valid number") from None
    if not amount.is_finite():
        raise err_invalid("amount", "Amount must be a valid number")
    # zero is accepted
    if amount < 0:
        raise err_invalid("amount", "Amount must be greater than 0")
    # quantize would overflow the decimal context before the length check
    if amount.adjusted() >= MAX_AMOUNT:
        raise err_too_long("amount", "Amount", MAX_AMOUNT)
    amount = to_cents(amount)
    if amount.is_zero():
        amount = abs(amount)
    if len(f"{amount:f}") > MAX_AMOUNT:
        raise err_too_long("amount", "Amount", MAX_AMOUNT)
    return amount


def check_key(value: str | None, key_type: KeyType) -> str:
    value = _trim(value)
    if not value:
        raise err_required("key", "Key")
    if len(value) > MAX_KEY:
        raise err_too_long("key", "Key", MAX_KEY)
    if not is_valid_key(value, key_type):
        raise err_invalid("key", "Key must be a valid key for this key type")
    return value


def validate_fields(
    *,
    receiver_name: str | None,
    receiver_city: str | None,
    receiver_country_code: str | None,
    identifier: str | None,
    key: str | None,
    key_type: KeyType,
    amount: Decimal | int | float | str | None = None,
    description: str | None = None,
) -> dict[str, Any]:
    """Return normalized field values or raise the first :class:`BRCodeError`."""

    return {
        "receiver_name": check_receiver_name(receiver_name),
        "receiver_city": check_receiver_city(receiver_city),
        "receiver_country_code": check_receiver_country_code(receiver_country_code),
        "identifier": check_identifier(identifier),
        "description": check_description(description),
        "amount": check_amount(amount),
        "key": check_key(key, key_type),
    }
