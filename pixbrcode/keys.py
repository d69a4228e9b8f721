"""PIX key types and their format predicates."""
from __future__ import annotations

import enum
from typing import Callable, Final, Mapping

import phonenumbers
from email_validator import EmailNotValidError, validate_email
from phonenumbers import NumberParseException, PhoneNumberFormat, PhoneNumberType
from validate_docbr import CNPJ, CPF


class KeyType(str, enum.Enum):
    EMAIL = "EMAIL"
    PHONE = "PHONE"
    CPF = "CPF"
    CNPJ = "CNPJ"
    RANDOM = "RANDOM"


_MOBILE_TYPES: Final = frozenset({PhoneNumberType.MOBILE, PhoneNumberType.FIXED_LINE_OR_MOBILE})


def is_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_mobile_phone(value: str) -> bool:
    """Accept only mobile numbers written in E.164 form, e.g. ``+5511987654321``."""

    if not value.startswith("+"):
        return False
    try:
        number = phonenumbers.parse(value, None)
    except NumberParseException:
        return False
    if not phonenumbers.is_valid_number(number):
        return False
    if phonenumbers.format_number(number, PhoneNumberFormat.E164) != value:
        return False
    return phonenumbers.number_type(number) in _MOBILE_TYPES


def is_cpf(value: str) -> bool:
    return value.isdigit() and CPF().validate(value)


def is_cnpj(value: str) -> bool:
    return value.isdigit() and CNPJ().validate(value)


def is_random(value: str) -> bool:
    return True


KEY_VALIDATORS: Final[Mapping[KeyType, Callable[[str], bool]]] = {
    KeyType.EMAIL: is_email,
    KeyType.PHONE: is_mobile_phone,
    KeyType.CPF: is_cpf,
    KeyType.CNPJ: is_cnpj,
    KeyType.RANDOM: is_random,
}

_missing = set(KeyType) - set(KEY_VALIDATORS)
if _missing:
    raise RuntimeError(f"key types without validator: {sorted(k.value for k in _missing)}")


def is_valid_key(key: str, key_type: KeyType) -> bool:
    """Run the predicate registered for ``key_type``."""

    return KEY_VALIDATORS[KeyType(key_type)](key)
