"""Tests for PIX key type predicates."""
import pytest

from pixbrcode.keys import KEY_VALIDATORS, KeyType, is_valid_key


def test_every_key_type_has_a_validator():
    assert set(KEY_VALIDATORS) == set(KeyType)


@pytest.mark.parametrize(
    "key, key_type",
    [
        ("example@example.com", KeyType.EMAIL),
        ("example123456@example.com", KeyType.EMAIL),
        ("+5564996474879", KeyType.PHONE),
        ("65952998607", KeyType.CPF),
        ("99336905000102", KeyType.CNPJ),
        ("gfhfghjgfhfghgf", KeyType.RANDOM),
        ("123e4567-e89b-12d3-a456-426614174000", KeyType.RANDOM),
    ],
)
def test_valid_keys(key, key_type):
    assert is_valid_key(key, key_type) is True


@pytest.mark.parametrize(
    "key, key_type",
    [
        ("45664564566", KeyType.EMAIL),
        ("example@", KeyType.EMAIL),
        ("5564996474879", KeyType.PHONE),
        ("+55 64 99647-4879", KeyType.PHONE),
        ("+556432221111", KeyType.PHONE),
        ("example@example.com", KeyType.PHONE),
        ("65952998600", KeyType.CPF),
        ("659.529.986-07", KeyType.CPF),
        ("11111111111", KeyType.CPF),
        ("99336905000102", KeyType.CPF),
        ("99336905000103", KeyType.CNPJ),
        ("65952998607", KeyType.CNPJ),
    ],
)
def test_invalid_keys(key, key_type):
    assert is_valid_key(key, key_type) is False


def test_key_type_accepts_plain_string():
    assert is_valid_key("+5564996474879", "PHONE") is True
