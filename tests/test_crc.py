"""Tests for the CRC-16/CCITT-FALSE checksum."""
import re

from pixbrcode.crc import append_crc, crc16_ccitt


def test_crc_check_value():
    """Standard CCITT-FALSE check value for "123456789"."""
    assert crc16_ccitt("123456789") == "29B1"


def test_crc_of_empty_string_is_initial_value():
    assert crc16_ccitt("") == "FFFF"


def test_crc_is_zero_padded_uppercase_hex():
    for data in ("", "A", "6304", "0002016304", "br.gov.bcb.pix"):
        assert re.fullmatch(r"[0-9A-F]{4}", crc16_ccitt(data))


def test_crc_matches_reference_payloads(expected_without_amount, expected_with_amount):
    for payload in (expected_without_amount, expected_with_amount):
        assert crc16_ccitt(payload[:-4]) == payload[-4:]


def test_append_crc_adds_tag_and_checksum(expected_without_amount):
    body = expected_without_amount[:-8]
    assert append_crc(body) == expected_without_amount


def _bitwise_crc(data: bytes) -> int:
    checksum = 0xFFFF
    for byte in data:
        checksum ^= byte << 8
        for _ in range(8):
            checksum = ((checksum << 1) ^ 0x1021) if checksum & 0x8000 else (checksum << 1)
            checksum &= 0xFFFF
    return checksum


def test_table_matches_bitwise_computation():
    samples = ["", "\x00", "\xff", "Sao Paulo", "João", "0002010102" * 30]
    for data in samples:
        assert crc16_ccitt(data) == f"{_bitwise_crc(data.encode('utf-8')):04X}"
