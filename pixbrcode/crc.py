"""CRC-16/CCITT-FALSE checksum for BR Code payloads."""
from __future__ import annotations

CRC16_POLY = 0x1021
CRC16_INIT = 0xFFFF
CRC_TAG = "6304"


def _build_table() -> tuple[int, ...]:
    table = []
    for byte in range(256):
        value = byte << 8
        for _ in range(8):
            value = ((value << 1) ^ CRC16_POLY) if value & 0x8000 else (value << 1)
        table.append(value & 0xFFFF)
    return tuple(table)


_TABLE = _build_table()


def crc16_ccitt(data: str) -> str:
    """Checksum of the UTF-8 bytes of ``data`` as 4 uppercase hex digits.

    Polynomial 0x1021, initial value 0xFFFF, no reflection, no final XOR.
    """

    checksum = CRC16_INIT
    for byte in data.encode("utf-8"):
        checksum = ((checksum << 8) & 0xFFFF) ^ _TABLE[(checksum >> 8) ^ byte]
    return f"{checksum:04X}"


def append_crc(payload: str) -> str:
    """Terminate ``payload`` with the CRC tag and its checksum."""

    crc_input = f"{payload}{CRC_TAG}"
    return f"{crc_input}{crc16_ccitt(crc_input)}"
