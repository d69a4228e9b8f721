"""Shared fixtures for the BR Code test suite."""
from __future__ import annotations

from typing import Any

import pytest

EXPECTED_WITHOUT_AMOUNT = (
    "00020126560014br.gov.bcb.pix0125example123456@example.com0205Teste"
    "5204000053039865802BR5907Weslley6009Sao Paulo62070503***6304D6B4"
)
EXPECTED_WITH_AMOUNT = (
    "00020126560014br.gov.bcb.pix0125example123456@example.com0205Teste"
    "5204000053039865406100.005802BR5907Weslley6009Sao Paulo62070503***6304316C"
)


@pytest.fixture
def default_data() -> dict[str, Any]:
    """Reference charge: Weslley in Sao Paulo, e-mail key, no amount."""
    return {
        "receiver_name": "Weslley",
        "receiver_city": "Sao Paulo",
        "receiver_country_code": "BR",
        "identifier": "***",
        "description": "Teste",
        "key": "example123456@example.com",
        "key_type": "EMAIL",
    }


@pytest.fixture
def expected_without_amount() -> str:
    return EXPECTED_WITHOUT_AMOUNT


@pytest.fixture
def expected_with_amount() -> str:
    return EXPECTED_WITH_AMOUNT
