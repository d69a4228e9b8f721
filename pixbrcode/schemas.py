"""Pydantic schema for the flat BR Code input record."""
from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .keys import KeyType


class BRCodeStatic(BaseModel):
    """Attributes of a static PIX charge as supplied by the caller.

    Only shapes are checked here. Business rules and their messages live in
    :mod:`pixbrcode.validation`, so strings arrive untrimmed.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    receiver_name: str
    receiver_city: str
    receiver_country_code: str
    identifier: str
    key: str
    key_type: KeyType
    amount: Decimal | None = None
    description: str | None = None
    is_unique_transaction: bool = False
