from __future__ import annotations
from decimal import Decimal, InvalidOperation
from sqlmodel import Field, SQLModel

CENT = Decimal("0.01")

class Account(SQLModel, table=True):
    __tablename__ = "accounts"

    id: int = Field(primary_key=True)
    balance: int = Field(default=0, ge=0, description="Balance in minor units (cents)")

def is_whole_cents(amount: Decimal) -> bool:
    try:
        return amount == amount.quantize(CENT)
    except InvalidOperation:
        return False

def to_minor_units(amount: Decimal) -> int:
    if not is_whole_cents(amount):
        raise ValueError(f"Amount {amount} is not a whole number of cents")
    return int(amount.scaleb(2))

def from_minor_units(cents: int) -> Decimal:
    return Decimal(cents).scaleb(-2)
