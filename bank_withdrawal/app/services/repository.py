from __future__ import annotations

from decimal import Decimal

from sqlalchemy import update
from sqlmodel import Session, select

from ..core.errors import AccountNotFoundError
from ..models import AccountModel, from_minor_units, to_minor_units


class BalanceRepository:
    """Thin data access layer over the accounts table.

    Balances are stored as integer cents; callers deal in Decimal amounts.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def read_balance(self, account_id: int) -> Decimal:
        # FOR UPDATE is dropped by backends without row locks (SQLite).
        stmt = (
            select(AccountModel.balance)
            .where(AccountModel.id == account_id)
            .with_for_update()
        )
        balance = self.session.exec(stmt).first()
        if balance is None:
            raise AccountNotFoundError(f"Account {account_id} not found")
        return from_minor_units(balance)

    def decrement_balance(self, account_id: int, amount: Decimal) -> int:
        """Subtract ``amount`` from the account and return the affected-row count.

        The ``balance >= amount`` guard makes the write a no-op (0 rows) when a
        concurrent withdrawal has already drained the funds seen by the caller.
        """
        cents = to_minor_units(amount)
        stmt = (
            update(AccountModel)
            .where(AccountModel.id == account_id)
            .where(AccountModel.balance >= cents)
            .values(balance=AccountModel.balance - cents)
        )
        result = self.session.exec(stmt)
        return result.rowcount
