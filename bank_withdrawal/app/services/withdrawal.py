from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional, Protocol

from sqlmodel import Session

from ..models import WithdrawalEvent, WithdrawalResult, is_whole_cents
from .repository import BalanceRepository


logger = logging.getLogger(__name__)


class EventDispatcher(Protocol):
    def dispatch(self, event: WithdrawalEvent) -> None: ...


class WithdrawalService:
    def __init__(
        self,
        session: Session,
        dispatcher: EventDispatcher,
        repository: Optional[BalanceRepository] = None,
    ) -> None:
        self.session = session
        self.dispatcher = dispatcher
        self.repository = repository or BalanceRepository(session)

    # ------------------------------------------------------------------
    # Helper utilities
    # ------------------------------------------------------------------
    def _is_valid_amount(self, amount: Optional[Decimal]) -> bool:
        # Sub-cent amounts are rejected rather than rounded.
        return (
            amount is not None
            and amount.is_finite()
            and amount > 0
            and is_whole_cents(amount)
        )

    def _debit(self, account_id: int, amount: Decimal) -> WithdrawalResult:
        current_balance = self.repository.read_balance(account_id)
        if current_balance < amount:
            self.session.rollback()
            return WithdrawalResult.insufficient_funds(account_id, amount)

        rows_affected = self.repository.decrement_balance(account_id, amount)
        if rows_affected > 0:
            self.session.commit()
            return WithdrawalResult.successful(account_id, amount)

        self.session.rollback()
        return WithdrawalResult.write_failed(account_id, amount)

    def _rollback(self) -> None:
        try:
            self.session.rollback()
        except Exception:
            logger.exception("withdrawal.rollback_failed")

    def _emit(self, result: WithdrawalResult) -> None:
        try:
            self.dispatcher.dispatch(result.event())
        except Exception:
            logger.exception(
                "withdrawal.event.dispatch_failed",
                extra={"account_id": result.account_id, "status": result.status.value},
            )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def withdraw(self, account_id: int, amount: Optional[Decimal]) -> WithdrawalResult:
        """Debit ``amount`` from the account and report the outcome.

        Never raises: store failures become an ERROR result. Exactly one event
        is dispatched per call, whatever the outcome.
        """
        if not self._is_valid_amount(amount):
            # NaN/Infinity are not representable in the event payload.
            if amount is not None and not amount.is_finite():
                amount = None
            result = WithdrawalResult.invalid_amount(account_id, amount)
        else:
            try:
                result = self._debit(account_id, amount)
            except Exception as exc:
                self._rollback()
                logger.exception(
                    "withdrawal.error",
                    extra={"account_id": account_id, "amount": str(amount)},
                )
                result = WithdrawalResult.system_error(account_id, amount, str(exc))

        self._emit(result)
        logger.info(
            "withdrawal.%s",
            result.status.value.lower(),
            extra={
                "account_id": account_id,
                "amount": None if amount is None else str(amount),
                "status": result.status.value,
            },
        )
        return result
