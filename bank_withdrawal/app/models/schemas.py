import json
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

INVALID_AMOUNT_MESSAGE = "Invalid withdrawal amount"
SUCCESS_MESSAGE = "Withdrawal successful"
FAILED_MESSAGE = "Withdrawal failed"
INSUFFICIENT_FUNDS_MESSAGE = "Insufficient funds for withdrawal"
ERROR_MESSAGE_PREFIX = "Error processing withdrawal: "


class WithdrawalStatus(str, Enum):
    INVALID_AMOUNT = "INVALID_AMOUNT"
    SUCCESSFUL = "SUCCESSFUL"
    FAILED = "FAILED"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    ERROR = "ERROR"


class WithdrawalEvent(BaseModel):
    """Outcome of one withdrawal attempt, as published to the notification topic."""

    model_config = ConfigDict(populate_by_name=True)

    amount: Optional[Decimal] = None
    account_id: int = Field(..., alias="accountId")
    status: WithdrawalStatus

    def to_json(self) -> str:
        data = self.model_dump(mode="json", by_alias=True)
        return json.dumps(data, sort_keys=True)


class WithdrawalResult(BaseModel):
    account_id: int
    amount: Optional[Decimal] = None
    status: WithdrawalStatus
    message: str
    detail: Optional[str] = Field(default=None, description="Failure description for ERROR outcomes")

    @classmethod
    def invalid_amount(cls, account_id: int, amount: Optional[Decimal]) -> "WithdrawalResult":
        return cls(
            account_id=account_id,
            amount=amount,
            status=WithdrawalStatus.INVALID_AMOUNT,
            message=INVALID_AMOUNT_MESSAGE,
        )

    @classmethod
    def successful(cls, account_id: int, amount: Decimal) -> "WithdrawalResult":
        return cls(
            account_id=account_id,
            amount=amount,
            status=WithdrawalStatus.SUCCESSFUL,
            message=SUCCESS_MESSAGE,
        )

    @classmethod
    def write_failed(cls, account_id: int, amount: Decimal) -> "WithdrawalResult":
        return cls(
            account_id=account_id,
            amount=amount,
            status=WithdrawalStatus.FAILED,
            message=FAILED_MESSAGE,
        )

    @classmethod
    def insufficient_funds(cls, account_id: int, amount: Decimal) -> "WithdrawalResult":
        return cls(
            account_id=account_id,
            amount=amount,
            status=WithdrawalStatus.INSUFFICIENT_FUNDS,
            message=INSUFFICIENT_FUNDS_MESSAGE,
        )

    @classmethod
    def system_error(
        cls, account_id: int, amount: Optional[Decimal], detail: str
    ) -> "WithdrawalResult":
        return cls(
            account_id=account_id,
            amount=amount,
            status=WithdrawalStatus.ERROR,
            message=f"{ERROR_MESSAGE_PREFIX}{detail}",
            detail=detail,
        )

    def event(self) -> WithdrawalEvent:
        return WithdrawalEvent(
            amount=self.amount, account_id=self.account_id, status=self.status
        )
