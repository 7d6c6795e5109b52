from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from ..core.dependencies import get_withdrawal_service
from ..services import WithdrawalService


router = APIRouter(prefix="/bank", tags=["bank"])

# Business outcomes (invalid amount, insufficient funds, errors) are all
# reported as 200 with a descriptive plain-text body.
@router.post("/withdraw", response_class=PlainTextResponse)
def withdraw(
    account_id: int = Query(..., alias="accountId"),
    amount: Optional[Decimal] = Query(default=None),
    service: WithdrawalService = Depends(get_withdrawal_service),
) -> str:
    return service.withdraw(account_id, amount).message

__all__ = ["router"]
