from .db import Account as AccountModel
from .db import from_minor_units, is_whole_cents, to_minor_units
from .schemas import (
    ERROR_MESSAGE_PREFIX,
    FAILED_MESSAGE,
    INSUFFICIENT_FUNDS_MESSAGE,
    INVALID_AMOUNT_MESSAGE,
    SUCCESS_MESSAGE,
    WithdrawalEvent,
    WithdrawalResult,
    WithdrawalStatus,
)

__all__ = [
    "AccountModel",
    "from_minor_units",
    "is_whole_cents",
    "to_minor_units",
    "WithdrawalEvent",
    "WithdrawalResult",
    "WithdrawalStatus",
    "INVALID_AMOUNT_MESSAGE",
    "SUCCESS_MESSAGE",
    "FAILED_MESSAGE",
    "INSUFFICIENT_FUNDS_MESSAGE",
    "ERROR_MESSAGE_PREFIX",
]
