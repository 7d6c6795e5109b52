from .notifier import (
    BackgroundEventDispatcher,
    LoggingNotifier,
    SnsNotifier,
    WithdrawalNotifier,
    build_notifier,
    create_sns_client,
)
from .repository import BalanceRepository
from .withdrawal import EventDispatcher, WithdrawalService

__all__ = [
    "BackgroundEventDispatcher",
    "BalanceRepository",
    "EventDispatcher",
    "LoggingNotifier",
    "SnsNotifier",
    "WithdrawalNotifier",
    "WithdrawalService",
    "build_notifier",
    "create_sns_client",
]
