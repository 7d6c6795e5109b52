from fastapi import BackgroundTasks, Depends, Request
from sqlmodel import Session

from ..services import (
    BackgroundEventDispatcher,
    BalanceRepository,
    WithdrawalNotifier,
    WithdrawalService,
)
from .db import get_session

def get_notifier(request: Request) -> WithdrawalNotifier:
    return request.app.state.notifier

def get_event_dispatcher(
    background_tasks: BackgroundTasks,
    notifier: WithdrawalNotifier = Depends(get_notifier),
) -> BackgroundEventDispatcher:
    return BackgroundEventDispatcher(background_tasks, notifier)

def get_withdrawal_service(
    session: Session = Depends(get_session),
    dispatcher: BackgroundEventDispatcher = Depends(get_event_dispatcher),
) -> WithdrawalService:
    repository = BalanceRepository(session)
    return WithdrawalService(session, dispatcher, repository)
