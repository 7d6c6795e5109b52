from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

from ..core.db import create_engine_for_url, get_engine, set_engine
from ..core.dependencies import get_notifier
from ..main import app
from ..models import AccountModel, WithdrawalEvent, from_minor_units, to_minor_units


class RecordingNotifier:
    def __init__(self) -> None:
        self.events: list[WithdrawalEvent] = []

    def publish(self, event: WithdrawalEvent) -> None:
        self.events.append(event)

    @property
    def statuses(self) -> list[str]:
        return [event.status.value for event in self.events]


@pytest.fixture
def engine(tmp_path):
    test_engine = create_engine_for_url(f"sqlite:///{tmp_path / 'test.db'}")
    SQLModel.metadata.create_all(test_engine)
    original_engine = get_engine()
    set_engine(test_engine)

    yield test_engine

    set_engine(original_engine)
    test_engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def seed_account(engine):
    def _seed(account_id: int, balance: str) -> None:
        with Session(engine) as session:
            session.add(AccountModel(id=account_id, balance=to_minor_units(Decimal(balance))))
            session.commit()

    return _seed


@pytest.fixture
def balance_of(engine):
    def _balance(account_id: int) -> Decimal:
        with Session(engine) as session:
            return from_minor_units(session.get(AccountModel, account_id).balance)

    return _balance


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def client(engine, notifier) -> TestClient:
    app.dependency_overrides[get_notifier] = lambda: notifier

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
