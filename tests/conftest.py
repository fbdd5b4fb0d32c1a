"""
Shared test fixtures.

Every test gets a fresh account and terminal, so no state
leaks between tests. The API client swaps the application's
terminal for the test one, the same way a database session
would be overridden.
"""

from datetime import datetime
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from atm_terminal.api.deps import get_terminal
from atm_terminal.main import app
from atm_terminal.models.account import Account
from atm_terminal.services.terminal_service import TerminalService


ACCOUNT_NUMBER = "ACC123456789"
HOLDER_NAME = "John Doe"
PIN = "1234"
INITIAL_BALANCE = Decimal("25000.00")

FIXED_TIME = datetime(2024, 3, 15, 14, 30, 5)


def make_account(balance=INITIAL_BALANCE, pin=PIN) -> Account:
    return Account(
        account_number=ACCOUNT_NUMBER,
        holder_name=HOLDER_NAME,
        pin=pin,
        initial_balance=balance,
        clock=lambda: FIXED_TIME,
    )


@pytest.fixture
def account():
    """The demo account: 25000.00 balance, PIN 1234."""
    return make_account()


@pytest.fixture
def terminal(account):
    return TerminalService(account)


@pytest.fixture
def session(terminal):
    """A terminal with an authenticated session."""
    terminal.authenticate(PIN)
    return terminal


@pytest.fixture
def client(terminal):
    """
    Provide a test client bound to the test terminal.

    We override the get_terminal dependency so the FastAPI app
    uses our fresh terminal instead of the one built at startup.
    """
    app.dependency_overrides[get_terminal] = lambda: terminal
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_client(client):
    """A test client that has already entered the correct PIN."""
    response = client.post("/session/pin", json={"pin": PIN})
    assert response.status_code == 200
    return client
