"""
Account API endpoints — details, balance, history and PIN change.
"""

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException

from atm_terminal.api.deps import get_terminal, unauthorized
from atm_terminal.exceptions import NotAuthenticatedError
from atm_terminal.models.account import MAX_DEPOSIT, MAX_TRANSFER, MAX_WITHDRAWAL
from atm_terminal.schemas.terminal import (
    AccountResponse,
    BalanceResponse,
    ChangePinRequest,
    OperationResponse,
    TransactionResponse,
)
from atm_terminal.services.terminal_service import TerminalService

router = APIRouter(prefix="/account", tags=["Account"])


@router.get("", response_model=AccountResponse)
def get_account(terminal: TerminalService = Depends(get_terminal)):
    """Account identity and per-operation limits. No session needed."""
    account = terminal.account
    return AccountResponse(
        account_number=account.account_number,
        holder_name=account.holder_name,
        is_locked=account.is_locked,
        max_withdrawal=MAX_WITHDRAWAL,
        max_deposit=MAX_DEPOSIT,
        max_transfer=MAX_TRANSFER,
    )


@router.get("/balance", response_model=BalanceResponse)
def get_balance(terminal: TerminalService = Depends(get_terminal)):
    """Current balance."""
    try:
        balance = terminal.balance()
    except NotAuthenticatedError as e:
        raise unauthorized(e)
    return BalanceResponse(
        account_number=terminal.account.account_number,
        balance=balance,
        as_of=datetime.now(),
    )


@router.get("/history", response_model=list[TransactionResponse])
def get_history(terminal: TerminalService = Depends(get_terminal)):
    """All recorded transactions, oldest first."""
    try:
        return [
            TransactionResponse.model_validate(t) for t in terminal.history()
        ]
    except NotAuthenticatedError as e:
        raise unauthorized(e)


@router.post("/pin", response_model=OperationResponse)
def change_pin(
    request: ChangePinRequest,
    terminal: TerminalService = Depends(get_terminal),
):
    """
    Change the account PIN.

    A wrong current PIN counts as a failed attempt; if it locks
    the account the session ends with it.
    """
    try:
        result = terminal.change_pin(
            request.old_pin, request.new_pin, request.confirm_pin
        )
    except NotAuthenticatedError as e:
        raise unauthorized(e)
    if not result.success:
        raise HTTPException(status_code=400, detail=result.message)
    return OperationResponse.model_validate(result)
