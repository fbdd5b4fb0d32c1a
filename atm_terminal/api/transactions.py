"""
Transaction API endpoints.

The API layer is thin — it handles HTTP concerns (status codes,
response formatting) and delegates all business logic to the
TerminalService. A rejected operation is a 400 carrying the
terminal's message.
"""

from fastapi import APIRouter, Depends, HTTPException

from atm_terminal.api.deps import get_terminal, unauthorized
from atm_terminal.exceptions import InvalidInputError, NotAuthenticatedError
from atm_terminal.models.result import OperationResult
from atm_terminal.schemas.terminal import (
    AmountRequest,
    OperationResponse,
    TransferRequest,
)
from atm_terminal.services.terminal_service import TerminalService

router = APIRouter(prefix="/transactions", tags=["Transactions"])


def _respond(result: OperationResult) -> OperationResponse:
    if not result.success:
        raise HTTPException(status_code=400, detail=result.message)
    return OperationResponse.model_validate(result)


@router.post("/withdraw", response_model=OperationResponse)
def withdraw(
    request: AmountRequest,
    terminal: TerminalService = Depends(get_terminal),
):
    """Withdraw cash from the account."""
    try:
        return _respond(terminal.withdraw(request.amount))
    except NotAuthenticatedError as e:
        raise unauthorized(e)
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/deposit", response_model=OperationResponse)
def deposit(
    request: AmountRequest,
    terminal: TerminalService = Depends(get_terminal),
):
    """Deposit cash into the account."""
    try:
        return _respond(terminal.deposit(request.amount))
    except NotAuthenticatedError as e:
        raise unauthorized(e)
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/transfer", response_model=OperationResponse)
def transfer(
    request: TransferRequest,
    terminal: TerminalService = Depends(get_terminal),
):
    """Transfer money to another account number."""
    try:
        return _respond(
            terminal.transfer(request.amount, request.target_account)
        )
    except NotAuthenticatedError as e:
        raise unauthorized(e)
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=str(e))
