"""
Receipt API endpoints.

The receipt always describes the last successful withdrawal,
deposit or transfer of the current session.
"""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse

from atm_terminal.api.deps import get_terminal, unauthorized
from atm_terminal.exceptions import NotAuthenticatedError
from atm_terminal.schemas.terminal import MessageResponse
from atm_terminal.services.receipt_service import NO_TRANSACTION_TEXT
from atm_terminal.services.terminal_service import TerminalService

router = APIRouter(prefix="/receipts", tags=["Receipts"])


def _require_receipt(terminal: TerminalService) -> None:
    if not terminal.is_authenticated:
        raise unauthorized(NotAuthenticatedError("Please enter your PIN first"))
    if not terminal.has_receipt():
        raise HTTPException(status_code=404, detail=NO_TRANSACTION_TEXT)


@router.get("/latest", response_class=PlainTextResponse)
def get_latest_receipt(terminal: TerminalService = Depends(get_terminal)):
    """Render the receipt as plain text."""
    _require_receipt(terminal)
    return terminal.receipt()


@router.post("/latest/print", response_model=MessageResponse)
def print_latest_receipt(terminal: TerminalService = Depends(get_terminal)):
    """Simulated: nothing is sent to a real printer."""
    _require_receipt(terminal)
    return MessageResponse(message=terminal.print_receipt())


@router.post("/latest/save", response_model=MessageResponse)
def save_latest_receipt(terminal: TerminalService = Depends(get_terminal)):
    """Simulated: no file is written."""
    _require_receipt(terminal)
    return MessageResponse(message=terminal.save_receipt())
