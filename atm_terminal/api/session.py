"""
Session API endpoints — PIN entry and logout.
"""

from fastapi import APIRouter, Depends, HTTPException

from atm_terminal.api.deps import get_terminal
from atm_terminal.schemas.terminal import PinRequest, SessionResponse
from atm_terminal.services.terminal_service import TerminalService

router = APIRouter(prefix="/session", tags=["Session"])


@router.post("/pin", response_model=SessionResponse)
def enter_pin(
    request: PinRequest,
    terminal: TerminalService = Depends(get_terminal),
):
    """
    Authenticate with the account PIN.

    Returns 423 once the account is locked, whether or not
    the PIN is correct.
    """
    was_locked = terminal.account.is_locked
    result = terminal.authenticate(request.pin)
    if not result.success:
        status_code = 423 if was_locked else 401
        raise HTTPException(status_code=status_code, detail=result.message)
    return SessionResponse(authenticated=True, message=result.message)


@router.post("/logout", response_model=SessionResponse)
def logout(terminal: TerminalService = Depends(get_terminal)):
    """End the session and forget the last receipt."""
    terminal.logout()
    return SessionResponse(authenticated=False, message="Session ended")
