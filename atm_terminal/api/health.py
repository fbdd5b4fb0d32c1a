"""
Health check endpoint.

Used by load balancers, monitoring systems, and humans
to verify the application is running and responsive.
"""

from fastapi import APIRouter, Depends

from atm_terminal.api.deps import get_terminal
from atm_terminal.services.terminal_service import TerminalService

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check(terminal: TerminalService = Depends(get_terminal)):
    """
    Return application health status including account state.

    A locked account does not make the service unhealthy, but
    the terminal can no longer serve anyone, so it is reported
    as degraded.
    """
    account_status = "locked" if terminal.account.is_locked else "active"

    return {
        "status": "healthy" if account_status == "active" else "degraded",
        "service": "atm-terminal",
        "account": account_status,
    }
