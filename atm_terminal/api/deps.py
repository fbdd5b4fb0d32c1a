"""
Shared API dependencies.

The terminal lives on the application state; endpoints get it
through get_terminal so tests can swap in their own.
"""

from fastapi import HTTPException, Request

from atm_terminal.exceptions import NotAuthenticatedError
from atm_terminal.services.terminal_service import TerminalService


def get_terminal(request: Request) -> TerminalService:
    """Provide the terminal this application serves."""
    return request.app.state.terminal


def unauthorized(e: NotAuthenticatedError) -> HTTPException:
    return HTTPException(status_code=401, detail=str(e))
