"""
ATM Terminal — FastAPI Application.

This is the entry point for the application.
All routers are registered here, and the terminal for the
configured account is built once at startup.
"""

import uvicorn
from fastapi import FastAPI

from atm_terminal.config import get_settings
from atm_terminal.logging import setup_logging
from atm_terminal.api.health import router as health_router
from atm_terminal.api.session import router as session_router
from atm_terminal.api.transactions import router as transactions_router
from atm_terminal.api.account import router as account_router
from atm_terminal.api.receipts import router as receipts_router
from atm_terminal.services.terminal_service import build_terminal

settings = get_settings()
setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="A single-account ATM terminal simulator",
)

app.state.terminal = build_terminal(settings)

# Register routers
app.include_router(health_router)
app.include_router(session_router)
app.include_router(transactions_router)
app.include_router(account_router)
app.include_router(receipts_router)


def run() -> None:
    """Serve the application with uvicorn."""
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
