"""Business logic services."""

from atm_terminal.services.receipt_service import ReceiptService
from atm_terminal.services.terminal_service import TerminalService, build_terminal

__all__ = ["ReceiptService", "TerminalService", "build_terminal"]
