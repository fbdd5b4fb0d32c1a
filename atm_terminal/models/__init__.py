"""
Account models package.

Leaf-first: Transaction, then the Ledger that holds them,
then the Account that owns a Ledger.
"""

from atm_terminal.models.enums import PinState, TransactionKind
from atm_terminal.models.transaction import Transaction
from atm_terminal.models.ledger import Ledger
from atm_terminal.models.result import OperationResult
from atm_terminal.models.account import (
    Account,
    MAX_DEPOSIT,
    MAX_FAILED_ATTEMPTS,
    MAX_TRANSFER,
    MAX_WITHDRAWAL,
)

__all__ = [
    "PinState",
    "TransactionKind",
    "Transaction",
    "Ledger",
    "OperationResult",
    "Account",
    "MAX_DEPOSIT",
    "MAX_FAILED_ATTEMPTS",
    "MAX_TRANSFER",
    "MAX_WITHDRAWAL",
]
