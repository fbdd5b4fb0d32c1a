"""
Shared enumerations for the account models.
"""

import enum


class TransactionKind(str, enum.Enum):
    """What a ledger entry records."""
    WITHDRAWAL = "WITHDRAWAL"
    DEPOSIT = "DEPOSIT"
    TRANSFER = "TRANSFER"
    PIN_CHANGE = "PIN_CHANGE"


class PinState(str, enum.Enum):
    """Authentication state of an account."""
    OPEN = "OPEN"
    LOCKED = "LOCKED"
