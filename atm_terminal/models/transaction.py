"""
Transaction model.

One record per successful account operation. Records are
immutable: once a transaction is on the ledger it is never
modified, only followed by newer ones.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from atm_terminal.formatting import format_amount, format_history_timestamp
from atm_terminal.models.enums import TransactionKind


@dataclass(frozen=True)
class Transaction:
    kind: TransactionKind
    amount: Decimal
    balance_after: Decimal
    timestamp: datetime = field(default_factory=datetime.now)
    target_account: str | None = None

    @property
    def label(self) -> str:
        """Human-readable type, e.g. 'TRANSFER TO ACC987654321'."""
        if self.kind == TransactionKind.TRANSFER:
            return f"TRANSFER TO {self.target_account}"
        if self.kind == TransactionKind.PIN_CHANGE:
            return "PIN CHANGE"
        return self.kind.value

    def __str__(self) -> str:
        return (
            f"{format_history_timestamp(self.timestamp)} | {self.label} | "
            f"{format_amount(self.amount)} | "
            f"Balance: {format_amount(self.balance_after)}"
        )
