"""
Operation result model.

Every money operation answers with one of these instead of
raising: a failed withdrawal is an expected outcome, not an error.
"""

from dataclasses import dataclass
from decimal import Decimal

from atm_terminal.models.transaction import Transaction


@dataclass(frozen=True)
class OperationResult:
    success: bool
    message: str
    balance: Decimal
    # The ledger entry a successful operation appended
    transaction: Transaction | None = None

    @classmethod
    def ok(
        cls,
        message: str,
        balance: Decimal,
        transaction: Transaction | None = None,
    ) -> "OperationResult":
        return cls(
            success=True, message=message, balance=balance,
            transaction=transaction,
        )

    @classmethod
    def fail(cls, message: str, balance: Decimal) -> "OperationResult":
        return cls(success=False, message=message, balance=balance)
