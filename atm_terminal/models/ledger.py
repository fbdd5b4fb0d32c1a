"""
Ledger model.

The ledger is the account's history: an append-only list of
transactions in the order they happened. Nothing is ever
reordered or removed, so the last entry's balance_after is
always the account's current balance.
"""

from collections.abc import Iterator
from decimal import Decimal

from atm_terminal.models.transaction import Transaction


class Ledger:
    """
    Append-only, chronologically ordered transaction log.

    A ledger belongs to exactly one Account and is only written
    by it. Readers get a snapshot tuple, never the live list.
    """

    def __init__(self) -> None:
        self._entries: list[Transaction] = []

    def append(self, transaction: Transaction) -> None:
        self._entries.append(transaction)

    def snapshot(self) -> tuple[Transaction, ...]:
        """Return a read-only view of all entries, oldest first."""
        return tuple(self._entries)

    def last(self) -> Transaction | None:
        """Return the most recent entry, or None if nothing was recorded."""
        if not self._entries:
            return None
        return self._entries[-1]

    def balance(self, initial_balance: Decimal) -> Decimal:
        """
        Balance implied by the ledger.

        The balance_after of the last entry, or the opening
        balance when no operation has succeeded yet.
        """
        last = self.last()
        if last is None:
            return initial_balance
        return last.balance_after

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self.snapshot())

    def __repr__(self) -> str:
        return f"<Ledger {len(self._entries)} entries>"
