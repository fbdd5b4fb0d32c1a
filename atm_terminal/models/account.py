"""
Customer account model.

The single account an ATM terminal serves. It owns the balance,
the PIN, the lockout counter and the ledger, and it is the only
thing allowed to change any of them.

The PIN check is a small state machine: OPEN until the third
consecutive mismatch, then LOCKED for the rest of the run.
Invalid state transitions are rejected.

Money operations validate in a fixed order and the first failing
check decides the message. Balance is checked before the limit,
and for transfers the target account is checked last.
"""

import threading
from collections.abc import Callable
from datetime import datetime
from decimal import Decimal

from atm_terminal.exceptions import InvalidInputError
from atm_terminal.formatting import CURRENCY_SYMBOL, format_amount
from atm_terminal.logging import get_logger
from atm_terminal.models.enums import PinState, TransactionKind
from atm_terminal.models.ledger import Ledger
from atm_terminal.models.result import OperationResult
from atm_terminal.models.transaction import Transaction

logger = get_logger(__name__)


MAX_FAILED_ATTEMPTS = 3
PIN_LENGTH = 4

MAX_WITHDRAWAL = Decimal("1000.00")
MAX_DEPOSIT = Decimal("10000.00")
MAX_TRANSFER = Decimal("5000.00")

# Valid state transitions. There is no way back to OPEN.
VALID_TRANSITIONS: dict[PinState, set[PinState]] = {
    PinState.OPEN: {PinState.OPEN, PinState.LOCKED},
    PinState.LOCKED: {PinState.LOCKED},
}


def _to_decimal(amount) -> Decimal:
    """
    Coerce a caller-supplied amount to Decimal.

    Parsing user input is the caller's job; anything that is not
    already a number is a contract violation.
    """
    if isinstance(amount, bool) or not isinstance(amount, (Decimal, int, float)):
        raise TypeError(
            f"amount must be a number, got {type(amount).__name__}"
        )
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    if not value.is_finite():
        raise InvalidInputError(f"amount must be finite, got {amount}")
    return value


class Account:

    def __init__(
        self,
        account_number: str,
        holder_name: str,
        pin: str,
        initial_balance: Decimal = Decimal("0"),
        clock: Callable[[], datetime] = datetime.now,
    ):
        initial_balance = _to_decimal(initial_balance)
        if initial_balance < 0:
            raise ValueError("initial balance must not be negative")
        if len(pin) != PIN_LENGTH:
            raise ValueError(f"PIN must be {PIN_LENGTH} characters")

        self._account_number = account_number
        self._holder_name = holder_name
        self._pin = pin
        self._initial_balance = initial_balance
        self._balance = initial_balance
        self._failed_attempts = 0
        self._state = PinState.OPEN
        self._ledger = Ledger()
        self._clock = clock
        # Every validate-then-mutate sequence runs under this lock
        self._lock = threading.Lock()

    # --- Identity and queries ---

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def holder_name(self) -> str:
        return self._holder_name

    @property
    def initial_balance(self) -> Decimal:
        return self._initial_balance

    @property
    def balance(self) -> Decimal:
        with self._lock:
            return self._balance

    @property
    def failed_attempts(self) -> int:
        with self._lock:
            return self._failed_attempts

    @property
    def state(self) -> PinState:
        with self._lock:
            return self._state

    @property
    def is_locked(self) -> bool:
        return self.state == PinState.LOCKED

    def ledger_snapshot(self) -> tuple[Transaction, ...]:
        """Return the transaction history, oldest first."""
        with self._lock:
            return self._ledger.snapshot()

    def last_transaction(self) -> Transaction | None:
        with self._lock:
            return self._ledger.last()

    # --- Authentication ---

    def can_transition_to(self, new_state: PinState) -> bool:
        """Check if a state transition is valid."""
        return new_state in VALID_TRANSITIONS.get(self._state, set())

    def validate_pin(self, entered: str) -> bool:
        """
        Check a PIN attempt.

        A match resets the failed-attempt counter. A mismatch
        increments it, and the mismatch that reaches the threshold
        locks the account permanently. Once locked, every attempt
        fails, including the correct PIN.
        """
        with self._lock:
            return self._check_pin(entered)

    def _check_pin(self, entered: str) -> bool:
        # Caller must hold self._lock
        if self._state == PinState.LOCKED:
            logger.warning("PIN attempt on locked account %s", self._account_number)
            return False

        if entered == self._pin:
            self._failed_attempts = 0
            return True

        self._failed_attempts += 1
        logger.warning(
            "Invalid PIN for account %s (attempt %d of %d)",
            self._account_number, self._failed_attempts, MAX_FAILED_ATTEMPTS,
        )
        if self._failed_attempts >= MAX_FAILED_ATTEMPTS:
            self._transition(PinState.LOCKED)
        return False

    def _transition(self, new_state: PinState) -> None:
        if not self.can_transition_to(new_state):
            raise ValueError(
                f"Cannot transition from {self._state.value} "
                f"to {new_state.value}"
            )
        if new_state != self._state:
            logger.warning(
                "Account %s locked after %d failed PIN attempts",
                self._account_number, self._failed_attempts,
            )
        self._state = new_state

    def change_pin(self, old_pin: str, new_pin: str) -> bool:
        """
        Replace the PIN.

        The old PIN goes through the normal PIN check, so a wrong
        old PIN counts toward lockout. Any 4-character new PIN is
        accepted. A successful change is recorded on the ledger
        with a zero amount.
        """
        with self._lock:
            if not self._check_pin(old_pin):
                return False
            if len(new_pin) != PIN_LENGTH:
                return False

            self._pin = new_pin
            self._record(TransactionKind.PIN_CHANGE, Decimal("0"))
            logger.info("PIN changed for account %s", self._account_number)
            return True

    # --- Money operations ---

    def withdraw(self, amount) -> OperationResult:
        """
        Withdraw cash.

        Checks, in order: positive amount, sufficient balance,
        withdrawal limit. An over-limit request that also exceeds
        the balance reports insufficient balance.
        """
        amount = _to_decimal(amount)
        with self._lock:
            if amount <= 0:
                return self._positive_amount_failure()
            if amount > self._balance:
                return self._insufficient_balance_failure()
            if amount > MAX_WITHDRAWAL:
                return OperationResult.fail(
                    f"Daily withdrawal limit exceeded. "
                    f"Maximum: {format_amount(MAX_WITHDRAWAL)}",
                    self._balance,
                )

            self._balance -= amount
            transaction = self._record(TransactionKind.WITHDRAWAL, amount)
            logger.info(
                "Withdrawal of %s from %s, balance %s",
                amount, self._account_number, self._balance,
            )
            return OperationResult.ok(
                f"Successfully withdrawn {format_amount(amount)}",
                self._balance,
                transaction,
            )

    def deposit(self, amount) -> OperationResult:
        """Deposit cash. Checks positive amount, then the deposit limit."""
        amount = _to_decimal(amount)
        with self._lock:
            if amount <= 0:
                return self._positive_amount_failure()
            if amount > MAX_DEPOSIT:
                return OperationResult.fail(
                    f"Daily deposit limit exceeded. "
                    f"Maximum: {format_amount(MAX_DEPOSIT)}",
                    self._balance,
                )

            self._balance += amount
            transaction = self._record(TransactionKind.DEPOSIT, amount)
            logger.info(
                "Deposit of %s to %s, balance %s",
                amount, self._account_number, self._balance,
            )
            return OperationResult.ok(
                f"Successfully deposited {format_amount(amount)}",
                self._balance,
                transaction,
            )

    def transfer(self, amount, target_account: str) -> OperationResult:
        """
        Transfer money to another account number.

        Checks, in order: positive amount, sufficient balance,
        transfer limit, non-blank target. The target is only looked
        at once the amount has passed every other check.
        """
        amount = _to_decimal(amount)
        with self._lock:
            if amount <= 0:
                return self._positive_amount_failure()
            if amount > self._balance:
                return self._insufficient_balance_failure()
            if amount > MAX_TRANSFER:
                return OperationResult.fail(
                    f"Daily transfer limit exceeded. "
                    f"Maximum: {format_amount(MAX_TRANSFER)}",
                    self._balance,
                )
            # Whitespace-only counts as blank, and the stripped target is
            # what gets recorded and echoed back, not the raw input
            target = (target_account or "").strip()
            if not target:
                return OperationResult.fail(
                    "Target account number is required", self._balance
                )

            self._balance -= amount
            transaction = self._record(
                TransactionKind.TRANSFER, amount, target_account=target
            )
            logger.info(
                "Transfer of %s from %s to %s, balance %s",
                amount, self._account_number, target, self._balance,
            )
            return OperationResult.ok(
                f"Successfully transferred {format_amount(amount)} to {target}",
                self._balance,
                transaction,
            )

    # --- Helpers ---

    def _record(
        self,
        kind: TransactionKind,
        amount: Decimal,
        target_account: str | None = None,
    ) -> Transaction:
        # Caller must hold self._lock; balance is already updated
        transaction = Transaction(
            kind=kind,
            amount=amount,
            balance_after=self._balance,
            timestamp=self._clock(),
            target_account=target_account,
        )
        self._ledger.append(transaction)
        return transaction

    def _positive_amount_failure(self) -> OperationResult:
        return OperationResult.fail(
            f"Amount must be greater than {CURRENCY_SYMBOL} 0",
            self._balance,
        )

    def _insufficient_balance_failure(self) -> OperationResult:
        return OperationResult.fail(
            f"Insufficient balance. Current balance: {format_amount(self._balance)}",
            self._balance,
        )

    def __repr__(self) -> str:
        return f"<Account {self._account_number} ({self._state.value})>"
