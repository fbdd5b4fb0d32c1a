"""
Terminal service — one ATM session over one account.

This is the layer between raw user input and the Account:
it gates operations behind a PIN session, turns typed-in
amounts into Decimals, and remembers the last money operation
so a receipt can be produced for it.

Business outcomes still come back as OperationResult values.
Only caller mistakes (no session, unparseable input) raise.
"""

from decimal import Decimal, InvalidOperation

from atm_terminal.config import Settings
from atm_terminal.exceptions import InvalidInputError, NotAuthenticatedError
from atm_terminal.logging import get_logger
from atm_terminal.models.account import PIN_LENGTH, Account
from atm_terminal.models.result import OperationResult
from atm_terminal.models.transaction import Transaction
from atm_terminal.services.receipt_service import ReceiptService

logger = get_logger(__name__)

INVALID_AMOUNT_MESSAGE = "Please enter a valid numeric amount."


def parse_amount(raw) -> Decimal:
    """
    Parse an amount typed at the terminal.

    Numbers pass through unchanged. Strings are parsed as Decimal.
    Anything else, or a non-finite value, raises InvalidInputError.
    """
    if isinstance(raw, Decimal):
        value = raw
    elif isinstance(raw, (int, float)) and not isinstance(raw, bool):
        value = Decimal(str(raw))
    elif isinstance(raw, str):
        try:
            value = Decimal(raw.strip())
        except InvalidOperation:
            raise InvalidInputError(INVALID_AMOUNT_MESSAGE)
    else:
        raise InvalidInputError(INVALID_AMOUNT_MESSAGE)

    if not value.is_finite():
        raise InvalidInputError(INVALID_AMOUNT_MESSAGE)
    return value


class TerminalService:

    def __init__(self, account: Account):
        self.account = account
        self.receipts = ReceiptService(account)
        self._authenticated = False
        self._last_transaction: Transaction | None = None

    @property
    def is_authenticated(self) -> bool:
        return self._authenticated

    @property
    def last_transaction(self) -> Transaction | None:
        """The most recent successful withdrawal, deposit or transfer."""
        return self._last_transaction

    # --- Session ---

    def authenticate(self, pin: str) -> OperationResult:
        """
        Start a session with a PIN.

        A locked account is reported as blocked without touching
        the attempt counter; otherwise the PIN goes to the account.
        """
        if self.account.is_locked:
            return OperationResult.fail(
                "Account is blocked due to multiple failed attempts.",
                self.account.balance,
            )
        if not self.account.validate_pin(pin):
            self._authenticated = False
            return OperationResult.fail(
                "Invalid PIN. Please try again.", self.account.balance
            )

        self._authenticated = True
        logger.info("Session started for account %s", self.account.account_number)
        return OperationResult.ok(
            f"Welcome, {self.account.holder_name}", self.account.balance
        )

    def logout(self) -> None:
        self._authenticated = False
        self._last_transaction = None

    def _require_session(self) -> None:
        if not self._authenticated:
            raise NotAuthenticatedError("Please enter your PIN first")

    # --- Money operations ---

    def withdraw(self, raw_amount) -> OperationResult:
        self._require_session()
        return self._remember(self.account.withdraw(parse_amount(raw_amount)))

    def deposit(self, raw_amount) -> OperationResult:
        self._require_session()
        return self._remember(self.account.deposit(parse_amount(raw_amount)))

    def transfer(self, raw_amount, target_account: str) -> OperationResult:
        self._require_session()
        return self._remember(
            self.account.transfer(parse_amount(raw_amount), target_account)
        )

    def _remember(self, result: OperationResult) -> OperationResult:
        if result.success:
            self._last_transaction = result.transaction
        return result

    # --- Account queries ---

    def balance(self) -> Decimal:
        self._require_session()
        return self.account.balance

    def history(self) -> tuple[Transaction, ...]:
        self._require_session()
        return self.account.ledger_snapshot()

    def change_pin(
        self, old_pin: str, new_pin: str, confirm_pin: str
    ) -> OperationResult:
        """
        Change the PIN after checking the new one locally.

        Length and confirmation are checked before the account is
        consulted, so a typo in the new PIN does not cost an attempt.
        A wrong current PIN does.
        """
        self._require_session()
        balance = self.account.balance
        if len(new_pin) != PIN_LENGTH:
            return OperationResult.fail("PIN must be 4 digits long.", balance)
        if new_pin != confirm_pin:
            return OperationResult.fail(
                "New PIN and confirmation do not match.", balance
            )
        if not self.account.change_pin(old_pin, new_pin):
            if self.account.is_locked:
                self._authenticated = False
            return OperationResult.fail("Invalid current PIN.", balance)
        return OperationResult.ok("PIN changed successfully!", balance)

    # --- Receipts ---

    def receipt(self) -> str:
        self._require_session()
        return self.receipts.render(self._last_transaction)

    def has_receipt(self) -> bool:
        return self._last_transaction is not None

    def print_receipt(self) -> str:
        self._require_session()
        return self.receipts.print_receipt()

    def save_receipt(self) -> str:
        self._require_session()
        return self.receipts.save_receipt()


def build_terminal(settings: Settings) -> TerminalService:
    """Construct the account described by settings and a terminal for it."""
    settings.validate()
    account = Account(
        account_number=settings.ATM_ACCOUNT_NUMBER,
        holder_name=settings.ATM_HOLDER_NAME,
        pin=settings.ATM_PIN,
        initial_balance=settings.initial_balance,
    )
    return TerminalService(account)
