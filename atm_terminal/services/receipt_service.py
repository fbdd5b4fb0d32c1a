"""
Receipt service — renders the text receipt for a transaction.

Printing and saving are simulated: the terminal has no printer
and writes no files, so both only report what would have happened.
"""

from atm_terminal.formatting import format_amount, format_timestamp
from atm_terminal.models.account import Account
from atm_terminal.models.transaction import Transaction

RULE = "==============================="
BANK_NAME = "SECUREBANK ATM"
NO_TRANSACTION_TEXT = "No recent transaction found."
RECEIPT_FILENAME = "receipt.txt"


class ReceiptService:

    def __init__(self, account: Account):
        self.account = account

    def render(self, transaction: Transaction | None = None) -> str:
        """
        Render a receipt.

        Defaults to the account's most recent transaction. When the
        account has no transactions yet, returns a short notice
        instead of an empty receipt.
        """
        if transaction is None:
            transaction = self.account.last_transaction()
        if transaction is None:
            return NO_TRANSACTION_TEXT

        lines = [
            RULE,
            f"        {BANK_NAME}",
            "     Transaction Receipt",
            RULE,
            "",
            f"Date/Time: {format_timestamp(transaction.timestamp)}",
            f"Account: {self.account.account_number}",
            f"Account Holder: {self.account.holder_name}",
            "",
            f"Transaction Type: {transaction.label}",
            f"Amount: {format_amount(transaction.amount)}",
            f"Balance After: {format_amount(transaction.balance_after)}",
            "",
            RULE,
            "   Thank you for banking with us!",
            RULE,
        ]
        return "\n".join(lines)

    def print_receipt(self) -> str:
        return "Receipt sent to printer!"

    def save_receipt(self) -> str:
        return f"Receipt saved as {RECEIPT_FILENAME}"
