"""
Tests for receipt rendering.
"""

from decimal import Decimal

from atm_terminal.services.receipt_service import ReceiptService


EXPECTED_WITHDRAWAL_RECEIPT = """\
===============================
        SECUREBANK ATM
     Transaction Receipt
===============================

Date/Time: 15/03/2024 14:30:05
Account: ACC123456789
Account Holder: John Doe

Transaction Type: WITHDRAWAL
Amount: Rs 500.00
Balance After: Rs 24500.00

===============================
   Thank you for banking with us!
==============================="""


class TestRender:

    def test_no_transaction(self, account):
        service = ReceiptService(account)
        assert service.render() == "No recent transaction found."

    def test_withdrawal_receipt(self, account):
        account.withdraw(Decimal("500.00"))
        service = ReceiptService(account)
        assert service.render() == EXPECTED_WITHDRAWAL_RECEIPT

    def test_defaults_to_most_recent(self, account):
        account.withdraw(Decimal("500.00"))
        account.transfer(Decimal("250.5"), "ACC987654321")

        receipt = ReceiptService(account).render()

        assert "Transaction Type: TRANSFER TO ACC987654321" in receipt
        assert "Amount: Rs 250.50" in receipt
        assert "Balance After: Rs 24249.50" in receipt

    def test_explicit_transaction(self, account):
        account.deposit(Decimal("10.00"))
        first = account.last_transaction()
        account.deposit(Decimal("20.00"))

        receipt = ReceiptService(account).render(first)
        assert "Amount: Rs 10.00" in receipt


class TestSimulatedOutput:

    def test_print(self, account):
        assert ReceiptService(account).print_receipt() == "Receipt sent to printer!"

    def test_save(self, account):
        assert ReceiptService(account).save_receipt() == (
            "Receipt saved as receipt.txt"
        )
