"""
Display formatting for amounts and timestamps.

Amounts are kept at full Decimal precision inside the account;
rounding to two decimals happens only here, at display time.
"""

from datetime import datetime
from decimal import Decimal

CURRENCY_SYMBOL = "Rs"

RECEIPT_TIMESTAMP_FORMAT = "%d/%m/%Y %H:%M:%S"
HISTORY_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_amount(amount: Decimal) -> str:
    """Render an amount as fixed two-decimal currency, e.g. 'Rs 500.00'."""
    return f"{CURRENCY_SYMBOL} {amount:.2f}"


def format_timestamp(moment: datetime) -> str:
    return moment.strftime(RECEIPT_TIMESTAMP_FORMAT)


def format_history_timestamp(moment: datetime) -> str:
    return moment.strftime(HISTORY_TIMESTAMP_FORMAT)
