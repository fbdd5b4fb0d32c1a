"""
Pydantic schemas for the terminal API.

These define the API contract. They are separate from the
account models because the wire shape and the in-memory
shape differ: amounts arrive as raw text or numbers and are
parsed by the terminal, not by pydantic.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr

from atm_terminal.models.enums import TransactionKind


# --- Request Schemas ---

class PinRequest(BaseModel):
    pin: str = Field(max_length=32)


class AmountRequest(BaseModel):
    """
    A withdrawal or deposit.

    amount is loose about shape: "500", 500 and "abc" all reach
    the terminal, which decides what counts as a valid amount.
    Strict types keep JSON booleans from passing as 1 or 0.
    """
    amount: StrictStr | StrictInt | StrictFloat


class TransferRequest(BaseModel):
    amount: StrictStr | StrictInt | StrictFloat
    target_account: str = Field(default="", max_length=64)


class ChangePinRequest(BaseModel):
    old_pin: str = Field(max_length=32)
    new_pin: str = Field(max_length=32)
    confirm_pin: str = Field(max_length=32)


# --- Response Schemas ---

class OperationResponse(BaseModel):
    success: bool
    message: str
    balance: Decimal

    model_config = {"from_attributes": True}


class SessionResponse(BaseModel):
    authenticated: bool
    message: str


class TransactionResponse(BaseModel):
    kind: TransactionKind
    label: str
    amount: Decimal
    balance_after: Decimal
    timestamp: datetime
    target_account: str | None

    model_config = {"from_attributes": True}


class BalanceResponse(BaseModel):
    account_number: str
    balance: Decimal
    as_of: datetime


class AccountResponse(BaseModel):
    """Account details plus the limits the terminal shows next to each form."""
    account_number: str
    holder_name: str
    is_locked: bool
    max_withdrawal: Decimal
    max_deposit: Decimal
    max_transfer: Decimal


class MessageResponse(BaseModel):
    message: str
