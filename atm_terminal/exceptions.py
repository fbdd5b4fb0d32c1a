"""
Exception hierarchy for the ATM terminal.

Business-rule failures (insufficient balance, limits, a wrong PIN)
are never raised; they come back as OperationResult values.
These exceptions are for contract violations by the caller.
"""


class ATMError(Exception):
    """Base exception for all ATM terminal errors."""


class InvalidInputError(ATMError, ValueError):
    """Raised when raw input cannot be turned into a usable amount."""


class NotAuthenticatedError(ATMError):
    """Raised when an operation is attempted without a PIN session."""


class ConfigurationError(ATMError):
    """Raised when configuration is invalid or missing."""
