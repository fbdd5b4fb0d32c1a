"""
Application configuration.

All configuration is loaded from environment variables.
The seed account the terminal serves is configured here too,
so a demo PIN never has to be hardcoded in code.
"""

import os
from decimal import Decimal, InvalidOperation
from functools import lru_cache

from dotenv import load_dotenv

from atm_terminal.exceptions import ConfigurationError

# Load .env file into environment variables
load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "SecureBank ATM Terminal"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv("LOG_FORMAT", "standard")

    # Seed account served by this terminal
    ATM_ACCOUNT_NUMBER: str = os.getenv("ATM_ACCOUNT_NUMBER", "ACC123456789")
    ATM_HOLDER_NAME: str = os.getenv("ATM_HOLDER_NAME", "John Doe")
    ATM_PIN: str = os.getenv("ATM_PIN", "1234")
    ATM_INITIAL_BALANCE: str = os.getenv("ATM_INITIAL_BALANCE", "25000.00")

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")

    @property
    def initial_balance(self) -> Decimal:
        """Opening balance as a Decimal."""
        try:
            balance = Decimal(self.ATM_INITIAL_BALANCE)
        except InvalidOperation:
            raise ConfigurationError(
                f"ATM_INITIAL_BALANCE is not a number: "
                f"{self.ATM_INITIAL_BALANCE!r}"
            )
        if not balance.is_finite() or balance < 0:
            raise ConfigurationError(
                "ATM_INITIAL_BALANCE must be a non-negative amount"
            )
        return balance

    def validate(self) -> None:
        """
        Check the seed account settings before building a terminal.

        Raises ConfigurationError instead of letting a bad value
        surface later as a confusing failure inside the account.
        """
        self.initial_balance  # raises on a malformed balance
        if len(self.ATM_PIN) != 4:
            raise ConfigurationError("ATM_PIN must be exactly 4 characters")
        if not self.ATM_ACCOUNT_NUMBER.strip():
            raise ConfigurationError("ATM_ACCOUNT_NUMBER must not be blank")
        if self.LOG_FORMAT not in ("standard", "json"):
            raise ConfigurationError(
                f"LOG_FORMAT must be 'standard' or 'json', got {self.LOG_FORMAT!r}"
            )


@lru_cache()
def get_settings() -> Settings:
    """
    Return cached settings instance.

    Using lru_cache means the Settings object is created once
    and reused for all subsequent calls. This avoids reading
    environment variables repeatedly.
    """
    return Settings()
