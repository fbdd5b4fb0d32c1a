"""SecureBank ATM terminal simulator."""
