"""Client for the BankID relying-party API: orders, collecting, cancelling and user messages."""

__version__ = "0.1.0"

__all__ = ["client", "constants", "orders", "responses", "transport"]