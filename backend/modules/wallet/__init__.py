"""
Wallet module.

In-memory stand-in for the external wallet capability used by payment
flows. Not part of the messaging core.

Public API:
- IWalletService: Interface for wallet operations
- WalletBalance, WalletTransaction, TransactionType: Wallet models
- Wallet exceptions: InsufficientFundsError, etc.
"""

from .interfaces import IWalletService
from .models import WalletBalance, WalletTransaction, TransactionType
from .exceptions import (
    WalletError,
    InsufficientFundsError,
    InvalidAmountError,
    WalletAccessDeniedError,
)

__all__ = [
    # Interface
    "IWalletService",
    # Models
    "WalletBalance",
    "WalletTransaction",
    "TransactionType",
    # Exceptions
    "WalletError",
    "InsufficientFundsError",
    "InvalidAmountError",
    "WalletAccessDeniedError",
]
