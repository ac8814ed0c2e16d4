"""
Wallet module interface.

The wallet is an external collaborator of the messaging core: a simple
balance ledger with an owner check. Nothing in the core depends on it;
payment flows call it and then post PAYMENT messages themselves.
"""

from decimal import Decimal
from typing import Protocol, runtime_checkable

from .models import WalletBalance, WalletTransaction


@runtime_checkable
class IWalletService(Protocol):
    """Interface for wallet balance operations."""

    async def get_balance(self, owner: str) -> WalletBalance:
        """Get an owner's balance (zero for unknown owners)."""
        ...

    async def deposit(
        self,
        owner: str,
        amount: Decimal,
        caller: str,
        now: int,
    ) -> WalletTransaction:
        """
        Add funds to a wallet.

        Raises:
            WalletAccessDeniedError: If caller is not the owner
            InvalidAmountError: If amount is not positive
        """
        ...

    async def withdraw(
        self,
        owner: str,
        amount: Decimal,
        caller: str,
        now: int,
    ) -> WalletTransaction:
        """
        Take funds out of a wallet.

        Raises:
            WalletAccessDeniedError: If caller is not the owner
            InvalidAmountError: If amount is not positive
            InsufficientFundsError: If the balance does not cover amount
        """
        ...

    async def transfer(
        self,
        source: str,
        target: str,
        amount: Decimal,
        caller: str,
        now: int,
    ) -> WalletTransaction:
        """
        Move funds between wallets.

        Returns:
            The debit transaction on the source wallet

        Raises:
            WalletAccessDeniedError: If caller does not own the source wallet
            InvalidAmountError: If amount is not positive or source == target
            InsufficientFundsError: If the source balance does not cover amount
        """
        ...

    async def get_transaction_history(
        self,
        owner: str,
        limit: int = 50,
        offset: int = 0,
    ) -> list[WalletTransaction]:
        """Transactions on a wallet, most recent first."""
        ...
