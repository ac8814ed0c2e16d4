"""
Wallet service stub implementation.

An in-memory balance ledger standing in for the external payment
capability. Moves are serialized per wallet; a transfer holds both wallet
locks, taken in sorted order.
"""

import logging
import uuid
from decimal import Decimal
from typing import Optional

from shared.locking import KeyedLock

from .interfaces import IWalletService
from .models import WalletBalance, WalletTransaction, TransactionType
from .exceptions import (
    InsufficientFundsError,
    InvalidAmountError,
    WalletAccessDeniedError,
)

logger = logging.getLogger(__name__)


class WalletService(IWalletService):
    """
    Stub implementation of the wallet capability.

    Uses in-memory storage; balances start at zero.
    """

    def __init__(self):
        # In-memory storage
        self._balances: dict[str, Decimal] = {}
        self._transactions: dict[str, list[WalletTransaction]] = {}
        self._locks = KeyedLock()

    async def get_balance(self, owner: str) -> WalletBalance:
        return WalletBalance(owner=owner, balance=self._balances.get(owner, Decimal("0")))

    async def deposit(
        self,
        owner: str,
        amount: Decimal,
        caller: str,
        now: int,
    ) -> WalletTransaction:
        self._check_owner(owner, caller)
        self._check_amount(amount)

        async with self._locks.hold(owner):
            return self._apply(owner, amount, TransactionType.DEPOSIT, None, now)

    async def withdraw(
        self,
        owner: str,
        amount: Decimal,
        caller: str,
        now: int,
    ) -> WalletTransaction:
        self._check_owner(owner, caller)
        self._check_amount(amount)

        async with self._locks.hold(owner):
            self._check_funds(owner, amount)
            return self._apply(owner, -amount, TransactionType.WITHDRAWAL, None, now)

    async def transfer(
        self,
        source: str,
        target: str,
        amount: Decimal,
        caller: str,
        now: int,
    ) -> WalletTransaction:
        self._check_owner(source, caller)
        self._check_amount(amount)
        if source == target:
            raise InvalidAmountError(amount, "Source and target wallets must differ")

        first, second = sorted((source, target))
        async with self._locks.hold(first):
            async with self._locks.hold(second):
                self._check_funds(source, amount)
                debit = self._apply(source, -amount, TransactionType.TRANSFER_OUT, target, now)
                self._apply(target, amount, TransactionType.TRANSFER_IN, source, now)

        logger.info(f"Transferred {amount} from {source} to {target}")
        return debit

    async def get_transaction_history(
        self,
        owner: str,
        limit: int = 50,
        offset: int = 0,
    ) -> list[WalletTransaction]:
        transactions = self._transactions.get(owner, [])
        return transactions[offset : offset + limit]

    def _apply(
        self,
        owner: str,
        amount: Decimal,
        transaction_type: TransactionType,
        counterparty: Optional[str],
        now: int,
    ) -> WalletTransaction:
        before = self._balances.get(owner, Decimal("0"))
        after = before + amount
        self._balances[owner] = after

        transaction = WalletTransaction(
            id=str(uuid.uuid4()),
            owner=owner,
            amount=amount,
            type=transaction_type,
            counterparty=counterparty,
            balance_before=before,
            balance_after=after,
            created_at=now,
        )

        if owner not in self._transactions:
            self._transactions[owner] = []
        self._transactions[owner].insert(0, transaction)

        return transaction

    def _check_funds(self, owner: str, amount: Decimal) -> None:
        available = self._balances.get(owner, Decimal("0"))
        if available < amount:
            raise InsufficientFundsError(owner, required=amount, available=available)

    @staticmethod
    def _check_owner(owner: str, caller: str) -> None:
        if owner != caller:
            raise WalletAccessDeniedError(owner, caller)

    @staticmethod
    def _check_amount(amount: Decimal) -> None:
        if amount <= 0:
            raise InvalidAmountError(amount, "Amount must be positive")
