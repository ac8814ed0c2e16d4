"""
Wallet module data models.
"""

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TransactionType(str, Enum):
    """Types of wallet transactions."""

    DEPOSIT = "deposit"            # Funds added by the owner
    WITHDRAWAL = "withdrawal"      # Funds taken out by the owner
    TRANSFER_OUT = "transfer_out"  # Sent to another wallet
    TRANSFER_IN = "transfer_in"    # Received from another wallet


class WalletBalance(BaseModel):
    """An owner's current balance."""

    owner: str = Field(..., description="Wallet owner handle")
    balance: Decimal = Field(default=Decimal("0"), description="Current balance")


class WalletTransaction(BaseModel):
    """
    A wallet transaction record.

    Tracks every change to a wallet's balance.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Transaction ID (UUID)")
    owner: str = Field(..., description="Wallet whose balance changed")
    amount: Decimal = Field(
        ...,
        description="Transaction amount (positive for credit, negative for debit)",
    )
    type: TransactionType = Field(..., description="Transaction type")
    counterparty: Optional[str] = Field(None, description="Other wallet for transfers")
    balance_before: Decimal = Field(..., description="Balance before transaction")
    balance_after: Decimal = Field(..., description="Balance after transaction")
    created_at: int = Field(..., ge=0, description="Transaction time (ms since epoch)")
