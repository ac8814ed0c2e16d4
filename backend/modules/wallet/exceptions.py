"""
Wallet module exceptions.
"""

from decimal import Decimal

from shared.exceptions import RideChatError, ValidationError, AuthorizationError


class WalletError(RideChatError):
    """Base exception for wallet errors."""

    pass


class InsufficientFundsError(WalletError):
    """Raised when a wallet cannot cover a withdrawal or transfer."""

    def __init__(self, owner: str, required: Decimal, available: Decimal):
        super().__init__(
            f"Insufficient funds. Required: {required}, available: {available}",
            code="INSUFFICIENT_FUNDS",
            details={
                "owner": owner,
                "required": str(required),
                "available": str(available),
                "shortfall": str(required - available),
            },
        )


class InvalidAmountError(ValidationError):
    """Raised when an amount is invalid."""

    def __init__(self, amount: Decimal, reason: str):
        super().__init__(
            f"Invalid amount: {amount}. {reason}",
            code="INVALID_AMOUNT",
            details={"amount": str(amount), "reason": reason},
        )


class WalletAccessDeniedError(AuthorizationError):
    """Raised when a caller moves funds out of a wallet they do not own."""

    def __init__(self, owner: str, caller: str):
        super().__init__(
            f"{caller} does not own wallet {owner}",
            code="UNAUTHORIZED",
            details={"owner": owner, "caller": caller},
        )
