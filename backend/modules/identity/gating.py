"""
Verification gate shared by every module that restricts driver actions.
"""

from .interfaces import IKycOracle
from .models import KYCStatus
from .exceptions import IdentityNotFoundError, KycRequiredError


async def require_approved(kyc: IKycOracle, handle: str) -> None:
    """
    Fail unless handle is registered and APPROVED.

    An unregistered handle has no verification at all, so it is reported
    as KycRequiredError rather than a lookup failure.

    Raises:
        KycRequiredError: If the handle is unknown or not approved
    """
    try:
        status = await kyc.get_status(handle)
    except IdentityNotFoundError:
        raise KycRequiredError(handle)
    if status != KYCStatus.APPROVED:
        raise KycRequiredError(handle, status)
