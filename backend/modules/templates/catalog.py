"""
Fixed content for driver templates and passenger quick replies.

Pure lookups with no state; safe to import from any module.
"""

from typing import Any, Iterable, Optional

from .models import (
    DriverTemplate,
    QuickReply,
    ARRIVING_NOW_MAX_MINUTES,
    ARRIVING_SOON_MAX_MINUTES,
)
from .exceptions import InvalidTemplateError


DRIVER_TEMPLATE_CONTENT: dict[DriverTemplate, str] = {
    DriverTemplate.EN_ROUTE: "I'm on my way to the pickup point",
    DriverTemplate.ARRIVING_SOON: "I'm arriving soon",
    DriverTemplate.ARRIVING_NOW: "I've arrived at the pickup point",
    DriverTemplate.DELAYED: "I'm running late",
    DriverTemplate.CANCELLED: "I had to cancel this ride",
    DriverTemplate.PAYMENT_RECEIVED: "Payment received, thank you",
    DriverTemplate.RIDE_COMPLETED: "Ride completed, thanks for riding",
}

QUICK_REPLY_CONTENT: dict[QuickReply, str] = {
    QuickReply.ON_MY_WAY: "I'm on my way",
    QuickReply.NEED_HELP: "I need help",
    QuickReply.CANCEL_RIDE: "I'd like to cancel this ride",
    QuickReply.RATE_DRIVER: "I'll rate the ride shortly",
    QuickReply.PAYMENT_SENT: "Payment sent",
}

# Templates whose text mentions the ETA when one is known
_ETA_TEMPLATES = {DriverTemplate.ARRIVING_SOON, DriverTemplate.DELAYED}


def parse_driver_template(code: Any) -> DriverTemplate:
    """
    Coerce a numeric code into a DriverTemplate.

    Raises:
        InvalidTemplateError: If the code is outside the driver set
    """
    if isinstance(code, bool):
        raise InvalidTemplateError(code, "driver template")
    try:
        return DriverTemplate(code)
    except ValueError:
        raise InvalidTemplateError(code, "driver template")


def parse_quick_reply(code: Any) -> QuickReply:
    """
    Coerce a numeric code into a QuickReply.

    Raises:
        InvalidTemplateError: If the code is outside the quick-reply set
    """
    if isinstance(code, bool):
        raise InvalidTemplateError(code, "quick reply")
    try:
        return QuickReply(code)
    except ValueError:
        raise InvalidTemplateError(code, "quick reply")


def parse_reply_set(codes: Iterable[Any]) -> frozenset[QuickReply]:
    """Coerce an allow-list of codes, rejecting any unknown one."""
    return frozenset(parse_quick_reply(code) for code in codes)


def render_driver_template(
    template: DriverTemplate,
    eta_minutes: Optional[int] = None,
) -> str:
    """Text of a driver template, with the ETA appended where it applies."""
    text = DRIVER_TEMPLATE_CONTENT[template]
    if template in _ETA_TEMPLATES and eta_minutes:
        unit = "minute" if eta_minutes == 1 else "minutes"
        text = f"{text} ({eta_minutes} {unit} away)"
    return text


def quick_reply_content(reply: QuickReply) -> str:
    return QUICK_REPLY_CONTENT[reply]


def template_for_eta(minutes_away: int) -> DriverTemplate:
    """
    Pick the arrival template for an ETA.

    0 minutes means the driver is there, 1-2 minutes is "arriving soon",
    anything longer is reported as a delay.
    """
    if minutes_away <= ARRIVING_NOW_MAX_MINUTES:
        return DriverTemplate.ARRIVING_NOW
    if minutes_away <= ARRIVING_SOON_MAX_MINUTES:
        return DriverTemplate.ARRIVING_SOON
    return DriverTemplate.DELAYED
