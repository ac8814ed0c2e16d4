"""
Template and quick-reply engine.

Maps closed code sets to fixed content and authorization rules, then hands
the rendered text to the message store's broadcast. Every check runs before
the broadcast, so a rejected send produces no messages at all.
"""

import logging
from typing import Iterable, Optional

from shared.config import Settings, get_settings
from modules.identity.interfaces import IKycOracle
from modules.identity.gating import require_approved
from modules.identity.exceptions import UnauthorizedError
from modules.messages.interfaces import IMessageService
from modules.messages.models import Message, MessageKind
from modules.threads.interfaces import IThreadService

from .interfaces import ITemplateService
from .models import DriverTemplate, QuickReply
from .repository import EnabledReplyRepository
from .catalog import (
    parse_driver_template,
    parse_quick_reply,
    parse_reply_set,
    render_driver_template,
    quick_reply_content,
)
from .exceptions import ReplyNotEnabledError

logger = logging.getLogger(__name__)


class TemplateService(ITemplateService):
    """Sends driver templates and passenger quick replies into threads."""

    def __init__(
        self,
        threads: IThreadService,
        messages: IMessageService,
        kyc: IKycOracle,
        repository: Optional[EnabledReplyRepository] = None,
        settings: Optional[Settings] = None,
    ):
        self._threads = threads
        self._messages = messages
        self._kyc = kyc
        self._repo = repository or EnabledReplyRepository()
        self._settings = settings or get_settings()

    async def send_driver_template(
        self,
        thread_id: str,
        template_code: DriverTemplate | int,
        driver: str,
        now: int,
    ) -> list[Message]:
        template = parse_driver_template(template_code)

        thread = await self._threads.require_member(thread_id, driver)
        if driver != thread.driver:
            raise UnauthorizedError("send driver templates", driver)
        self._threads.require_active(thread)
        await require_approved(self._kyc, driver)

        content = render_driver_template(template, thread.eta_minutes)
        messages = await self._messages.broadcast(
            thread_id,
            driver,
            MessageKind.SUPPORT_TEMPLATE,
            content,
            now,
            template_code=int(template),
            is_template=True,
        )
        logger.info(f"Driver template {template.name} sent in thread {thread_id}")
        return messages

    async def send_quick_reply(
        self,
        thread_id: str,
        reply_code: QuickReply | int,
        passenger: str,
        now: int,
        enabled_replies: Optional[Iterable[QuickReply | int]] = None,
    ) -> list[Message]:
        reply = parse_quick_reply(reply_code)

        thread = await self._threads.require_member(thread_id, passenger)
        if passenger != thread.passenger:
            raise UnauthorizedError("send quick replies", passenger)
        self._threads.require_active(thread)

        if enabled_replies is None:
            allowed = await self.get_enabled_replies(passenger)
        else:
            allowed = parse_reply_set(enabled_replies)
        if reply not in allowed:
            logger.debug(f"Quick reply {reply.name} not enabled for {passenger}")
            raise ReplyNotEnabledError(int(reply), passenger)

        messages = await self._messages.broadcast(
            thread_id,
            passenger,
            MessageKind.QUICK_REPLY,
            quick_reply_content(reply),
            now,
            template_code=int(reply),
            is_template=False,
        )
        logger.info(f"Quick reply {reply.name} sent in thread {thread_id}")
        return messages

    async def set_enabled_replies(
        self,
        passenger: str,
        replies: Iterable[QuickReply | int],
    ) -> frozenset[QuickReply]:
        """Store a passenger's allow-list; unknown codes are rejected."""
        return self._repo.set_for(passenger, parse_reply_set(replies))

    async def get_enabled_replies(self, passenger: str) -> frozenset[QuickReply]:
        stored = self._repo.get_for(passenger)
        if stored is not None:
            return stored
        return parse_reply_set(self._settings.default_enabled_replies)
