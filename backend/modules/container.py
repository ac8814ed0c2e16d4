"""
Service container for the RideChat core.

Wires together all module implementations. Each module exposes its service
through an interface, and this file creates the concrete implementations.
The registry (admin identity and membership) is created here exactly once
per container and injected into the identity service.
"""

import logging
from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings
from shared.events import EventBus

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.identity.service import IdentityService
    from modules.threads.service import ThreadService
    from modules.messages.interfaces import IMessageService
    from modules.templates.interfaces import ITemplateService
    from modules.receipts.interfaces import IAcknowledgmentService
    from modules.wallet.interfaces import IWalletService

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached within the
    container. All of them share one event bus and one settings object.
    Use reset() to clear cached services for testing.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.event_bus = event_bus or EventBus()
        self._identity_service: "IdentityService | None" = None
        self._thread_service: "ThreadService | None" = None
        self._message_service: "IMessageService | None" = None
        self._template_service: "ITemplateService | None" = None
        self._receipt_service: "IAcknowledgmentService | None" = None
        self._wallet_service: "IWalletService | None" = None

        logger.info(
            f"{self.settings.app_name} {self.settings.app_version} container created "
            f"(admin={self.settings.admin_handle})"
        )

    @property
    def identity(self) -> "IdentityService":
        """Get the identity service instance."""
        if self._identity_service is None:
            from modules.identity.models import Registry
            from modules.identity.service import IdentityService
            self._identity_service = IdentityService(
                registry=Registry(admin=self.settings.admin_handle),
                event_bus=self.event_bus,
                settings=self.settings,
            )
        return self._identity_service

    @property
    def threads(self) -> "ThreadService":
        """Get the thread service instance."""
        if self._thread_service is None:
            self._build_thread_services()
        return self._thread_service  # type: ignore[return-value]

    @property
    def messages(self) -> "IMessageService":
        """Get the message service instance."""
        if self._message_service is None:
            self._build_thread_services()
        return self._message_service  # type: ignore[return-value]

    @property
    def templates(self) -> "ITemplateService":
        """Get the template service instance."""
        if self._template_service is None:
            self._build_thread_services()
        return self._template_service  # type: ignore[return-value]

    def _build_thread_services(self) -> None:
        """
        Build the thread, message and template services together.

        Threads send ETA templates and templates post into threads, so the
        template service is attached to the thread service once both exist.
        """
        from modules.threads.service import ThreadService
        from modules.messages.service import MessageService
        from modules.templates.service import TemplateService

        threads = ThreadService(
            kyc=self.identity,
            event_bus=self.event_bus,
            settings=self.settings,
        )
        messages = MessageService(
            threads=threads,
            kyc=self.identity,
            event_bus=self.event_bus,
            settings=self.settings,
        )
        templates = TemplateService(
            threads=threads,
            messages=messages,
            kyc=self.identity,
            settings=self.settings,
        )
        threads.attach_templates(templates)

        self._thread_service = threads
        self._message_service = messages
        self._template_service = templates

    @property
    def receipts(self) -> "IAcknowledgmentService":
        """Get the acknowledgment service instance."""
        if self._receipt_service is None:
            from modules.receipts.service import AcknowledgmentService
            self._receipt_service = AcknowledgmentService(messages=self.messages)
        return self._receipt_service

    @property
    def wallet(self) -> "IWalletService":
        """Get the wallet service instance."""
        if self._wallet_service is None:
            from modules.wallet.service import WalletService
            self._wallet_service = WalletService()
        return self._wallet_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances. The event bus and its subscriptions are kept.
        """
        self._identity_service = None
        self._thread_service = None
        self._message_service = None
        self._template_service = None
        self._receipt_service = None
        self._wallet_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container with new
    service instances. Primarily used for testing.
    """
    global _container
    _container = None
