"""Tests for the service container."""

import logging

import pytest

from modules.container import ServiceContainer, get_container, reset_container
from modules.identity.interfaces import IIdentityService
from modules.messages.interfaces import IMessageService
from modules.receipts.interfaces import IAcknowledgmentService
from modules.templates.interfaces import ITemplateService
from modules.threads.interfaces import IThreadService
from modules.wallet.interfaces import IWalletService
from tests.conftest import ADMIN, NOW, open_ride


class TestServiceContainer:
    def test_services_implement_interfaces(self, container):
        """Each property should return its module's service."""
        assert isinstance(container.identity, IIdentityService)
        assert isinstance(container.threads, IThreadService)
        assert isinstance(container.messages, IMessageService)
        assert isinstance(container.templates, ITemplateService)
        assert isinstance(container.receipts, IAcknowledgmentService)
        assert isinstance(container.wallet, IWalletService)

    def test_services_are_cached(self, container):
        assert container.identity is container.identity
        assert container.templates is container.templates
        assert container.receipts is container.receipts

    def test_registry_admin_from_settings(self, container):
        """The registry admin should come from settings."""
        assert container.identity.admin == ADMIN

    @pytest.mark.asyncio
    async def test_thread_services_are_wired(self, container):
        """update_eta should work without manual wiring."""
        thread = await open_ride(container)
        messages = await container.threads.update_eta(thread.id, 0, thread.driver, NOW)
        assert len(messages) == 2

    @pytest.mark.asyncio
    async def test_events_can_be_disabled(self, settings):
        """With publishing off, no events should reach the bus."""
        container = ServiceContainer(settings=settings.model_copy(update={"enable_event_publishing": False}))
        seen = []

        async def collect(event):
            seen.append(event)

        container.event_bus.subscribe_all(collect)
        await open_ride(container)
        assert seen == []

    def test_reset_creates_new_services(self, container):
        identity = container.identity
        container.reset()
        assert container.identity is not identity


class TestContainerSingleton:
    def test_get_container_is_singleton(self):
        assert get_container() is get_container()

    def test_reset_container(self):
        first = get_container()
        reset_container()
        assert get_container() is not first


class TestContainerLogging:
    def test_logs_app_name_and_version(self, settings, caplog):
        """Creating a container should log the configured app name and version."""
        custom = settings.model_copy(update={"app_name": "RideChat Test", "app_version": "9.9.9"})
        with caplog.at_level(logging.INFO, logger="modules.container"):
            ServiceContainer(settings=custom)
        assert "RideChat Test 9.9.9" in caplog.text
