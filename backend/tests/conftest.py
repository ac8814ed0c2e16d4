"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest

from shared.config import Settings
from shared.events import DomainEvent
from modules.container import ServiceContainer, reset_container
from modules.identity.models import KYCStatus
from modules.threads.models import Thread


ADMIN = "admin"
DRIVER = "driver-dana"
PASSENGER = "passenger-pat"
OUTSIDER = "outsider-olga"

# Fixed clock (ms since epoch); services never read the wall clock
NOW = 1_700_000_000_000


async def register(
    container: ServiceContainer,
    handle: str,
    now: int = NOW,
    approved: bool = False,
) -> None:
    """
    Register a handle, optionally approving it through the admin.

    Args:
        container: Container whose identity service to use
        handle: Handle to register
        now: Registration time
        approved: If True, the admin approves the handle right away
    """
    await container.identity.register(handle, handle.title(), f"proof://{handle}", now)
    if approved:
        await container.identity.update_status(handle, KYCStatus.APPROVED, ADMIN, now)


async def open_ride(
    container: ServiceContainer,
    ride_id: str = "ride-1",
    driver_approved: bool = True,
    now: int = NOW,
) -> Thread:
    """Register DRIVER and PASSENGER and open a thread between them."""
    await register(container, DRIVER, now, approved=driver_approved)
    await register(container, PASSENGER, now)
    return await container.threads.create_thread(ride_id, DRIVER, PASSENGER, now)


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None, admin_handle=ADMIN)


@pytest.fixture
def container(settings: Settings) -> ServiceContainer:
    """A fresh container with in-memory services."""
    return ServiceContainer(settings=settings)


@pytest.fixture
def events(container: ServiceContainer) -> list[DomainEvent]:
    """Every event published on the container's bus, in order."""
    collected: list[DomainEvent] = []

    async def collect(event: DomainEvent) -> None:
        collected.append(event)

    container.event_bus.subscribe_all(collect)
    return collected


@pytest.fixture(autouse=True)
def reset_container_singleton():
    """Reset the container singleton before and after each test."""
    reset_container()
    yield
    reset_container()
