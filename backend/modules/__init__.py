"""
Feature modules for the RideChat core.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic models for data transfer
- service.py: Business logic implementation
- repository.py: Keyed in-process storage
- events.py: Domain events published after each change
- exceptions.py: Module-specific exceptions

Modules communicate through interfaces, not concrete implementations.
"""
