"""Tests for thread models."""

import pytest
from pydantic import ValidationError

from modules.threads.models import Thread, ParticipantRole


def make_thread(**overrides) -> Thread:
    data = {
        "id": "thread-1",
        "ride_id": "ride-1",
        "driver": "dana",
        "passenger": "pat",
        "created_at": 0,
    }
    data.update(overrides)
    return Thread(**data)


class TestThread:
    def test_defaults(self):
        """New threads should be active with no ETA."""
        thread = make_thread()
        assert thread.is_active is True
        assert thread.eta_minutes == 0
        assert thread.closed_at is None
        assert thread.closed_by is None

    def test_participants(self):
        thread = make_thread()
        assert thread.participants == ("dana", "pat")
        assert thread.is_member("dana")
        assert thread.is_member("pat")
        assert not thread.is_member("olga")

    def test_role_of(self):
        """Roles should follow the driver and passenger fields."""
        thread = make_thread()
        assert thread.role_of("dana") == ParticipantRole.DRIVER
        assert thread.role_of("pat") == ParticipantRole.PASSENGER
        assert thread.role_of("olga") is None

    def test_other_participant(self):
        thread = make_thread()
        assert thread.other_participant("dana") == "pat"
        assert thread.other_participant("pat") == "dana"
        with pytest.raises(ValueError):
            thread.other_participant("olga")

    def test_negative_eta_rejected(self):
        with pytest.raises(ValidationError):
            make_thread(eta_minutes=-1)

    def test_thread_is_frozen(self):
        """Threads should be immutable."""
        thread = make_thread()
        with pytest.raises(ValidationError):
            thread.is_active = False
