"""Shared fixtures for settle-up tests."""

import pytest

from settle_up.models import Participant


@pytest.fixture
def alice_bob_carol():
    """Three participants."""
    return [
        Participant(id="a", name="Alice"),
        Participant(id="b", name="Bob"),
        Participant(id="c", name="Carol"),
    ]
