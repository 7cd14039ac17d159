"""Shared pytest setup: Hypothesis profiles and the default money fixture.

Two Hypothesis profiles are registered:
- dev: 500 examples per property, used locally
- ci: 50 derandomized examples, selected when CI=true

HYPOTHESIS_PROFILE=dev|ci forces a profile.
"""

import os

import pytest
from hypothesis import settings

from moneythings import MoneyThings, create_money_things

settings.register_profile("dev", max_examples=500)
settings.register_profile("ci", max_examples=50, derandomize=True, print_blob=True)

_PROFILES = ("dev", "ci")


def _select_profile() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE")
    if requested is not None and requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_select_profile())


@pytest.fixture
def money() -> MoneyThings:
    """MoneyThings with usd (default) and eur, all other settings default."""
    return create_money_things(["usd", "eur"])
