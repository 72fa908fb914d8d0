"""
conftest.py - Shared pytest fixtures for token tests

Provides common fixtures used across unit and conformance tests:
- A freshly deployed token (admin is owner and holds both roles)
- A token with 100 STOS minted to admin
- A small-cap token for exercising the supply ceiling
"""

import pytest

from stratos import StratosToken, TokenConfig


ADMIN = "admin"
BOB = "bob"
BASE = 10 ** 18


# =============================================================================
# BASIC FIXTURES
# =============================================================================

@pytest.fixture
def token():
    """Fresh token deployed by admin."""
    return StratosToken(ADMIN, verbose=False)


@pytest.fixture
def funded_token(token):
    """Token with 100 STOS minted to admin."""
    token.mint(ADMIN, ADMIN, 100 * BASE)
    return token


@pytest.fixture
def small_token():
    """Token with a 1,000 base unit ceiling and no decimals."""
    config = TokenConfig(name="Small Token", symbol="SML", decimals=0, max_supply=1000)
    return StratosToken(ADMIN, config=config, verbose=False)
