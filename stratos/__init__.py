"""
stratos - Stratos (STOS) Token Ledger

An in-process ERC20-style token ledger with role-gated minting and burning,
a fixed maximum supply, a pause switch and owner-coupled role management.

Usage:
    from stratos import StratosToken, MINT_BURN_ROLE, to_base_units

    token = StratosToken("admin", verbose=False)
    token.mint("admin", "alice", to_base_units("100"))
    token.transfer("alice", "bob", to_base_units("90"))

    token.set_authority("admin", "minter")
    token.has_role(MINT_BURN_ROLE, "minter")   # True

    # Harness-style calls never raise on a failed precondition
    receipt = token.apply("bob", "mint", ("bob", 1))
    receipt.reason                             # "Caller is not allowed to mint"
"""

# Core types
from .core import (
    TokenConfig,
    TokenView,
    Event,
    CallRecord,
    Receipt,
    TokenSnapshot,
    ExecuteResult,
    TokenError,
    NotOwner,
    Unauthorized,
    PausedError,
    NotPausedError,
    SupplyExceeded,
    InsufficientBalance,
    InsufficientAllowance,
    RedeemExceedsBalance,
    InvalidAddress,
    InvalidAmount,
    UnknownOperation,
    to_base_units,
    from_base_units,
    STRATOS_CONFIG,
    TOKEN_NAME,
    TOKEN_SYMBOL,
    TOKEN_DECIMALS,
    MAX_SUPPLY,
    DEFAULT_ADMIN_ROLE,
    MINT_BURN_ROLE,
    ZERO_ADDRESS,
    DEFAULT_TOKEN_ADDRESS,
)

# Roles
from .access import AccessControl

# Engine
from .token import StratosToken

__all__ = [
    # Core
    'TokenConfig', 'TokenView', 'Event', 'CallRecord', 'Receipt', 'TokenSnapshot',
    'ExecuteResult',
    'TokenError', 'NotOwner', 'Unauthorized', 'PausedError', 'NotPausedError',
    'SupplyExceeded', 'InsufficientBalance', 'InsufficientAllowance',
    'RedeemExceedsBalance', 'InvalidAddress', 'InvalidAmount', 'UnknownOperation',
    'to_base_units', 'from_base_units',
    'STRATOS_CONFIG', 'TOKEN_NAME', 'TOKEN_SYMBOL', 'TOKEN_DECIMALS', 'MAX_SUPPLY',
    'DEFAULT_ADMIN_ROLE', 'MINT_BURN_ROLE', 'ZERO_ADDRESS', 'DEFAULT_TOKEN_ADDRESS',
    # Roles
    'AccessControl',
    # Engine
    'StratosToken',
]

__version__ = '1.0.0'
