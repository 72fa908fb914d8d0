"""
Core types and pure functions for the Stratos token ledger.

This module provides the foundational data structures for the token engine:
1. Constants: token metadata, role tags, revert reasons
2. Configuration: TokenConfig term sheet
3. Exceptions: TokenError and the failure taxonomy
4. Immutable records: Event, CallRecord, Receipt, TokenSnapshot
5. Protocols: TokenView for read-only token access
6. Pure helpers: base-unit conversion

Nothing in this module mutates token state.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation, localcontext
from enum import Enum
from types import MappingProxyType
from typing import (
    Dict, Set, Any, Protocol,
    Tuple, FrozenSet, Mapping, runtime_checkable
)


# ============================================================================
# CONSTANTS
# ============================================================================

TOKEN_NAME = "Stratos Token"
TOKEN_SYMBOL = "STOS"
TOKEN_DECIMALS = 18

# 100,000,000 STOS expressed in base units.
MAX_SUPPLY = 10 ** 8 * 10 ** TOKEN_DECIMALS

# Role tags are 32-byte identifiers. MINT_BURN_ROLE is keccak256("MINT_BURN_ROLE").
DEFAULT_ADMIN_ROLE = "0x" + "00" * 32
MINT_BURN_ROLE = "0xa60cb0df7bc178038b993aa2e0df2e2cfb6627f4695e4261227d47422ae7e2a6"

# The identity that never holds balances, allowances or roles.
ZERO_ADDRESS = "0x" + "00" * 20

# Default self-identity of a token instance (target of redeem).
DEFAULT_TOKEN_ADDRESS = "stratos"

# Revert reasons, kept verbatim so callers can match on them.
REASON_NOT_OWNER = "Ownable: caller is not the owner"
REASON_NEW_OWNER_ZERO = "Ownable: new owner is the zero address"
REASON_PAUSED = "Pausable: paused"
REASON_NOT_PAUSED = "Pausable: not paused"
REASON_MINT_NOT_ALLOWED = "Caller is not allowed to mint"
REASON_BURN_NOT_ALLOWED = "Caller is not allowed to burn"
REASON_SUPPLY_EXCEEDED = "Exceeds {symbol} token max totalSupply"
REASON_TRANSFER_EXCEEDS_BALANCE = "ERC20: transfer amount exceeds balance"
REASON_BURN_EXCEEDS_BALANCE = "ERC20: burn amount exceeds balance"
REASON_INSUFFICIENT_ALLOWANCE = "ERC20: insufficient allowance"
REASON_REDEEM_EXCEEDS_BALANCE = "redeem can not exceed the balance"
REASON_MINT_TO_ZERO = "ERC20: mint to the zero address"
REASON_BURN_FROM_ZERO = "ERC20: burn from the zero address"
REASON_TRANSFER_TO_ZERO = "ERC20: transfer to the zero address"
REASON_APPROVE_TO_ZERO = "ERC20: approve to the zero address"
REASON_APPROVE_FROM_ZERO = "ERC20: approve from the zero address"
REASON_CALLER_ZERO = "caller is the zero address"
REASON_RENOUNCE_FOR_SELF = "AccessControl: can only renounce roles for self"
REASON_INVALID_AMOUNT = "amount must be a non-negative integer"

# Precision for display <-> base unit conversion. uint256 needs 78 digits.
_CONVERSION_PRECISION = 100

# Event names (ERC20 / AccessControl / Ownable / Pausable).
EVENT_TRANSFER = "Transfer"
EVENT_APPROVAL = "Approval"
EVENT_ROLE_GRANTED = "RoleGranted"
EVENT_ROLE_REVOKED = "RoleRevoked"
EVENT_OWNERSHIP_TRANSFERRED = "OwnershipTransferred"
EVENT_PAUSED = "Paused"
EVENT_UNPAUSED = "Unpaused"


# ============================================================================
# TYPE ALIASES
# ============================================================================

# Mapping from identity to base-unit balance.
Balances = Dict[str, int]

# Mapping from (owner, spender) to remaining allowance.
Allowances = Dict[Tuple[str, str], int]

# Mapping from role tag to its member identities.
RoleTable = Dict[str, Set[str]]


# ============================================================================
# CONFIGURATION
# ============================================================================

@dataclass(frozen=True, slots=True)
class TokenConfig:
    """
    Immutable term sheet of a token.

    Attributes:
        name: Human-readable token name.
        symbol: Ticker symbol, also used in the supply-ceiling revert reason.
        decimals: Display precision; balances are integers of 10^-decimals.
        max_supply: Ceiling on total supply, in base units.
    """
    name: str
    symbol: str
    decimals: int
    max_supply: int

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("TokenConfig name cannot be empty")
        if not self.symbol or not self.symbol.strip():
            raise ValueError("TokenConfig symbol cannot be empty")
        if isinstance(self.decimals, bool) or not isinstance(self.decimals, int):
            raise ValueError(f"TokenConfig decimals must be int, got {type(self.decimals)}")
        if not 0 <= self.decimals <= 77:
            raise ValueError(f"TokenConfig decimals out of range: {self.decimals}")
        if isinstance(self.max_supply, bool) or not isinstance(self.max_supply, int):
            raise ValueError(f"TokenConfig max_supply must be int, got {type(self.max_supply)}")
        if self.max_supply <= 0:
            raise ValueError(f"TokenConfig max_supply must be positive, got {self.max_supply}")

    @property
    def supply_exceeded_reason(self) -> str:
        return REASON_SUPPLY_EXCEEDED.format(symbol=self.symbol)


STRATOS_CONFIG = TokenConfig(
    name=TOKEN_NAME,
    symbol=TOKEN_SYMBOL,
    decimals=TOKEN_DECIMALS,
    max_supply=MAX_SUPPLY,
)


# ============================================================================
# EXCEPTIONS
# ============================================================================

class TokenError(Exception):
    """
    Base exception for all token errors.

    Every failure carries the revert reason a contract caller would see.
    Failures are raised before any state is touched, so a caught TokenError
    always means the call had no effect.
    """

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class NotOwner(TokenError):
    """Raised when an ownership-restricted operation is called by a non-owner."""

    def __init__(self, reason: str = REASON_NOT_OWNER):
        super().__init__(reason)


class Unauthorized(TokenError):
    """Raised when the caller lacks the role an operation requires."""
    pass


class PausedError(TokenError):
    """Raised when a balance-changing operation is attempted while paused."""

    def __init__(self, reason: str = REASON_PAUSED):
        super().__init__(reason)


class NotPausedError(TokenError):
    """Raised when resuming a token that is not paused."""

    def __init__(self, reason: str = REASON_NOT_PAUSED):
        super().__init__(reason)


class SupplyExceeded(TokenError):
    """Raised when a mint would push total supply above the ceiling."""
    pass


class InsufficientBalance(TokenError):
    """Raised when a debit exceeds the account's balance."""
    pass


class InsufficientAllowance(TokenError):
    """Raised when transfer_from exceeds the spender's allowance."""

    def __init__(self, reason: str = REASON_INSUFFICIENT_ALLOWANCE):
        super().__init__(reason)


class RedeemExceedsBalance(TokenError):
    """Raised when redeem exceeds the token's self-held balance."""

    def __init__(self, reason: str = REASON_REDEEM_EXCEEDS_BALANCE):
        super().__init__(reason)


class InvalidAddress(TokenError):
    """Raised when the zero address is used where a real identity is required."""
    pass


class InvalidAmount(TokenError):
    """Raised when an amount is not a non-negative integer."""

    def __init__(self, reason: str = REASON_INVALID_AMOUNT):
        super().__init__(reason)


class UnknownOperation(TokenError):
    """Raised by apply() for an operation name the token does not expose."""

    def __init__(self, operation: str):
        super().__init__(f"unknown operation: {operation}")
        self.operation = operation


def missing_role_reason(account: str, role: str) -> str:
    """Revert reason used by AccessControl when `account` lacks `role`."""
    return f"AccessControl: account {account.lower()} is missing role {role}"


# ============================================================================
# ENUMS
# ============================================================================

class ExecuteResult(Enum):
    """
    Outcome of a call submitted through StratosToken.apply().

    APPLIED: The call passed validation and its effects were committed.
    REJECTED: The call failed a precondition; state is unchanged.
    """
    APPLIED = "applied"
    REJECTED = "rejected"


# ============================================================================
# IMMUTABLE RECORDS
# ============================================================================

@dataclass(frozen=True, slots=True)
class Event:
    """
    A log entry emitted by a committed operation.

    Attributes:
        sequence: Monotonic index within the token's event log.
        name: Event name (Transfer, Approval, RoleGranted, ...).
        args: Event payload, keyed by argument name.
    """
    sequence: int
    name: str
    args: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        # Read-only copy; clones share Event objects.
        object.__setattr__(self, "args", MappingProxyType(dict(self.args)))

    def __repr__(self) -> str:
        payload = ", ".join(f"{k}={v!r}" for k, v in self.args.items())
        return f"Event#{self.sequence} {self.name}({payload})"


@dataclass(frozen=True, slots=True)
class CallRecord:
    """
    A committed mutating call, as recorded in the call log.

    The call log is sufficient to rebuild token state with replay().
    """
    sequence: int
    caller: str
    operation: str
    args: Tuple[Any, ...] = ()

    def __repr__(self) -> str:
        rendered = ", ".join(repr(a) for a in self.args)
        return f"Call#{self.sequence} {self.caller}.{self.operation}({rendered})"


@dataclass(frozen=True, slots=True)
class Receipt:
    """
    Structured result of StratosToken.apply().

    Attributes:
        status: APPLIED or REJECTED.
        operation: Operation name as submitted.
        caller: Identity the call was made as.
        value: Return value for reads and for mutations that return one.
        reason: Revert reason when REJECTED, empty otherwise.
        events: Events emitted by the call (empty when REJECTED).
    """
    status: ExecuteResult
    operation: str
    caller: str
    value: Any = None
    reason: str = ""
    events: Tuple[Event, ...] = ()

    @property
    def ok(self) -> bool:
        return self.status == ExecuteResult.APPLIED


@dataclass(frozen=True, slots=True)
class TokenSnapshot:
    """
    Point-in-time copy of all mutable token state.

    Zero balances and zero allowances are omitted, so two tokens that differ
    only in which accounts were ever touched compare equal.
    """
    balances: Mapping[str, int]
    allowances: Mapping[Tuple[str, str], int]
    total_supply: int
    owner: str
    roles: Mapping[str, FrozenSet[str]]
    paused: bool


# ============================================================================
# PROTOCOLS
# ============================================================================

@runtime_checkable
class TokenView(Protocol):
    """
    Read-only interface to token state.

    Functions accepting a TokenView declare that they only query the token.
    StratosToken implements this protocol alongside its mutation methods.
    """

    @property
    def total_supply(self) -> int:
        ...

    @property
    def owner(self) -> str:
        ...

    @property
    def paused(self) -> bool:
        ...

    def balance_of(self, account: str) -> int:
        ...

    def allowance(self, owner: str, spender: str) -> int:
        ...

    def has_role(self, role: str, account: str) -> bool:
        ...


# ============================================================================
# VALIDATION HELPERS
# ============================================================================

def require_amount(amount: Any) -> int:
    """Return `amount` if it is a non-negative int, else raise InvalidAmount."""
    if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
        raise InvalidAmount()
    return amount


def require_identity(identity: Any, reason: str) -> str:
    """Reject empty identities and the zero address with InvalidAddress."""
    if not isinstance(identity, str) or not identity.strip():
        raise InvalidAddress(f"identity must be a non-empty string, got {identity!r}")
    if identity.lower() == ZERO_ADDRESS:
        raise InvalidAddress(reason)
    return identity


# ============================================================================
# BASE UNIT CONVERSION
# ============================================================================

def to_base_units(value: Any, decimals: int = TOKEN_DECIMALS) -> int:
    """
    Convert a display amount (e.g. "1.5" STOS) to integer base units.

    Args:
        value: int, str or Decimal display amount. Floats are rejected
               because they cannot represent most decimal fractions exactly.
        decimals: Token precision (default: 18).

    Returns:
        The amount in base units.

    Raises:
        ValueError: If the value is not a finite, non-negative number, or has
                    more fractional digits than `decimals` allows.

    Example:
        to_base_units("100") == 100 * 10**18
        to_base_units(Decimal("0.5"), decimals=2) == 50
    """
    if isinstance(value, (bool, float)):
        raise ValueError(f"amount must be int, str or Decimal, got {type(value).__name__}")
    try:
        quantity = Decimal(value) if not isinstance(value, Decimal) else value
    except (InvalidOperation, TypeError) as e:
        raise ValueError(f"not a decimal amount: {value!r}") from e
    if quantity.is_nan() or quantity.is_infinite():
        raise ValueError(f"amount must be finite, got {value!r}")
    if quantity < 0:
        raise ValueError(f"amount must be non-negative, got {value!r}")
    with localcontext() as ctx:
        ctx.prec = _CONVERSION_PRECISION
        scaled = quantity.scaleb(decimals)
        if scaled != scaled.to_integral_value():
            raise ValueError(f"{value!r} has more than {decimals} decimal places")
        return int(scaled)


def from_base_units(amount: int, decimals: int = TOKEN_DECIMALS) -> Decimal:
    """
    Convert integer base units back to a display Decimal.

    The result is normalized, so 10**18 base units at 18 decimals is Decimal("1").
    """
    require_amount(amount)
    with localcontext() as ctx:
        ctx.prec = _CONVERSION_PRECISION
        quantity = Decimal(amount).scaleb(-decimals)
        if quantity == quantity.to_integral_value():
            return quantity.quantize(Decimal(1))
        return quantity.normalize()
