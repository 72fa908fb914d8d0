"""
token.py - Stateful Token Ledger and Access-Control Engine

StratosToken is the only object that mutates token state. It holds balances,
allowances, total supply, the owner, the role table and the pause flag, and
exposes the ERC20-style operations of the Stratos (STOS) contract.

Key responsibilities:
    - Validates every precondition before touching state (all-or-nothing calls)
    - Gates mint/burn on MINT_BURN_ROLE, ownership ops on the owner, and
      balance changes on the pause flag
    - Enforces the fixed max supply
    - Serializes all calls behind one re-entrant lock
    - Always logs: emitted events and committed calls are appended to audit
      trails that clone() copies and replay() re-executes
"""

from __future__ import annotations
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Sequence, Tuple
import copy
import threading

from .access import AccessControl
from .core import (
    # Types
    TokenConfig, TokenSnapshot, Event, CallRecord, Receipt, ExecuteResult,
    Balances, Allowances,
    # Constants
    STRATOS_CONFIG, DEFAULT_TOKEN_ADDRESS, ZERO_ADDRESS,
    DEFAULT_ADMIN_ROLE, MINT_BURN_ROLE,
    REASON_MINT_NOT_ALLOWED, REASON_BURN_NOT_ALLOWED,
    REASON_TRANSFER_EXCEEDS_BALANCE, REASON_BURN_EXCEEDS_BALANCE,
    REASON_MINT_TO_ZERO, REASON_BURN_FROM_ZERO, REASON_TRANSFER_TO_ZERO,
    REASON_APPROVE_TO_ZERO, REASON_APPROVE_FROM_ZERO, REASON_CALLER_ZERO,
    REASON_NEW_OWNER_ZERO, REASON_RENOUNCE_FOR_SELF,
    EVENT_TRANSFER, EVENT_APPROVAL, EVENT_ROLE_GRANTED, EVENT_ROLE_REVOKED,
    EVENT_OWNERSHIP_TRANSFERRED, EVENT_PAUSED, EVENT_UNPAUSED,
    # Exceptions
    TokenError, NotOwner, Unauthorized, PausedError, NotPausedError,
    SupplyExceeded, InsufficientBalance, InsufficientAllowance,
    RedeemExceedsBalance, UnknownOperation,
    # Helpers
    require_amount, require_identity,
)


class StratosToken:
    """
    Role-gated token ledger with a fixed supply ceiling and a pause switch.

    Implements the TokenView protocol, so it can be handed to read-only code.

    Every mutating method takes the calling identity as its first argument.
    Identities are opaque strings; authenticating them is the caller's job.

    Design Principles:
        - Always validates: a call either commits every effect or raises a
          TokenError before any effect. There is no partial state.
        - Always logs: committed calls go to call_log, their effects to events.

    Thread Safety:
        All public methods hold an RLock, so concurrent callers are serialized
        and reads never observe a half-applied call.

    Example:
        token = StratosToken("admin")
        token.mint("admin", "alice", 100 * 10**18)
        token.transfer("alice", "bob", 90 * 10**18)
        token.balance_of("alice")  # 10 * 10**18
    """

    DEFAULT_ADMIN_ROLE = DEFAULT_ADMIN_ROLE
    MINT_BURN_ROLE = MINT_BURN_ROLE

    def __init__(
        self,
        owner: str,
        address: str = DEFAULT_TOKEN_ADDRESS,
        config: TokenConfig = STRATOS_CONFIG,
        verbose: bool = True,
    ):
        """
        Deploy a token.

        Args:
            owner: Deploying identity; becomes owner and holds both roles
            address: The token's own identity in the balance table (redeem source)
            config: Token terms (default: Stratos Token / STOS / 18 / 100M)
            verbose: Print one line per applied or rejected call (default: True)

        Raises:
            ValueError: If owner or address is empty, or they are equal
            InvalidAddress: If owner or address is the zero address
        """
        for identity in (owner, address):
            if not isinstance(identity, str) or not identity.strip():
                raise ValueError(f"identity must be a non-empty string, got {identity!r}")
        require_identity(owner, REASON_NEW_OWNER_ZERO)
        require_identity(address, f"token address cannot be {ZERO_ADDRESS}")
        if owner == address:
            raise ValueError("owner and token address must be different")

        self.config = config
        self.address = address
        self.verbose = verbose
        self._creator = owner

        self._balances: Balances = {}
        self._allowances: Allowances = {}
        self._total_supply: int = 0
        self._owner: str = owner
        self._roles = AccessControl()
        self._paused: bool = False

        self.events: List[Event] = []
        self.call_log: List[CallRecord] = []
        self._lock = threading.RLock()

        self._emit(EVENT_OWNERSHIP_TRANSFERRED, previous_owner=ZERO_ADDRESS, new_owner=owner)
        self._grant(DEFAULT_ADMIN_ROLE, owner, sender=owner)
        self._grant(MINT_BURN_ROLE, owner, sender=owner)

    # ========================================================================
    # TokenView PROTOCOL IMPLEMENTATION (read-only)
    # ========================================================================

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def symbol(self) -> str:
        return self.config.symbol

    @property
    def decimals(self) -> int:
        return self.config.decimals

    @property
    def max_supply(self) -> int:
        return self.config.max_supply

    cap = max_supply

    @property
    def total_supply(self) -> int:
        return self._total_supply

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def paused(self) -> bool:
        return self._paused

    # The contract ABI exposes the pause flag under both names.
    stopped = paused

    def balance_of(self, account: str) -> int:
        """Balance of `account` in base units (0 for unknown identities)."""
        with self._lock:
            return self._balances.get(account, 0)

    def allowance(self, owner: str, spender: str) -> int:
        """Remaining amount `spender` may move out of `owner`'s balance."""
        with self._lock:
            return self._allowances.get((owner, spender), 0)

    def has_role(self, role: str, account: str) -> bool:
        with self._lock:
            return self._roles.has_role(role, account)

    def get_role_admin(self, role: str) -> str:
        return self._roles.get_role_admin(role)

    def role_members(self, role: str) -> List[str]:
        with self._lock:
            return self._roles.members(role)

    def snapshot(self) -> TokenSnapshot:
        """
        Capture all mutable state at a single point in time.

        Zero balances and allowances are omitted.
        """
        with self._lock:
            return TokenSnapshot(
                balances={a: b for a, b in self._balances.items() if b},
                allowances={k: v for k, v in self._allowances.items() if v},
                total_supply=self._total_supply,
                owner=self._owner,
                roles=self._roles.frozen(),
                paused=self._paused,
            )

    def verify_supply(self) -> Dict[str, Any]:
        """
        Verify the supply invariants.

        Checks that the balances sum to total supply and that total supply
        is within the ceiling.

        Returns:
            Dict with keys:
            - 'valid': bool - True if both invariants hold
            - 'total_supply': int - Recorded total supply
            - 'sum_of_balances': int - Sum over all accounts
            - 'max_supply': int - Configured ceiling
            - 'discrepancy': int - total_supply - sum_of_balances

        Example:
            result = token.verify_supply()
            assert result['valid'], f"Supply drift: {result['discrepancy']}"
        """
        with self._lock:
            sum_of_balances = sum(self._balances[a] for a in sorted(self._balances))
            discrepancy = self._total_supply - sum_of_balances
            return {
                'valid': discrepancy == 0 and self._total_supply <= self.config.max_supply,
                'total_supply': self._total_supply,
                'sum_of_balances': sum_of_balances,
                'max_supply': self.config.max_supply,
                'discrepancy': discrepancy,
            }

    # ========================================================================
    # OWNERSHIP & ROLES (Mutating)
    # ========================================================================

    def set_owner(self, caller: str, new_owner: str) -> None:
        """
        Transfer ownership together with both roles.

        The old owner loses DEFAULT_ADMIN_ROLE and MINT_BURN_ROLE and the new
        owner gains them in the same call. Setting the current owner again
        commits without changing anything.

        Raises:
            NotOwner: If caller is not the owner
            InvalidAddress: If new_owner is the zero address
        """
        with self._call(caller, "set_owner", (new_owner,)):
            self._require_owner(caller)
            require_identity(new_owner, REASON_NEW_OWNER_ZERO)
            if new_owner == self._owner:
                return
            previous = self._owner
            self._revoke(DEFAULT_ADMIN_ROLE, previous, sender=caller)
            self._revoke(MINT_BURN_ROLE, previous, sender=caller)
            self._grant(DEFAULT_ADMIN_ROLE, new_owner, sender=caller)
            self._grant(MINT_BURN_ROLE, new_owner, sender=caller)
            self._owner = new_owner
            self._emit(EVENT_OWNERSHIP_TRANSFERRED, previous_owner=previous, new_owner=new_owner)

    def grant_mint_burn_role(self, caller: str, account: str) -> None:
        """Grant MINT_BURN_ROLE to `account`. Caller must be the owner or a role admin."""
        self.grant_role(caller, MINT_BURN_ROLE, account)

    # Both names exist on the deployed contract.
    set_authority = grant_mint_burn_role

    def revoke_mint_burn_role(self, caller: str, account: str) -> None:
        """Revoke MINT_BURN_ROLE from `account`. Caller must be the owner or a role admin."""
        self.revoke_role(caller, MINT_BURN_ROLE, account)

    def grant_role(self, caller: str, role: str, account: str) -> None:
        """
        Grant `role` to `account`.

        The owner may always grant; anyone else must hold get_role_admin(role).
        Granting a role that is already held commits without emitting an event.

        Raises:
            Unauthorized: If caller is neither the owner nor a holder of the admin role
            InvalidAddress: If account is the zero address
        """
        with self._call(caller, "grant_role", (role, account)):
            self._require_role_admin(caller, role)
            require_identity(account, f"cannot grant a role to {ZERO_ADDRESS}")
            self._grant(role, account, sender=caller)

    def revoke_role(self, caller: str, role: str, account: str) -> None:
        """
        Revoke `role` from `account`.

        Raises:
            Unauthorized: If caller is neither the owner nor a holder of the admin role
        """
        with self._call(caller, "revoke_role", (role, account)):
            self._require_role_admin(caller, role)
            self._revoke(role, account, sender=caller)

    def renounce_role(self, caller: str, role: str, account: str) -> None:
        """Give up one of the caller's own roles. `account` must equal caller."""
        with self._call(caller, "renounce_role", (role, account)):
            if account != caller:
                raise Unauthorized(REASON_RENOUNCE_FOR_SELF)
            self._revoke(role, account, sender=caller)

    # ========================================================================
    # PAUSE CONTROL (Mutating)
    # ========================================================================

    def stop(self, caller: str) -> None:
        """
        Pause mint, burn, transfer, transfer_from and redeem.

        Raises:
            NotOwner: If caller is neither the owner nor a DEFAULT_ADMIN_ROLE holder
            PausedError: If already paused
        """
        with self._call(caller, "stop", ()):
            self._require_owner_or_admin(caller)
            self._require_not_paused()
            self._paused = True
            self._emit(EVENT_PAUSED, account=caller)

    pause = stop

    def resume(self, caller: str) -> None:
        """
        Lift a pause set by stop().

        Raises:
            NotOwner: If caller is neither the owner nor a DEFAULT_ADMIN_ROLE holder
            NotPausedError: If not paused
        """
        with self._call(caller, "resume", ()):
            self._require_owner_or_admin(caller)
            if not self._paused:
                raise NotPausedError()
            self._paused = False
            self._emit(EVENT_UNPAUSED, account=caller)

    unpause = resume

    # ========================================================================
    # SUPPLY (Mutating)
    # ========================================================================

    def mint(self, caller: str, to: str, amount: int) -> bool:
        """
        Create `amount` new base units in `to`'s balance.

        Checks run in order: role, pause, recipient, amount, supply ceiling.

        Raises:
            Unauthorized: If caller lacks MINT_BURN_ROLE
            PausedError: If paused
            InvalidAddress: If `to` is the zero address
            SupplyExceeded: If total supply would exceed max supply
        """
        with self._call(caller, "mint", (to, amount)):
            self._roles.check_role(MINT_BURN_ROLE, caller, REASON_MINT_NOT_ALLOWED)
            self._require_not_paused()
            require_identity(to, REASON_MINT_TO_ZERO)
            require_amount(amount)
            if self._total_supply + amount > self.config.max_supply:
                raise SupplyExceeded(self.config.supply_exceeded_reason)
            self._credit(to, amount)
            self._total_supply += amount
            self._emit(EVENT_TRANSFER, sender=ZERO_ADDRESS, recipient=to, value=amount)
        return True

    def burn(self, caller: str, account: str, amount: int) -> bool:
        """
        Destroy `amount` base units from `account`'s balance.

        The role check is on the caller, not on `account`: a MINT_BURN_ROLE
        holder may burn from any balance.

        Raises:
            Unauthorized: If caller lacks MINT_BURN_ROLE
            PausedError: If paused
            InvalidAddress: If `account` is the zero address
            InsufficientBalance: If `account` holds less than `amount`
        """
        with self._call(caller, "burn", (account, amount)):
            self._roles.check_role(MINT_BURN_ROLE, caller, REASON_BURN_NOT_ALLOWED)
            self._require_not_paused()
            require_identity(account, REASON_BURN_FROM_ZERO)
            require_amount(amount)
            if self._balances.get(account, 0) < amount:
                raise InsufficientBalance(REASON_BURN_EXCEEDS_BALANCE)
            self._debit(account, amount)
            self._total_supply -= amount
            self._emit(EVENT_TRANSFER, sender=account, recipient=ZERO_ADDRESS, value=amount)
        return True

    # ========================================================================
    # TRANSFERS & ALLOWANCES (Mutating)
    # ========================================================================

    def transfer(self, caller: str, to: str, amount: int) -> bool:
        """
        Move `amount` from caller to `to`.

        Raises:
            PausedError: If paused
            InvalidAddress: If `to` is the zero address
            InsufficientBalance: If caller holds less than `amount`
        """
        with self._call(caller, "transfer", (to, amount)):
            self._require_not_paused()
            require_identity(to, REASON_TRANSFER_TO_ZERO)
            require_amount(amount)
            if self._balances.get(caller, 0) < amount:
                raise InsufficientBalance(REASON_TRANSFER_EXCEEDS_BALANCE)
            self._move(caller, to, amount)
        return True

    def approve(self, caller: str, spender: str, amount: int) -> bool:
        """Set caller's allowance for `spender` to exactly `amount`."""
        with self._call(caller, "approve", (spender, amount)):
            require_identity(spender, REASON_APPROVE_TO_ZERO)
            require_amount(amount)
            self._set_allowance(caller, spender, amount)
        return True

    def increase_allowance(self, caller: str, spender: str, added: int) -> bool:
        with self._call(caller, "increase_allowance", (spender, added)):
            require_identity(spender, REASON_APPROVE_TO_ZERO)
            require_amount(added)
            current = self._allowances.get((caller, spender), 0)
            self._set_allowance(caller, spender, current + added)
        return True

    def decrease_allowance(self, caller: str, spender: str, subtracted: int) -> bool:
        """Lower caller's allowance for `spender`. Never goes below zero."""
        with self._call(caller, "decrease_allowance", (spender, subtracted)):
            require_identity(spender, REASON_APPROVE_TO_ZERO)
            require_amount(subtracted)
            current = self._allowances.get((caller, spender), 0)
            self._set_allowance(caller, spender, max(0, current - subtracted))
        return True

    def transfer_from(self, caller: str, owner: str, to: str, amount: int) -> bool:
        """
        Move `amount` from `owner` to `to` using caller's allowance.

        The allowance decrement, the debit and the credit commit together.

        Raises:
            PausedError: If paused
            InvalidAddress: If `owner` or `to` is the zero address
            InsufficientAllowance: If caller's allowance from owner is below `amount`
            InsufficientBalance: If owner holds less than `amount`
        """
        with self._call(caller, "transfer_from", (owner, to, amount)):
            self._require_not_paused()
            require_amount(amount)
            require_identity(owner, REASON_APPROVE_FROM_ZERO)
            current = self._allowances.get((owner, caller), 0)
            if current < amount:
                raise InsufficientAllowance()
            require_identity(to, REASON_TRANSFER_TO_ZERO)
            if self._balances.get(owner, 0) < amount:
                raise InsufficientBalance(REASON_TRANSFER_EXCEEDS_BALANCE)
            self._set_allowance(owner, caller, current - amount)
            self._move(owner, to, amount)
        return True

    def redeem(self, caller: str, amount: int) -> bool:
        """
        Pay `amount` out of the token's own balance to the caller.

        Raises:
            PausedError: If paused
            RedeemExceedsBalance: If the token's address holds less than `amount`
        """
        with self._call(caller, "redeem", (amount,)):
            self._require_not_paused()
            require_amount(amount)
            if self._balances.get(self.address, 0) < amount:
                raise RedeemExceedsBalance()
            self._move(self.address, caller, amount)
        return True

    # ========================================================================
    # UNIFORM ENTRY POINT
    # ========================================================================

    def apply(self, identity: str, operation: str, args: Sequence[Any] = ()) -> Receipt:
        """
        Execute a call by its contract ABI name and report the outcome.

        This is the seam for a transaction harness: it never raises for a
        failed precondition, it returns a REJECTED receipt carrying the
        revert reason instead.

        Args:
            identity: Calling identity
            operation: ABI name ("mint", "transferFrom", "balanceOf", ...) or
                       the Python method name ("transfer_from")
            args: Positional arguments, excluding the caller

        Returns:
            Receipt with status APPLIED and the return value and emitted
            events, or status REJECTED and the reason.

        Example:
            receipt = token.apply("bob", "mint", ("bob", 100))
            receipt.reason  # "Caller is not allowed to mint"
        """
        args = tuple(args)
        with self._lock:
            first_event = len(self.events)
            try:
                if operation in _READ_OPERATIONS:
                    value = _READ_OPERATIONS[operation](self, *args)
                elif operation in _WRITE_OPERATIONS:
                    method = getattr(self, _WRITE_OPERATIONS[operation])
                    value = method(identity, *args)
                else:
                    raise UnknownOperation(operation)
            except TokenError as e:
                if isinstance(e, UnknownOperation) and self.verbose:
                    print(f"✗ REJECTED: {operation} by {identity}: {e.reason}")
                return Receipt(
                    status=ExecuteResult.REJECTED,
                    operation=operation,
                    caller=identity,
                    reason=e.reason,
                )
            return Receipt(
                status=ExecuteResult.APPLIED,
                operation=operation,
                caller=identity,
                value=value,
                events=tuple(self.events[first_event:]),
            )

    # ========================================================================
    # COPYING & RECONSTRUCTION
    # ========================================================================

    def clone(self) -> StratosToken:
        """
        Create a fully independent deep copy of this token.

        Cloned state includes balances, allowances, supply, owner, roles,
        pause flag, both audit trails and configuration.
        """
        with self._lock:
            cloned = StratosToken.__new__(StratosToken)
            cloned.config = self.config
            cloned.address = self.address
            cloned.verbose = self.verbose
            cloned._creator = self._creator
            cloned._balances = dict(self._balances)
            cloned._allowances = dict(self._allowances)
            cloned._total_supply = self._total_supply
            cloned._owner = self._owner
            cloned._roles = self._roles.clone()
            cloned._paused = self._paused
            cloned.events = list(self.events)
            cloned.call_log = list(self.call_log)
            cloned._lock = threading.RLock()
            return cloned

    def replay(self, upto: int = None) -> StratosToken:
        """
        Rebuild a token by re-executing the call log on a fresh deployment.

        Args:
            upto: Replay only the first `upto` committed calls (default: all)

        Returns:
            New StratosToken whose snapshot equals this token's snapshot as it
            stood after those calls.

        Raises:
            TokenError: If a logged call is rejected during replay
        """
        with self._lock:
            records = list(self.call_log if upto is None else self.call_log[:upto])
        replayed = StratosToken(
            self._creator,
            address=self.address,
            config=self.config,
            verbose=self.verbose,
        )
        for record in records:
            method = getattr(replayed, record.operation)
            try:
                method(record.caller, *copy.deepcopy(record.args))
            except TokenError as e:
                raise TokenError(f"replay failed at {record!r}: {e.reason}") from e
        return replayed

    # ========================================================================
    # INTERNALS
    # ========================================================================

    @contextmanager
    def _call(self, caller: str, operation: str, args: Tuple[Any, ...]) -> Iterator[None]:
        """
        Run one mutating call under the lock and record it if it commits.

        Aliases delegate to their canonical method, so the log always holds
        canonical operation names and replay() needs no alias table.

        The caller must be a non-empty identity other than the zero address.
        """
        with self._lock:
            first_event = len(self.events)
            try:
                require_identity(caller, REASON_CALLER_ZERO)
                yield
            except TokenError as e:
                # Preconditions are checked before any effect, so only events
                # can need discarding here.
                del self.events[first_event:]
                if self.verbose:
                    print(f"✗ REJECTED: {operation} by {caller}: {e.reason}")
                raise
            record = CallRecord(
                sequence=len(self.call_log),
                caller=caller,
                operation=operation,
                args=args,
            )
            self.call_log.append(record)
            if self.verbose:
                print(f"✓ APPLIED: {record!r}")

    def _require_owner(self, caller: str) -> None:
        if caller != self._owner:
            raise NotOwner()

    def _require_owner_or_admin(self, caller: str) -> None:
        if caller != self._owner and not self._roles.has_role(DEFAULT_ADMIN_ROLE, caller):
            raise NotOwner()

    def _require_role_admin(self, caller: str, role: str) -> None:
        if caller != self._owner:
            self._roles.check_role(self._roles.get_role_admin(role), caller)

    def _require_not_paused(self) -> None:
        if self._paused:
            raise PausedError()

    def _emit(self, name: str, **args: Any) -> Event:
        event = Event(sequence=len(self.events), name=name, args=args)
        self.events.append(event)
        return event

    def _grant(self, role: str, account: str, sender: str) -> None:
        if self._roles.grant(role, account):
            self._emit(EVENT_ROLE_GRANTED, role=role, account=account, sender=sender)

    def _revoke(self, role: str, account: str, sender: str) -> None:
        if self._roles.revoke(role, account):
            self._emit(EVENT_ROLE_REVOKED, role=role, account=account, sender=sender)

    def _set_allowance(self, owner: str, spender: str, amount: int) -> None:
        if amount:
            self._allowances[(owner, spender)] = amount
        else:
            self._allowances.pop((owner, spender), None)
        self._emit(EVENT_APPROVAL, owner=owner, spender=spender, value=amount)

    def _credit(self, account: str, amount: int) -> None:
        balance = self._balances.get(account, 0) + amount
        if balance:
            self._balances[account] = balance

    def _debit(self, account: str, amount: int) -> None:
        balance = self._balances.get(account, 0) - amount
        if balance:
            self._balances[account] = balance
        else:
            # Zero balances are dropped to keep the table compact.
            self._balances.pop(account, None)

    def _move(self, sender: str, recipient: str, amount: int) -> None:
        self._debit(sender, amount)
        self._credit(recipient, amount)
        self._emit(EVENT_TRANSFER, sender=sender, recipient=recipient, value=amount)

    def __repr__(self) -> str:
        return (
            f"StratosToken({self.config.symbol}, owner={self._owner}, "
            f"supply={self._total_supply}/{self.config.max_supply}, "
            f"holders={len(self._balances)}, paused={self._paused})"
        )


# ============================================================================
# ABI DISPATCH TABLES
# ============================================================================

_READ_OPERATIONS: Dict[str, Callable[..., Any]] = {
    "name": lambda t: t.name,
    "symbol": lambda t: t.symbol,
    "decimals": lambda t: t.decimals,
    "totalSupply": lambda t: t.total_supply,
    "maxSupply": lambda t: t.max_supply,
    "cap": lambda t: t.max_supply,
    "balanceOf": lambda t, account: t.balance_of(account),
    "allowance": lambda t, owner, spender: t.allowance(owner, spender),
    "owner": lambda t: t.owner,
    "paused": lambda t: t.paused,
    "stopped": lambda t: t.paused,
    "hasRole": lambda t, role, account: t.has_role(role, account),
    "getRoleAdmin": lambda t, role: t.get_role_admin(role),
    "DEFAULT_ADMIN_ROLE": lambda t: DEFAULT_ADMIN_ROLE,
    "MINT_BURN_ROLE": lambda t: MINT_BURN_ROLE,
}

_WRITE_OPERATIONS: Dict[str, str] = {
    "setOwner": "set_owner",
    "grantMintBurnRole": "grant_mint_burn_role",
    "setAuthority": "set_authority",
    "revokeMintBurnRole": "revoke_mint_burn_role",
    "grantRole": "grant_role",
    "revokeRole": "revoke_role",
    "renounceRole": "renounce_role",
    "stop": "stop",
    "pause": "pause",
    "resume": "resume",
    "unpause": "unpause",
    "mint": "mint",
    "burn": "burn",
    "transfer": "transfer",
    "approve": "approve",
    "increaseAllowance": "increase_allowance",
    "decreaseAllowance": "decrease_allowance",
    "transferFrom": "transfer_from",
    "redeem": "redeem",
}
_WRITE_OPERATIONS.update({method: method for method in list(_WRITE_OPERATIONS.values())})
