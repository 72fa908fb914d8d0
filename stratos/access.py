"""
access.py - Role table for the token engine

AccessControl is a plain value owned by StratosToken: a mapping from role tag
to the set of identities holding it, plus a mapping from role tag to the
role that administers it. It performs no caller checks of its own beyond
check_role(); the engine decides who may grant and revoke.

Every role is administered by DEFAULT_ADMIN_ROLE.
"""

from __future__ import annotations
from typing import Dict, FrozenSet, Iterable, List, Optional

from .core import (
    DEFAULT_ADMIN_ROLE, MINT_BURN_ROLE, ZERO_ADDRESS,
    RoleTable, Unauthorized, missing_role_reason,
)


class AccessControl:
    """
    Tagged role table with explicit membership checks.

    grant() and revoke() report whether membership changed so the engine can
    emit RoleGranted/RoleRevoked only for real transitions.

    Example:
        roles = AccessControl([DEFAULT_ADMIN_ROLE, MINT_BURN_ROLE])
        roles.grant(MINT_BURN_ROLE, "alice")     # True
        roles.grant(MINT_BURN_ROLE, "alice")     # False, already a member
        roles.has_role(MINT_BURN_ROLE, "alice")  # True
    """

    def __init__(self, roles: Iterable[str] = (DEFAULT_ADMIN_ROLE, MINT_BURN_ROLE)):
        self._members: RoleTable = {role: set() for role in roles}
        self._admins: Dict[str, str] = {role: DEFAULT_ADMIN_ROLE for role in self._members}

    # ========================================================================
    # QUERIES
    # ========================================================================

    def has_role(self, role: str, account: str) -> bool:
        return account in self._members.get(role, ())

    def get_role_admin(self, role: str) -> str:
        """Return the role whose holders may grant and revoke `role`."""
        return self._admins.get(role, DEFAULT_ADMIN_ROLE)

    def members(self, role: str) -> List[str]:
        """Sorted holders of `role` (empty for unknown roles)."""
        return sorted(self._members.get(role, ()))

    def roles(self) -> List[str]:
        return sorted(self._members)

    def check_role(self, role: str, account: str, reason: Optional[str] = None) -> None:
        """
        Raise Unauthorized unless `account` holds `role`.

        Args:
            role: Required role tag
            account: Identity to check
            reason: Revert reason to use instead of the AccessControl default
        """
        if not self.has_role(role, account):
            raise Unauthorized(reason or missing_role_reason(account, role))

    # ========================================================================
    # MUTATION
    # ========================================================================

    def grant(self, role: str, account: str) -> bool:
        """Add `account` to `role`. Returns False if it was already a member."""
        if account == ZERO_ADDRESS:
            raise ValueError("cannot grant a role to the zero address")
        members = self._members.setdefault(role, set())
        if account in members:
            return False
        members.add(account)
        self._admins.setdefault(role, DEFAULT_ADMIN_ROLE)
        return True

    def revoke(self, role: str, account: str) -> bool:
        """Remove `account` from `role`. Returns False if it was not a member."""
        members = self._members.get(role)
        if not members or account not in members:
            return False
        members.discard(account)
        return True

    # ========================================================================
    # COPYING
    # ========================================================================

    def frozen(self) -> Dict[str, FrozenSet[str]]:
        """Immutable view of the membership table, for snapshots."""
        return {role: frozenset(members) for role, members in self._members.items()}

    def clone(self) -> AccessControl:
        cloned = AccessControl.__new__(AccessControl)
        cloned._members = {role: set(members) for role, members in self._members.items()}
        cloned._admins = dict(self._admins)
        return cloned

    def __repr__(self) -> str:
        parts = []
        for role in self.roles():
            label = _ROLE_LABELS.get(role, role[:10])
            parts.append(f"{label}={self.members(role)}")
        return f"AccessControl({', '.join(parts)})"


_ROLE_LABELS: Dict[str, str] = {
    DEFAULT_ADMIN_ROLE: "DEFAULT_ADMIN_ROLE",
    MINT_BURN_ROLE: "MINT_BURN_ROLE",
}
