"""Access rules evaluated by the request guard"""
from typing import Optional, Protocol
from uuid import UUID

from app.auth.models import Claims
from app.auth.permissions_manager import PermissionsManager


class OwnedRecord(Protocol):
    user_id: UUID


class AccessRule:
    """
    A single authorization predicate over the caller's claims and,
    for record-level rules, the persisted record.
    """

    description = "Access denied"

    def allows(self, claims: Claims, permissions: PermissionsManager,
               record: Optional[OwnedRecord] = None) -> bool:
        raise NotImplementedError


class RequirePermission(AccessRule):
    """Caller's role must grant the permission."""

    def __init__(self, permission: str, description: str = "Access denied"):
        self.permission = permission
        self.description = description

    def allows(self, claims, permissions, record=None):
        return permissions.has_permission(claims.role.value, self.permission)

    def __repr__(self):
        return f"RequirePermission({self.permission!r})"


class OwnerOr(AccessRule):
    """Caller must own the record or hold the permission covering any record."""

    def __init__(self, any_permission: str, description: str = "Access denied"):
        self.any_permission = any_permission
        self.description = description

    def allows(self, claims, permissions, record=None):
        if record is None:
            return False
        if record.user_id == claims.account_id:
            return True
        return permissions.has_permission(claims.role.value, self.any_permission)

    def __repr__(self):
        return f"OwnerOr({self.any_permission!r})"


ADMIN_ONLY = "Access denied. Admin only."
NOT_OWNER = "Not authorized to access this feedback"

CAN_SUBMIT_FEEDBACK = RequirePermission("feedback:create")
CAN_LIST_OWN_FEEDBACK = RequirePermission("feedback:read:own")
CAN_LIST_ALL_FEEDBACK = RequirePermission("feedback:read:any", ADMIN_ONLY)
CAN_READ_FEEDBACK = OwnerOr("feedback:read:any", NOT_OWNER)
CAN_DELETE_FEEDBACK = OwnerOr("feedback:delete:any", "Not authorized to delete this feedback")
CAN_LIST_ACCOUNTS = RequirePermission("admin:users:read", ADMIN_ONLY)
CAN_VIEW_STATS = RequirePermission("admin:stats:read", ADMIN_ONLY)
