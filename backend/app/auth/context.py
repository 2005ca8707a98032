from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AuthContext:
    """Who is calling, resolved once at the request boundary.

    ``org_id`` is the internal ``Organization.id`` of the caller's active
    organization (already mapped from the identity provider's external id),
    or ``None`` when the caller has no active organization.
    """

    principal_id: str
    org_id: Optional[int] = None
    org_role: Optional[str] = None

    @property
    def has_active_org(self) -> bool:
        return self.org_id is not None


@dataclass(frozen=True)
class AdminPolicy:
    """Single designated principal allowed to read every tenant's data."""

    admin_user_id: Optional[str] = None

    @property
    def configured(self) -> bool:
        return bool(self.admin_user_id)

    def is_admin(self, ctx: AuthContext) -> bool:
        return self.configured and ctx.principal_id == self.admin_user_id


__all__ = ["AuthContext", "AdminPolicy"]
