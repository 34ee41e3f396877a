"""Principal: the verified identity attached to one operation invocation."""

from dataclasses import dataclass, field

import structlog

from storefront.exceptions import PermissionDenied

logger = structlog.get_logger(__name__)

ADMIN = "admin"
CUSTOMER = "customer"


@dataclass(frozen=True)
class Principal:
    """Identity id, optional email, and role set of a verified caller.

    Built once per request from verified token claims and passed explicitly
    to every operation that needs it. Never persisted.
    """

    id: str
    email: str | None = None
    roles: frozenset[str] = field(default_factory=frozenset)

    def has_role(self, role: str) -> bool:
        return role in self.roles


def authorize(principal: Principal, role: str) -> bool:
    """Return True when the principal holds ``role``."""
    return principal.has_role(role)


def require_role(principal: Principal, role: str) -> None:
    """Stop the current operation unless the principal holds ``role``."""
    if not authorize(principal, role):
        logger.warning("Authorization denied", principal_id=principal.id, required_role=role)
        raise PermissionDenied(f"unauthorized: must have '{role}' role", role=role)
