"""Principal resolution from a transport-level Authorization header."""

import structlog

from storefront.exceptions import AuthError
from storefront.identity.principal import Principal
from storefront.identity.verifier import TokenVerifier

logger = structlog.get_logger(__name__)

MISSING_HEADER = "authorization header missing"
INVALID_TOKEN = "invalid or expired token"


def parse_bearer(header: str | None) -> str:
    """Extract the token from an ``Authorization: Bearer <token>`` header value."""
    if not header:
        raise AuthError(MISSING_HEADER)

    parts = header.split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer" or not parts[1].strip():
        raise AuthError(INVALID_TOKEN)
    return parts[1].strip()


def principal_from_claims(claims: dict) -> Principal:
    """Map verified token claims onto a Principal.

    Non-string role entries are dropped; a non-list ``roles`` claim yields
    no roles.
    """
    uid = claims.get("uid") or claims.get("sub")
    if not isinstance(uid, str) or not uid:
        raise AuthError(INVALID_TOKEN)

    email = claims.get("email")
    if not isinstance(email, str):
        email = None

    raw_roles = claims.get("roles")
    roles = frozenset(r for r in raw_roles if isinstance(r, str)) if isinstance(raw_roles, list) else frozenset()

    return Principal(id=uid, email=email, roles=roles)


class PrincipalResolver:
    """Turns a raw bearer credential into a verified Principal."""

    def __init__(self, verifier: TokenVerifier):
        self.verifier = verifier

    def resolve(self, header: str | None) -> Principal:
        token = parse_bearer(header)

        try:
            claims = self.verifier.verify(token)
        except Exception as exc:
            # Verification details stay in the log; callers see the generic rejection.
            logger.info("Token verification failed", error=str(exc))
            raise AuthError(INVALID_TOKEN) from None

        if not isinstance(claims, dict):
            raise AuthError(INVALID_TOKEN)
        return principal_from_claims(claims)
