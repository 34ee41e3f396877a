"""HMAC-signed bearer tokens.

A token is ``base64url(json claims) + "." + base64url(hmac_sha256(claims))``
with an optional ``exp`` claim in epoch seconds. Used as the development
issuer and by ``manage.py issue-token``.
"""

import base64
import hmac
import json
import time
from hashlib import sha256

from storefront.identity.verifier import TokenVerifier


class TokenError(ValueError):
    """Raised when a signed token is malformed, forged, or expired."""


def _b64encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode().rstrip("=")


def _b64decode(value: str) -> bytes:
    return base64.urlsafe_b64decode(value + "=" * (-len(value) % 4))


def sign_token(payload: dict, secret: str) -> str:
    data = json.dumps(payload, separators=(",", ":")).encode()
    sig = hmac.new(secret.encode(), data, sha256).digest()
    return _b64encode(data) + "." + _b64encode(sig)


def issue_token(claims: dict, secret: str, ttl: int | None = None) -> str:
    """Sign ``claims``, adding an expiry ``ttl`` seconds from now when given."""
    payload = dict(claims)
    if ttl is not None:
        payload["exp"] = int(time.time()) + ttl
    return sign_token(payload, secret)


class SignedTokenVerifier(TokenVerifier):
    def __init__(self, secret: str):
        self._secret = secret

    def verify(self, token: str) -> dict:
        try:
            data_b64, sig_b64 = token.split(".")
            data = _b64decode(data_b64)
            sig = _b64decode(sig_b64)
        except ValueError as exc:
            raise TokenError("Malformed token") from exc

        expected = hmac.new(self._secret.encode(), data, sha256).digest()
        if not hmac.compare_digest(sig, expected):
            raise TokenError("Invalid signature")

        try:
            payload = json.loads(data.decode())
        except ValueError as exc:
            raise TokenError("Malformed token payload") from exc
        if not isinstance(payload, dict):
            raise TokenError("Malformed token payload")

        if payload.get("exp") and time.time() > payload["exp"]:
            raise TokenError("Token expired")
        return payload
