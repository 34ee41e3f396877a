"""Fake token verifier: resolves registered tokens for testing."""

from storefront.identity.verifier import TokenVerifier


class FakeTokenVerifier(TokenVerifier):
    """Verifier that accepts only tokens registered in memory."""

    def __init__(self, tokens: dict[str, dict] | None = None):
        self.tokens: dict[str, dict] = dict(tokens or {})
        self.verified: list[str] = []

    def register(self, token: str, claims: dict) -> None:
        self.tokens[token] = claims

    def verify(self, token: str) -> dict:
        self.verified.append(token)
        if token not in self.tokens:
            raise ValueError("Unknown token")
        return self.tokens[token]

    def reset(self):
        """Forget registered tokens and recorded calls."""
        self.tokens.clear()
        self.verified.clear()
