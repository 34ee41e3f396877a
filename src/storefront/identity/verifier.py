"""Token verifier port: abstract interface to the identity issuer."""

from abc import ABC, abstractmethod


class TokenVerifier(ABC):
    """Abstract interface for bearer-token verification adapters."""

    @abstractmethod
    def verify(self, token: str) -> dict:
        """Verify signature and expiry of ``token``.

        Returns:
            dict of token claims (``uid`` or ``sub``, optionally ``email`` and
            ``roles``). Raises any exception when the token is not valid.
        """
        ...
