"""
SignatureScheme value object - Supported signing ecosystems.
"""

from enum import Enum

from notaire.domain.exceptions.base import UnsupportedSchemeError


class SignatureScheme(str, Enum):
    """Signature scheme a verifier implements."""

    ETHEREUM = "ethereum"
    SOLANA = "solana"

    def __str__(self) -> str:
        """String representation."""
        return self.value

    @classmethod
    def parse(cls, name: "str | SignatureScheme") -> "SignatureScheme":
        """
        Parse scheme name (case-insensitive).

        Args:
            name: Scheme name or SignatureScheme member

        Returns:
            Matching SignatureScheme

        Raises:
            UnsupportedSchemeError: If name matches no scheme
        """
        if isinstance(name, cls):
            return name

        normalized = str(name).strip().lower()
        for scheme in cls:
            if scheme.value == normalized:
                return scheme

        raise UnsupportedSchemeError(str(name))
